#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-language syntax rules for declaration collection.

Each rule set tells the collector which tree-sitter node kinds declare a
variable, which statements are loops, and how to read a declared name. A loop
control clause is any child of a loop statement other than its body, so the
header of ``for (int i = 0; i < n; i++) {...}`` is excluded while the body is
not.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from .errors import UnsupportedLanguageError
from .ts_utils import ts_node_text


@dataclass(frozen=True)
class LanguageRules:
    name: str
    declaration_types: FrozenSet[str]
    loop_statement_types: FrozenSet[str]
    name_field: str = "name"
    body_field: str = "body"
    name_types: FrozenSet[str] = frozenset({"identifier"})

    def is_declaration(self, node) -> bool:
        return node.type in self.declaration_types

    def is_loop_control(self, node) -> bool:
        parent = node.parent
        if parent is None or parent.type not in self.loop_statement_types:
            return False
        body = parent.child_by_field_name(self.body_field)
        # siblings never share a span, so the span identifies the body
        return body is None or (node.start_byte, node.end_byte) != (body.start_byte, body.end_byte)

    def declared_name(self, node, src_bytes: bytes) -> Optional[str]:
        """Name bound by a declaration node, or None for patterns/destructuring."""
        name_node = node.child_by_field_name(self.name_field)
        if name_node is None or name_node.type not in self.name_types:
            return None
        return ts_node_text(src_bytes, name_node)


JAVA_RULES = LanguageRules(
    name="java",
    # fields, locals and interface constants all use variable_declarator;
    # parameters, catch/resource and for-each variables do not
    declaration_types=frozenset({"variable_declarator"}),
    loop_statement_types=frozenset({"for_statement", "enhanced_for_statement"}),
)

JAVASCRIPT_RULES = LanguageRules(
    name="javascript",
    declaration_types=frozenset({"variable_declarator"}),
    loop_statement_types=frozenset({"for_statement", "for_in_statement"}),
)

LANGUAGE_RULES: Dict[str, LanguageRules] = {
    JAVA_RULES.name: JAVA_RULES,
    JAVASCRIPT_RULES.name: JAVASCRIPT_RULES,
}


def get_rules(language: str) -> LanguageRules:
    try:
        return LANGUAGE_RULES[language]
    except KeyError:
        raise UnsupportedLanguageError(language) from None

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Declaration collection and name statistics.

One traversal of a parsed source unit gathers declared variable names in
source order, skipping declarations that sit inside a loop control clause
(those are not counted at all). The names are then classified and reduced to
a NameStatistics value.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .config import DEFAULT_LANGUAGE
from .dictionary import WordDictionary, default_dictionary
from .errors import NoDeclarationsError
from .grammar import LanguageRules, get_rules
from .identifiers import is_descriptive
from .ts_utils import parse_source, traverse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameStatistics:
    num_descriptive: int
    num_total: int
    avg_length: float
    total_length: int = 0

    def merge(self, other: "NameStatistics") -> "NameStatistics":
        total = self.num_total + other.num_total
        length = self.total_length + other.total_length
        return NameStatistics(
            num_descriptive=self.num_descriptive + other.num_descriptive,
            num_total=total,
            avg_length=length / total,
            total_length=length,
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class TraversalState:
    """Mutable state of a single traversal; never shared between calls."""
    loop_control_depth: int = 0
    declarations: List[str] = field(default_factory=list)

    @property
    def in_loop_control(self) -> bool:
        return self.loop_control_depth > 0


class DeclarationListener:
    """Enter/exit callbacks that record declared names outside loop headers."""

    def __init__(self, rules: LanguageRules, src_bytes: bytes, state: Optional[TraversalState] = None):
        self.rules = rules
        self.src_bytes = src_bytes
        self.state = state if state is not None else TraversalState()

    def enter_node(self, node) -> None:
        if self.rules.is_loop_control(node):
            self.state.loop_control_depth += 1
            return
        if not self.rules.is_declaration(node):
            return
        name = self.rules.declared_name(node, self.src_bytes)
        if name is None:
            return
        if self.state.in_loop_control:
            logger.debug("Skipping loop control declaration %r", name)
            return
        self.state.declarations.append(name)

    def exit_node(self, node) -> None:
        if self.rules.is_loop_control(node):
            self.state.loop_control_depth -= 1


def collect_declarations(source: str, language: str = DEFAULT_LANGUAGE) -> List[str]:
    """Declared variable names of ``source`` in order, loop control variables excluded.

    Raises MalformedSourceError if the source does not parse cleanly.
    """
    rules = get_rules(language)
    src_bytes, root = parse_source(source, rules.name)
    listener = DeclarationListener(rules, src_bytes)
    traverse(root, listener)
    logger.debug("Collected %d declarations: %s", len(listener.state.declarations), listener.state.declarations)
    return listener.state.declarations


def classify_names(names: Iterable[str], dictionary: Optional[WordDictionary] = None) -> List[Tuple[str, bool]]:
    """Pair each name with its descriptiveness, in order."""
    words = default_dictionary() if dictionary is None else dictionary
    return [(name, is_descriptive(name, words)) for name in names]


def summarize_classified(classified: Iterable[Tuple[str, bool]]) -> NameStatistics:
    """Aggregate counts and the mean name length of already classified names.

    Raises NoDeclarationsError for an empty name list, since the mean is undefined.
    """
    num_total = 0
    num_descriptive = 0
    total_length = 0
    for name, descriptive in classified:
        num_total += 1
        if descriptive:
            num_descriptive += 1
        total_length += len(name)
    if num_total == 0:
        raise NoDeclarationsError()
    return NameStatistics(
        num_descriptive=num_descriptive,
        num_total=num_total,
        avg_length=total_length / num_total,
        total_length=total_length,
    )


def summarize_names(names: Iterable[str], dictionary: Optional[WordDictionary] = None) -> NameStatistics:
    return summarize_classified(classify_names(names, dictionary))


def collect_name_statistics(
    source: str,
    dictionary: Optional[WordDictionary] = None,
    language: str = DEFAULT_LANGUAGE,
) -> NameStatistics:
    return summarize_names(collect_declarations(source, language), dictionary)

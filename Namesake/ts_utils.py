#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tree-sitter utilities.

Provides parser construction, source parsing with syntax-error reporting,
generic node traversal (plain DFS and enter/exit events), and safe node text
extraction across the package.
"""

from typing import Iterable, Optional, Tuple

from tree_sitter import Parser as TS_Parser
try:
    # Maintained bundle matching tree-sitter>=0.23/0.25 APIs
    from tree_sitter_language_pack import get_parser  # type: ignore
except ModuleNotFoundError as _e:  # pragma: no cover - fail loudly at runtime
    raise RuntimeError(
        "tree-sitter-language-pack is required with modern tree-sitter. "
        "Install it (e.g., `pip install tree-sitter-language-pack`) and rerun."
    ) from _e

from .errors import MalformedSourceError

ENTER = "enter"
EXIT = "exit"


def build_ts_parser(lang_name: str) -> TS_Parser:
    """Return a configured tree-sitter Parser bound to the language name."""
    return get_parser(lang_name)


def ts_node_text(source: bytes, node) -> str:
    """Safely decode the bytes covering the node span to UTF-8 text."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def walk(node) -> Iterable:
    """Iterative DFS over a tree-sitter node's descendants (node included)."""
    stack = [node]
    while stack:
        n = stack.pop()
        yield n
        stack.extend(reversed(n.children))


def walk_events(node) -> Iterable[Tuple[str, object]]:
    """Iterative DFS yielding (ENTER, node) before and (EXIT, node) after its subtree."""
    stack = [(node, False)]
    while stack:
        n, leaving = stack.pop()
        if leaving:
            yield EXIT, n
            continue
        yield ENTER, n
        stack.append((n, True))
        stack.extend((c, False) for c in reversed(n.children))


def traverse(node, listener) -> None:
    """Drive ``listener.enter_node`` / ``listener.exit_node`` over the subtree."""
    for event, n in walk_events(node):
        if event == ENTER:
            listener.enter_node(n)
        else:
            listener.exit_node(n)


def first_syntax_error(source: bytes, root) -> Optional[MalformedSourceError]:
    # ERROR nodes and zero-width missing nodes, first in source order
    for n in walk(root):
        if n.is_missing:
            message = f"missing '{n.type}'"
        elif n.type == "ERROR":
            snippet = ts_node_text(source, n).strip().splitlines()
            message = f"syntax error near '{snippet[0][:40]}'" if snippet else "syntax error"
        else:
            continue
        row, column = n.start_point
        return MalformedSourceError(row + 1, column, message)
    return None


def parse_source(source: str, lang_name: str):
    """Parse ``source`` and return ``(src_bytes, root_node)``.

    Raises MalformedSourceError carrying the first error's line and column
    when the tree contains ERROR or missing nodes.
    """
    src_bytes = source.encode("utf-8")
    tree = build_ts_parser(lang_name).parse(src_bytes)
    root = tree.root_node
    if root.has_error:
        err = first_syntax_error(src_bytes, root)
        if err is None:
            err = MalformedSourceError(1, 0, "syntax error")
        raise err
    return src_bytes, root

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exceptions raised by namesake.
"""


class NamesakeError(Exception):
    """Base class for all namesake errors."""


class MalformedSourceError(NamesakeError, ValueError):
    """The parser could not build a clean tree for a source unit."""

    def __init__(self, line: int, column: int, message: str):
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"line {line}:{column} {message}")


class NoDeclarationsError(NamesakeError, ValueError):
    """No countable declarations were found, so no average length exists."""

    def __init__(self, message: str = "no variable declarations found"):
        super().__init__(message)


class UnsupportedLanguageError(NamesakeError, ValueError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"unsupported language: {language!r}")

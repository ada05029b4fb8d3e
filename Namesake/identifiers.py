#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Identifier word splitting and descriptiveness classification.

An identifier is descriptive when it is longer than one character and every
word produced by splitting it on casing and digit boundaries is either a
dictionary word (compared lowercase) or purely numeric.
"""

import re
from typing import List, Optional

from .dictionary import WordDictionary, default_dictionary


# Boundaries: before a digit run, at a lower->upper transition, and before the
# last capital of an acronym that starts a new word ("HTTPServer" -> HTTP|Server).
WORD_SPLIT_RE = re.compile(
    r"(?<=\D)(?=\d)"
    r"|(?<=[^A-Z])(?=[A-Z])"
    r"|(?<=.)(?=[A-Z][a-z])"
)


def split_identifier_words(identifier: str) -> List[str]:
    return [w for w in WORD_SPLIT_RE.split(identifier) if w]


def is_known_word(word: str, dictionary: WordDictionary) -> bool:
    return word.isdecimal() or word.lower() in dictionary


def is_descriptive(identifier: str, dictionary: Optional[WordDictionary] = None) -> bool:
    """Return True if every word of ``identifier`` is a known word or a number.

    Single-character identifiers are never descriptive, even when the letter is
    itself a dictionary word.
    """
    if len(identifier) == 1:
        return False
    words = default_dictionary() if dictionary is None else dictionary
    return all(is_known_word(w, words) for w in split_identifier_words(identifier))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Word dictionary used to judge identifier words.

A dictionary is an immutable set of lowercase words. Only key presence
matters; the values of a JSON mapping (``{"word": 1}``) are ignored.
The default dictionary is loaded once per process and never mutated, so it can
be shared freely between threads.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from importlib import resources
from itertools import chain
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Union

import nltk

from .config import BUNDLED_DICTIONARY, DICTIONARY_ENV_VAR

logger = logging.getLogger(__name__)


class WordDictionary:
    """Read-only, case-normalized word lookup."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words)"


def _parse_words(text: str, suffix: str) -> Iterable[str]:
    if suffix == ".json":
        data = json.loads(text)
        if isinstance(data, dict):
            return data.keys()
        if isinstance(data, list):
            return [w for w in data if isinstance(w, str)]
        raise ValueError("dictionary JSON must be an object or an array of words")
    return text.splitlines()


def load_dictionary(path: Union[str, Path]) -> WordDictionary:
    """Load a dictionary from a JSON mapping/array or a one-word-per-line text file."""
    p = Path(path)
    words = WordDictionary(_parse_words(p.read_text(encoding="utf-8"), p.suffix.lower()))
    logger.info("Loaded %d dictionary words from %s", len(words), p)
    return words


def load_bundled_dictionary() -> WordDictionary:
    res = resources.files(__package__).joinpath("data").joinpath(BUNDLED_DICTIONARY)
    words = WordDictionary(_parse_words(res.read_text(encoding="utf-8"), ".json"))
    logger.info("Loaded %d bundled dictionary words", len(words))
    return words


def load_corpus_words() -> List[str]:
    """English word list from the nltk ``words`` corpus, downloaded on first use."""
    try:
        nltk.data.find("corpora/words")
    except LookupError:
        nltk.download("words", quiet=True)
    return nltk.corpus.words.words()


@lru_cache(maxsize=None)
def default_dictionary() -> WordDictionary:
    """Process-wide dictionary.

    ``$NAMESAKE_DICTIONARY`` replaces everything when set. Otherwise the nltk
    English word list is combined with the bundled list of programming
    abbreviations (``num``, ``msg``, ``tmp``...), which the corpus lacks.
    """
    override = os.environ.get(DICTIONARY_ENV_VAR)
    if override:
        return load_dictionary(override)
    bundled = load_bundled_dictionary()
    try:
        corpus = load_corpus_words()
    except LookupError:
        logger.warning("nltk 'words' corpus unavailable; using the bundled word list only")
        return bundled
    words = WordDictionary(chain(corpus, bundled))
    logger.info("Loaded %d default dictionary words", len(words))
    return words

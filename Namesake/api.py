#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Public, ergonomic API for namesake.

Facade exposing a minimal, stable interface so users can:
- classify a single identifier
- compute name statistics for one source string or file
- compute statistics over many files, isolating per-file failures
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .collector import NameStatistics, classify_names, collect_declarations, summarize_classified, summarize_names
from .dictionary import WordDictionary, default_dictionary
from .errors import MalformedSourceError, NoDeclarationsError, UnsupportedLanguageError
from .scanner import iter_source_files, language_for_path, read_text

logger = logging.getLogger(__name__)


def statistics_from_file(
    path: Union[str, Path],
    dictionary: Optional[WordDictionary] = None,
    language: Optional[str] = None,
) -> NameStatistics:
    p = Path(path)
    lang = language or language_for_path(p)
    if lang is None:
        raise UnsupportedLanguageError(p.suffix or p.name)
    return summarize_names(collect_declarations(read_text(p), lang), dictionary)


def _file_entry(p: Path, lang: str, words: WordDictionary, include_names: bool) -> Dict[str, Any]:
    classified = classify_names(collect_declarations(read_text(p), lang), words)
    stats = summarize_classified(classified)
    entry: Dict[str, Any] = {"path": str(p), "language": lang, **stats.to_dict()}
    if include_names:
        entry["names"] = [{"name": n, "descriptive": d} for n, d in classified]
    return entry


def statistics_from_paths(
    paths: Iterable[Union[str, Path]],
    dictionary: Optional[WordDictionary] = None,
    *,
    include_names: bool = False,
) -> Dict[str, Any]:
    """Compute statistics for every supported file under ``paths``.

    A malformed, unreadable or declaration-free file is reported in ``errors`` and
    does not stop the others. ``summary`` merges all successful files and is
    None when none succeeded.
    """
    words = default_dictionary() if dictionary is None else dictionary
    files: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []
    summary: Optional[NameStatistics] = None

    for root in paths:
        for p in iter_source_files(Path(root)):
            lang = language_for_path(p)
            try:
                entry = _file_entry(p, lang, words, include_names)
            except MalformedSourceError as e:
                logger.warning("Skipping %s: %s", p, e)
                errors.append({"path": str(p), "error": "malformed_source",
                               "line": e.line, "column": e.column, "message": e.message})
                continue
            except NoDeclarationsError as e:
                logger.warning("Skipping %s: %s", p, e)
                errors.append({"path": str(p), "error": "no_declarations", "message": str(e)})
                continue
            except OSError as e:
                logger.warning("Skipping %s: %s", p, e)
                errors.append({"path": str(p), "error": "unreadable", "message": str(e)})
                continue
            files.append(entry)
            stats = NameStatistics(entry["num_descriptive"], entry["num_total"],
                                   entry["avg_length"], entry["total_length"])
            summary = stats if summary is None else summary.merge(stats)

    return {
        "summary": summary.to_dict() if summary else None,
        "files": files,
        "errors": errors,
    }

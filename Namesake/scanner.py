#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Filesystem scanning helpers: iterate supported source files and detect their language.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from .config import LANG_BY_EXT, IGNORE_DIRS


def should_skip_dir(dirname: str) -> bool:
    name = dirname.strip()
    if name in IGNORE_DIRS:
        return True
    if name.startswith(".") and name not in {".", ".."}:
        return True
    return False


def language_for_path(p: Path) -> Optional[str]:
    return LANG_BY_EXT.get(p.suffix.lower())


def iter_source_files(root: Path) -> Iterable[Path]:
    root = root.resolve()
    if root.is_file():
        if language_for_path(root):
            yield root
        return
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not should_skip_dir(d))
        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if language_for_path(p):
                yield p


def read_text(p: Path) -> str:
    return p.read_bytes().decode("utf-8", errors="replace")

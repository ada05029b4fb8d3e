#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration constants for namesake.

Holds language mappings, ignore lists, and dictionary resource locations used
across the package. Keep this module dependency-free to avoid import cycles.
"""

from typing import Dict, Set


# Map file extensions to language names recognized by tree-sitter-language-pack
LANG_BY_EXT: Dict[str, str] = {
    ".java": "java",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}

DEFAULT_LANGUAGE: str = "java"


# Directory names to skip when scanning a repository
IGNORE_DIRS: Set[str] = {
    ".git",
    "__pycache__",
    ".venv",
    "venv",
    "build",
    "dist",
    "target",
    "out",
    "node_modules",
    ".gradle",
    ".idea",
}


# Dictionary resource: env var override, else the bundled word list
DICTIONARY_ENV_VAR: str = "NAMESAKE_DICTIONARY"
BUNDLED_DICTIONARY: str = "words_dictionary.json"

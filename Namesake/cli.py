#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command-line interface: report identifier descriptiveness for source files.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .api import statistics_from_paths
from .dictionary import default_dictionary, load_dictionary


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="namesake")
    ap.add_argument("paths", nargs="+", help="Source files or directories (.java, .js).")
    ap.add_argument("--dictionary", default=None,
                    help="Word list (JSON object/array or one word per line). Defaults to the bundled list.")
    ap.add_argument("--names", action="store_true", default=False,
                    help="Include every collected name and its classification.")
    ap.add_argument("-v", "--verbose", action="store_true", default=False)
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    missing = [p for p in args.paths if not os.path.exists(p)]
    if missing:
        print(json.dumps({"error": f"path not found: {missing[0]}"}))
        return 2

    words = load_dictionary(args.dictionary) if args.dictionary else default_dictionary()
    report = statistics_from_paths(args.paths, words, include_names=args.names)
    if not report["files"] and not report["errors"]:
        print(json.dumps({"error": "no supported source files found"}))
        return 2

    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

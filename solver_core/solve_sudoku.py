# -*- coding: utf-8 -*-
"""
コマンドラインから数独を解くためのエントリポイントです。

    sudoku-solve puzzle.txt
    python -m solver_core.solve_sudoku puzzle.txt --policy first

入力ファイルは 81 個の数字（0 は空きマス、空白・改行は無視）か、
ヘッダなしの 9×9 CSV です。
解が複数ある場合でも、最初に見つかった1つだけを表示します。
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from sudoku_solver import MalformedInput, SearchExhausted, format_report, load_grid, solve_grid
from sudoku_solver.config import SEARCH_TRACE_ENABLED, SELECTION_POLICIES, SELECTION_POLICY
from sudoku_solver.logging_utils import get_logger

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        description=(
            "Solve a 9x9 sudoku with AC-3 propagation and backtracking. "
            "No uniqueness check is made: if the puzzle has several solutions, "
            "the first one found is printed."
        ),
    )

    parser.add_argument(
        "path",
        help="Puzzle file: 81 digits (0 = blank, whitespace ignored) or a 9x9 CSV",
    )
    parser.add_argument(
        "--policy",
        choices=SELECTION_POLICIES,
        default=SELECTION_POLICY,
        help="How to pick the next cell to branch on (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show DEBUG logs",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=SEARCH_TRACE_ENABLED,
        help="Write every branching decision to logs/search_trace.log",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        puzzle = load_grid(args.path)
        result = solve_grid(puzzle, policy=args.policy, trace=args.trace)
    except (MalformedInput, SearchExhausted, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

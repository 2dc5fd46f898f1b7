# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

solver_core/solve_sudoku.py などから:

    from sudoku_solver import solve

と呼び出されることを想定しています。

ここでは、盤面（テキスト / 数字のリスト / pandas.DataFrame / Grid）を受け取り、
1. 盤面のパース
2. 初期盤面の制約伝播（AC-3）
3. バックトラック探索
4. 解の検証
5. 表示用の結果構築
を順番に呼び出します。

解が複数ある盤面でも一意性の確認は行わず、
選択ポリシーと候補の順序で最初に見つかった解を返します。
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Union

import pandas as pd

from .config import SELECTION_POLICY, SEARCH_TRACE_ENABLED
from .csp.search import solve_grid
from .errors import MalformedInput, SearchExhausted, SudokuError
from .eval.validity import find_conflicts, preserves_clues
from .grid.model import assigned_cells
from .grid.parser import build_grid, grid_from_dataframe, load_grid, parse_grid
from .logging_utils import get_logger
from .postprocess.render_result import build_result, format_report, grid_to_array, render_grid
from .types import Assigned, Grid, SearchResult, SearchStats, Unassigned

__all__ = [
    "Assigned",
    "Grid",
    "MalformedInput",
    "SearchExhausted",
    "SearchResult",
    "SearchStats",
    "SudokuError",
    "Unassigned",
    "format_report",
    "load_grid",
    "parse_grid",
    "render_grid",
    "solve",
    "solve_grid",
    "to_grid",
]

logger = get_logger()

Board = Union[str, Sequence[int], pd.DataFrame, Grid]


def to_grid(board: Board) -> Grid:
    """
    いろいろな形式の盤面を Grid に揃えます。
    """
    if isinstance(board, Grid):
        return board
    if isinstance(board, pd.DataFrame):
        return grid_from_dataframe(board)
    if isinstance(board, str):
        return parse_grid(board)
    return build_grid(list(board))


def solve(
    board: Board,
    policy: str = SELECTION_POLICY,
    trace: bool = SEARCH_TRACE_ENABLED,
) -> Dict[str, Any]:
    """
    数独を解くメイン関数。

    Raises
    ------
    MalformedInput
        盤面が 81 個の数字になっていない場合。
    SearchExhausted
        解が存在しない場合。
    """
    logger.info("=== solve() START ===")

    # 1) 盤面パース
    puzzle = to_grid(board)
    logger.info("Clues: %d, policy=%s", len(assigned_cells(puzzle)), policy)

    # 2) 3) 伝播 + 探索
    result = solve_grid(puzzle, policy=policy, trace=trace)
    logger.info(
        "Search finished: called=%d, failed=%d, contradictions=%d",
        result.stats.called,
        result.stats.failed,
        result.stats.contradictions,
    )

    # 4) 重複チェック（最終確認）
    solved = grid_to_array(result.grid)
    for kind, idx, digit in find_conflicts(solved):
        logger.warning("[WARNING] Duplicate %d detected in %s %d", digit, kind, idx)
    if not preserves_clues(grid_to_array(puzzle), solved):
        logger.warning("[WARNING] Solution does not keep the original clues")

    # 5) 表示用の結果を構築
    out = build_result(puzzle, result)

    logger.info("=== solve() END ===")
    return out

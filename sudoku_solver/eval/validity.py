# sudoku_solver/eval/validity.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..config import BOX_SIZE, GRID_SIZE

# (unit kind, unit index, digit)
Conflict = Tuple[str, int, int]


def iter_units(board: np.ndarray):
    """
    盤面の 27 個のユニット（行・列・ボックス）を (kind, index, values) で返す。
    """
    for i in range(GRID_SIZE):
        yield "row", i, board[i, :]
    for j in range(GRID_SIZE):
        yield "col", j, board[:, j]
    for b in range(GRID_SIZE):
        r, c = BOX_SIZE * (b // BOX_SIZE), BOX_SIZE * (b % BOX_SIZE)
        yield "box", b, board[r:r + BOX_SIZE, c:c + BOX_SIZE].ravel()


def find_conflicts(board: np.ndarray) -> List[Conflict]:
    """
    同じユニット内で重複している 0 以外の数字を列挙する。
    """
    board = np.asarray(board, dtype=int)
    conflicts: List[Conflict] = []

    for kind, idx, values in iter_units(board):
        filled = values[values != 0]
        digits, counts = np.unique(filled, return_counts=True)
        for d in digits[counts > 1]:
            conflicts.append((kind, idx, int(d)))

    return conflicts


def is_valid_solution(board: np.ndarray) -> bool:
    """
    すべて埋まっていて、どのユニットにも 1〜9 がちょうど1回ずつ入っていれば True。
    """
    board = np.asarray(board, dtype=int)
    if board.shape != (GRID_SIZE, GRID_SIZE):
        return False

    expected = np.arange(1, GRID_SIZE + 1)
    return all(
        np.array_equal(np.sort(values), expected)
        for _, _, values in iter_units(board)
    )


def preserves_clues(puzzle: np.ndarray, board: np.ndarray) -> bool:
    """
    入力でヒントだったマスが、解でも同じ値のままになっているか。
    """
    puzzle = np.asarray(puzzle, dtype=int)
    board = np.asarray(board, dtype=int)
    mask = puzzle != 0
    return bool(np.array_equal(puzzle[mask], board[mask]))

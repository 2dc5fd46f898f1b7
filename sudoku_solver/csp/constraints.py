# -*- coding: utf-8 -*-
"""
数独の「異なる値でなければならない」制約の相手（近傍）を計算するモジュールです。

近傍はマス番号だけから決まるので、保存せずに必要なときに計算します。
"""

from __future__ import annotations

from typing import List, Tuple

from ..config import BOX_SIZE, GRID_SIZE
from ..types import CellIndex


def to_row_col(index: CellIndex) -> Tuple[int, int]:
    """マス番号を (row, col) に変換します。"""
    return divmod(index, GRID_SIZE)


def neighbors(index: CellIndex) -> List[CellIndex]:
    """
    index と同じ行・列・ボックスに属する、index 以外の 20 マスを返します。

    並び順は「同じ行の 8 マス → 同じ列の 8 マス →
    行にも列にも含まれないボックス内の 4 マス」です。
    """
    row, col = to_row_col(index)
    peers: List[CellIndex] = []

    # row peers
    for c in range(GRID_SIZE):
        if c != col:
            peers.append(row * GRID_SIZE + c)

    # column peers
    for r in range(GRID_SIZE):
        if r != row:
            peers.append(r * GRID_SIZE + col)

    # box peers（行・列で数えたものは除く）
    box_row, box_col = BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)
    for r in range(box_row, box_row + BOX_SIZE):
        if r == row:
            continue
        for c in range(box_col, box_col + BOX_SIZE):
            if c == col:
                continue
            peers.append(r * GRID_SIZE + c)

    return peers

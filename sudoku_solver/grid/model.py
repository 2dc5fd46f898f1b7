# -*- coding: utf-8 -*-
"""
Grid に対する簡単な問い合わせをまとめたモジュールです。

- 確定済みマスの一覧（制約伝播の初期キューに使う）
- 次に分岐する未確定マスの選択
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from ..config import SELECTION_POLICIES, SELECTION_POLICY
from ..types import Assigned, CellIndex, Grid, Unassigned


def assigned_cells(grid: Grid) -> List[Tuple[CellIndex, int]]:
    """確定済みマスの (マス番号, 値) をマス番号順に返します。"""
    return [
        (idx, cell.value)
        for idx, cell in enumerate(grid)
        if isinstance(cell, Assigned)
    ]


def is_complete(grid: Grid) -> bool:
    """すべてのマスが確定していれば True を返します。"""
    return all(isinstance(cell, Assigned) for cell in grid)


def pick_unassigned(
    grid: Grid,
    policy: str = SELECTION_POLICY,
) -> Optional[Tuple[CellIndex, Set[int]]]:
    """
    次に割り当てるべき未確定マスを選びます。

    Parameters
    ----------
    policy : str
        - "mrv"   : 候補数が最も少ないマス。同数ならマス番号の小さい方。
        - "first" : マス番号順で最初の未確定マス。

    Returns
    -------
    (index, candidates) or None
        未確定マスが1つも無ければ None（＝盤面完成）。
    """
    if policy not in SELECTION_POLICIES:
        raise ValueError(f"unknown selection policy: {policy!r}")

    unassigned = (
        (idx, cell.candidates)
        for idx, cell in enumerate(grid)
        if isinstance(cell, Unassigned)
    )

    if policy == "first":
        return next(unassigned, None)

    # min() は同じキーなら先に出てきた方（＝番号の小さい方）を返す
    return min(unassigned, key=lambda item: len(item[1]), default=None)

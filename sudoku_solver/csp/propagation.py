# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

数独の制約はすべて「同じ行・列・ボックスのマスは異なる値」という
2 マス間の not-equal 制約なので、AC-3 は次のような単純な形になります。

1. 確定したマス (index, value) をキューに積む
2. キューから1つ取り出し、その近傍の未確定マスの候補から value を消す
3. 候補が1つだけになったマスは確定させ、キューに積む（連鎖）
4. 近傍に同じ値で確定したマスがあれば矛盾

矛盾は探索中にごく普通に起きる出来事なので、例外ではなく
戻り値 None で呼び出し側に知らせます。
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..logging_utils import get_logger
from ..types import Assigned, CellIndex, Grid, Unassigned
from .constraints import neighbors

logger = get_logger()


def propagate(
    grid: Grid,
    queue: List[Tuple[CellIndex, int]],
) -> Optional[Grid]:
    """
    確定したマスの影響を、不動点に達するまで盤面全体に伝播させます。

    Parameters
    ----------
    grid : Grid
        伝播を行う盤面。この関数は grid をその場で書き換えます。
        呼び出し側は、他の分岐が持っていない Grid を渡してください。
    queue : list of (index, value)
        確定したばかりのマス。後入れ先出し（LIFO）で処理します。

    Returns
    -------
    Grid or None
        矛盾が無ければ伝播後の grid。
        矛盾を見つけた時点で None を返し、それ以上は何もしません。
    """
    queue = list(queue)

    while queue:
        x, val = queue.pop()
        for y in neighbors(x):
            cell = grid[y]

            if isinstance(cell, Assigned):
                if cell.value == val:
                    logger.debug("inconsistent: cells %d and %d both hold %d", x, y, val)
                    return None
                continue

            domain = cell.candidates
            if val not in domain:
                continue
            domain.discard(val)

            if not domain:
                logger.debug("inconsistent: cell %d has no candidates left", y)
                return None

            # 候補が1つになったら確定させ、その影響もさらに伝播させる
            if len(domain) == 1:
                (only,) = domain
                grid[y] = Assigned(only)
                queue.append((y, only))

    return grid


def is_arc_consistent(grid: Grid) -> bool:
    """
    どの未確定マスの候補にも、近傍の確定値が含まれていないかを判定します。

    propagate() が不動点に達した後は常に True になるはずです。
    """
    for y, cell in enumerate(grid):
        if not isinstance(cell, Unassigned):
            continue
        for x in neighbors(y):
            other = grid[x]
            if isinstance(other, Assigned) and other.value in cell.candidates:
                return False
    return True

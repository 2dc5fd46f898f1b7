# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ..config import GRID_SIZE, RENDER_BLANK
from ..types import Assigned, Grid, SearchResult


def grid_to_array(grid: Grid) -> np.ndarray:
    """
    Grid を 9×9 の numpy 配列に変換します。未確定マスは 0 になります。
    """
    values = [cell.value if isinstance(cell, Assigned) else 0 for cell in grid]
    return np.array(values, dtype=int).reshape(GRID_SIZE, GRID_SIZE)


def render_grid(grid: Grid, blank: str = RENDER_BLANK) -> str:
    """
    1 マス 1 文字で 9 行の文字列にします。未確定マスは blank で表示します。
    """
    chars = [str(cell.value) if isinstance(cell, Assigned) else blank for cell in grid]
    rows = [
        "".join(chars[r * GRID_SIZE:(r + 1) * GRID_SIZE])
        for r in range(GRID_SIZE)
    ]
    return "\n".join(rows)


def build_result(puzzle: Grid, result: SearchResult) -> Dict[str, Any]:
    """
    探索結果を、API やテストで扱いやすい dict にまとめます。

    Returns
    -------
    dict
        - solved_board : 9×9 の数字リスト
        - stats        : called / failed / contradictions
        - shape        : 盤面の形
        - clue_count   : 入力のヒント数
    """
    solved = grid_to_array(result.grid)
    clue_count = int(np.count_nonzero(grid_to_array(puzzle)))

    return {
        "solved_board": solved.tolist(),
        "stats": {
            "called": result.stats.called,
            "failed": result.stats.failed,
            "contradictions": result.stats.contradictions,
        },
        "shape": solved.shape,
        "clue_count": clue_count,
    }


def format_report(result: SearchResult) -> str:
    """
    CLI で表示するテキスト（カウンタ → 空行 → 盤面）を作ります。
    """
    lines = [
        f"backtrack called: {result.stats.called}",
        f"backtrack failed: {result.stats.failed}",
        "",
        render_grid(result.grid),
    ]
    return "\n".join(lines)

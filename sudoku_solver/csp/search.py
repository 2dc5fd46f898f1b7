# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 未確定マスを1つ選ぶ（選べなければ盤面完成）
2. そのマスの候補を小さい順に1つずつ試す
3. 親の盤面をコピーして値を書き込み、制約伝播（propagate）する
4. 矛盾しなければ再帰的に探索を続ける
5. 失敗したらコピーを捨てて次の候補へ

各分岐は自分専用の Grid を持つので、失敗時の「元に戻す」処理は不要です。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import SEARCH_LOG_INTERVAL, SEARCH_TRACE_ENABLED, SELECTION_POLICIES, SELECTION_POLICY
from ..errors import SearchExhausted
from ..grid.model import assigned_cells, pick_unassigned
from ..logging_utils import get_logger, get_search_trace_logger
from ..types import Assigned, Grid, SearchResult, SearchStats
from .propagation import propagate

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    policy: str = SELECTION_POLICY
    stats: SearchStats = field(default_factory=SearchStats)
    trace: Optional[logging.Logger] = None


def backtrack(grid: Grid, ctx: SearchContext, depth: int = 0) -> Optional[Grid]:
    """
    伝播済み（不動点に達した）盤面から探索を行います。

    Returns
    -------
    Grid or None
        すべて確定した盤面。どの候補でも解けなければ None。
    """
    ctx.stats.called += 1

    if ctx.stats.called % SEARCH_LOG_INTERVAL == 0:
        logger.info(
            "[search] called = %d, failed = %d, depth = %d",
            ctx.stats.called,
            ctx.stats.failed,
            depth,
        )

    picked = pick_unassigned(grid, ctx.policy)
    if picked is None:
        return grid

    x, domain = picked

    for val in sorted(domain):
        child = grid.copy()
        child[x] = Assigned(val)

        propagated = propagate(child, [(x, val)])
        if propagated is None:
            ctx.stats.contradictions += 1
            if ctx.trace is not None:
                ctx.trace.debug("depth=%d cell=%d value=%d -> inconsistent", depth, x, val)
            continue

        if ctx.trace is not None:
            ctx.trace.debug("depth=%d cell=%d value=%d -> descend", depth, x, val)

        solved = backtrack(propagated, ctx, depth + 1)
        if solved is not None:
            return solved

        ctx.stats.failed += 1

    return None


def solve_grid(
    grid: Grid,
    policy: str = SELECTION_POLICY,
    trace: bool = SEARCH_TRACE_ENABLED,
) -> SearchResult:
    """
    初期盤面を伝播させてから探索を行うエントリポイントです。

    渡された grid 自体は書き換えません。

    Raises
    ------
    SearchExhausted
        ヒント同士が矛盾している、またはどの候補でも解けなかった場合。
    """
    if policy not in SELECTION_POLICIES:
        raise ValueError(f"unknown selection policy: {policy!r}")

    ctx = SearchContext(
        policy=policy,
        trace=get_search_trace_logger() if trace else None,
    )

    # 初回はすべての確定済みマスをキューに積む
    working = grid.copy()
    propagated = propagate(working, assigned_cells(working))
    if propagated is None:
        logger.info("Initial clues are inconsistent.")
        raise SearchExhausted("no solution: clues are inconsistent", ctx.stats)

    logger.debug("Initial propagation left %d cells assigned.", len(assigned_cells(propagated)))

    solved = backtrack(propagated, ctx)
    if solved is None:
        logger.info("Search exhausted: called=%d, failed=%d", ctx.stats.called, ctx.stats.failed)
        raise SearchExhausted("no solution: search exhausted", ctx.stats)

    return SearchResult(grid=solved, stats=ctx.stats)

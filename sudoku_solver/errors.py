# -*- coding: utf-8 -*-
"""
solver の外へ出ていく例外をまとめたモジュールです。

探索中の「矛盾」はごく普通に起きる出来事なので、例外ではなく
propagate() の戻り値 None で表現しています。
ここにあるのは、呼び出し側に知らせる必要があるものだけです。
"""

from __future__ import annotations

from typing import Optional

from .types import SearchStats


class SudokuError(Exception):
    """solver が送出する例外の基底クラスです。"""


class MalformedInput(SudokuError, ValueError):
    """
    入力が 81 個の数字になっていない場合に送出します。

    - トークン数が 81 でない
    - 0〜9 以外の文字が含まれている
    """


class SearchExhausted(SudokuError):
    """
    ルートの候補をすべて試しても解が見つからなかった場合に送出します。

    Attributes
    ----------
    stats : SearchStats
        そこまでに集計したカウンタ。
    """

    def __init__(self, message: str = "no solution", stats: Optional[SearchStats] = None):
        super().__init__(message)
        self.stats = stats if stats is not None else SearchStats()

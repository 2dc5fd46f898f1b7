# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

セルの状態は次の2種類のどちらかです。
- Assigned   : 値が確定したマス
- Unassigned : まだ候補が複数残っているマス
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Set, Union

# 盤面上のマス番号（0〜80）。(row, col) = (index // 9, index % 9)
CellIndex = int


@dataclass(frozen=True)
class Assigned:
    """
    値が確定したマスを表すクラスです。

    Attributes
    ----------
    value : int
        確定した数字（1〜9）。
    """

    value: int


@dataclass
class Unassigned:
    """
    まだ値が確定していないマスを表すクラスです。

    Attributes
    ----------
    candidates : set of int
        まだ除外されていない候補の数字の集合。
        整合的な盤面では空になることはなく、
        要素が1つになった時点で Assigned に変換されます。
    """

    candidates: Set[int]


CellState = Union[Assigned, Unassigned]


@dataclass
class Grid:
    """
    81 マス分のセル状態を、マス番号順に並べたものです。

    探索の各分岐は自分専用の Grid を持ちます。
    子の分岐を作るときは :meth:`copy` で値コピーしてから書き換えます。
    """

    cells: List[CellState]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[CellState]:
        return iter(self.cells)

    def __getitem__(self, index: CellIndex) -> CellState:
        return self.cells[index]

    def __setitem__(self, index: CellIndex, state: CellState) -> None:
        self.cells[index] = state

    def copy(self) -> "Grid":
        """候補集合まで含めて複製した、独立した Grid を返します。"""
        return Grid(
            cells=[
                Unassigned(set(c.candidates)) if isinstance(c, Unassigned) else c
                for c in self.cells
            ]
        )


@dataclass
class SearchStats:
    """
    探索中の診断用カウンタです。制御フローには一切影響しません。

    Attributes
    ----------
    called : int
        バックトラック関数が呼ばれた総回数。
    failed : int
        再帰先の探索が失敗した候補の数。
    contradictions : int
        制約伝播の時点で矛盾して捨てられた候補の数。
    """

    called: int = 0
    failed: int = 0
    contradictions: int = 0


@dataclass
class SearchResult:
    """探索の結果（完成した盤面と、そこまでのカウンタ）。"""

    grid: Grid
    stats: SearchStats = field(default_factory=SearchStats)

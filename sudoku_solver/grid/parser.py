# -*- coding: utf-8 -*-
"""
盤面の入力を内部表現（Grid）に変換するモジュールです。

主な役割:
- テキスト（81 個の数字、空白は無視）を Grid に変換
- pandas.DataFrame の 9×9 盤面を Grid に変換
- ファイル（テキスト or CSV）からの読み込み
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from ..config import BLANK_TOKEN, CELL_COUNT, DIGITS, GRID_SIZE
from ..errors import MalformedInput
from ..types import Assigned, Grid, Unassigned

# DataFrame の盤面で「空きマス」とみなす文字列
BLANK_CELLS = {"", ".", "0"}


def tokenize(text: str) -> List[int]:
    """
    テキストから空白を取り除き、1文字ずつ数字に変換します。

    Raises
    ------
    MalformedInput
        0〜9 以外の文字が含まれている場合。
    """
    tokens: List[int] = []
    for pos, ch in enumerate(c for c in text if not c.isspace()):
        # "²" などの isdigit() が True になる文字は弾く
        if ch not in "0123456789":
            raise MalformedInput(f"non-digit in input: {ch!r} at position {pos}")
        tokens.append(int(ch))
    return tokens


def build_grid(tokens: Sequence[int]) -> Grid:
    """
    81 個の数字（0 は空きマス）から Grid を組み立てます。
    "5" のような数字1文字の文字列も数字として扱います。

    - 0      → 候補 {1..9} を持つ Unassigned
    - 1〜9   → Assigned
    """
    if len(tokens) != CELL_COUNT:
        raise MalformedInput(
            f"invalid length of input: expected {CELL_COUNT} cells, got {len(tokens)}"
        )

    cells = []
    for pos, tok in enumerate(tokens):
        # "5" のような1文字の数字も受け付ける。True などの bool は弾く
        if isinstance(tok, str) and len(tok) == 1 and tok in "0123456789":
            tok = int(tok)
        elif isinstance(tok, bool) or not isinstance(tok, (int, np.integer)):
            raise MalformedInput(f"non-digit in input: {tok!r} at position {pos}")

        if tok == BLANK_TOKEN:
            cells.append(Unassigned(set(DIGITS)))
        elif tok in DIGITS:
            cells.append(Assigned(int(tok)))
        else:
            raise MalformedInput(f"non-digit in input: {tok!r} at position {pos}")

    return Grid(cells=cells)


def parse_grid(text: str) -> Grid:
    """テキストを :func:`tokenize` してから :func:`build_grid` します。"""
    return build_grid(tokenize(text))


def normalize_cell(x: Any) -> int:
    """
    DataFrame の個々のセルの値を、0〜9 の数字に変換します。

    変換ルール
    ----------
    - None / NaN / 空文字 / "." : 0（空きマス）
    - 数値 or 数字1文字          : その数字
    - それ以外                   : MalformedInput
    """
    if x is None:
        return BLANK_TOKEN
    if isinstance(x, float) and pd.isna(x):
        return BLANK_TOKEN

    # 3.0 のように float で読まれた数字は int に戻す
    if isinstance(x, float) and x.is_integer():
        x = int(x)

    s = str(x).strip()
    if s in BLANK_CELLS:
        return BLANK_TOKEN

    if len(s) == 1 and s in "123456789":
        return int(s)

    raise MalformedInput(f"invalid cell value: {x!r}")


def grid_from_dataframe(df: pd.DataFrame) -> Grid:
    """
    9×9 の DataFrame を Grid に変換します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ。数値・数字文字列・空欄が混在していても構いません。
    """
    if df.shape != (GRID_SIZE, GRID_SIZE):
        raise MalformedInput(
            f"invalid board shape: expected {(GRID_SIZE, GRID_SIZE)}, got {df.shape}"
        )

    tokens = [
        normalize_cell(df.iat[i, j])
        for i in range(GRID_SIZE)
        for j in range(GRID_SIZE)
    ]
    return build_grid(tokens)


def load_grid(path: str | Path) -> Grid:
    """
    ファイルから盤面を読み込みます。

    - 拡張子 .csv : ヘッダなしの 9×9 表として pandas で読み込む
    - それ以外   : 81 個の数字が並んだテキストとして読み込む（空白・改行は無視）
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    if p.suffix.lower() == ".csv":
        df = pd.read_csv(p, header=None, dtype=str, keep_default_na=False)
        return grid_from_dataframe(df)

    return parse_grid(p.read_text(encoding="utf-8"))

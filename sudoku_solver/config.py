# -*- coding: utf-8 -*-
"""
solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 次に分岐するマスの選び方
- 表示時の空きマスの文字
- 探索ログの出し方
などを簡単に変更できます。
"""

from __future__ import annotations

import os

# ==== 盤面の形 =============================================================

# 9×9 以外の盤面はサポートしません
GRID_SIZE: int = 9
BOX_SIZE: int = 3
CELL_COUNT: int = GRID_SIZE * GRID_SIZE

# 各マスが取り得る値
DIGITS = range(1, GRID_SIZE + 1)

# 入力で「空きマス」を意味する数字
BLANK_TOKEN: int = 0

# ==== 探索関連 =============================================================

# 次に分岐するマスの選び方。
# - "mrv"   : 候補数が最も少ないマス（同数なら番号の小さい方）
# - "first" : 番号順で最初の未確定マス
# "mrv" の方が探索木をはるかに小さくできます。
SELECTION_POLICY: str = os.getenv("SUDOKU_SELECTION_POLICY", "mrv")

SELECTION_POLICIES = ("mrv", "first")

# 何回呼び出しごとに探索の進捗をログに出すか
SEARCH_LOG_INTERVAL: int = 10000

# 分岐ごとの詳細ログ（logs/search_trace.log）を出すかどうか
SEARCH_TRACE_ENABLED: bool = os.getenv("SUDOKU_SEARCH_TRACE", "0") == "1"

# 詳細ログの保存先
SEARCH_TRACE_LOG_DIR: str = "logs"

# ==== 表示関連 =============================================================

# 未確定マスを表示するときの文字
RENDER_BLANK: str = " "

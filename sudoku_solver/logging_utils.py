# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 開発中やデバッグ時に「どこまで処理が進んだか」「何が起きたか」を
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import SEARCH_TRACE_LOG_DIR

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"


def get_logger() -> logging.Logger:
    """
    solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_search_trace_logger() -> logging.Logger:
    """
    探索の分岐ひとつひとつを記録するファイル用 logger を返します。
    """
    logger = logging.getLogger(f"{LOGGER_NAME}.search_trace")

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    os.makedirs(SEARCH_TRACE_LOG_DIR, exist_ok=True)
    log_file = os.path.join(SEARCH_TRACE_LOG_DIR, "search_trace.log")

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 他ロガーへの伝播禁止（コンソールに出さない）
    logger.propagate = False

    return logger

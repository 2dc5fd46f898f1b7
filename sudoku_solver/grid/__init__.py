# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : テキストや DataFrame から内部表現への変換
- model.py  : 確定済みマスの一覧、分岐するマスの選択
"""

# -*- coding: utf-8 -*-
"""
solver_core パッケージ

sudoku_solver をコマンドラインから使うためのエントリポイントを置いています。
"""

# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（CSP）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- constraints.py : マスごとの近傍（同じ行・列・ボックス）の計算
- propagation.py : AC-3 による制約伝播
- search.py      : 伝播と組み合わせたバックトラック探索
"""

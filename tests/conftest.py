import numpy as np
import pytest

PUZZLE = """
530070000
600195000
098000060
800060003
400803001
700020006
060000280
000419005
000080079
"""

SOLUTION = """
534678912
672195348
198342567
859761423
426853791
713924856
961537284
287419635
345286179
"""

# ヒントだけでは伝播が止まり、失敗した分岐からの後戻りが必要になる盤面
HARD_PUZZLE = (
    "800000000003600000070090200"
    "050007000000045700000100030"
    "001000068008500010090000400"
)


def to_array(text):
    digits = [int(c) for c in text if c.isdigit()]
    return np.array(digits, dtype=int).reshape(9, 9)


@pytest.fixture
def puzzle_text():
    return PUZZLE


@pytest.fixture
def solution_text():
    return SOLUTION


@pytest.fixture
def solution_array():
    return to_array(SOLUTION)


@pytest.fixture
def one_blank_text():
    # 左上のマス（答えは 5）だけを空けた盤面
    return "0" + "".join(c for c in SOLUTION if c.isdigit())[1:]


@pytest.fixture
def puzzle_array():
    return to_array(PUZZLE)


@pytest.fixture
def hard_puzzle_text():
    return HARD_PUZZLE


@pytest.fixture
def hard_puzzle_array():
    return to_array(HARD_PUZZLE)

import numpy as np

from sudoku_solver import SearchResult, SearchStats
from sudoku_solver.grid.parser import parse_grid
from sudoku_solver.postprocess.render_result import (
    build_result,
    format_report,
    grid_to_array,
    render_grid,
)


def test_render_grid_uses_blank_for_unassigned(puzzle_text):
    rows = render_grid(parse_grid(puzzle_text)).split("\n")

    assert len(rows) == 9
    assert all(len(r) == 9 for r in rows)
    assert rows[0] == "53  7    "
    assert rows[8] == "    8  79"


def test_render_grid_custom_blank(puzzle_text):
    rows = render_grid(parse_grid(puzzle_text), blank=".").split("\n")
    assert rows[0] == "53..7...."


def test_grid_to_array(puzzle_text, puzzle_array):
    board = grid_to_array(parse_grid(puzzle_text))

    assert board.shape == (9, 9)
    assert np.array_equal(board, puzzle_array)


def test_build_result(puzzle_text, solution_text, solution_array):
    result = SearchResult(grid=parse_grid(solution_text), stats=SearchStats(called=3, failed=1))

    out = build_result(parse_grid(puzzle_text), result)

    assert out["solved_board"] == solution_array.tolist()
    assert type(out["solved_board"][0][0]) is int
    assert out["stats"] == {"called": 3, "failed": 1, "contradictions": 0}
    assert out["shape"] == (9, 9)
    assert out["clue_count"] == 30


def test_format_report(solution_text):
    result = SearchResult(grid=parse_grid(solution_text), stats=SearchStats(called=12, failed=4))

    lines = format_report(result).split("\n")

    assert lines[0] == "backtrack called: 12"
    assert lines[1] == "backtrack failed: 4"
    assert lines[2] == ""
    assert lines[3] == "534678912"
    assert lines[-1] == "345286179"

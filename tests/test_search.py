import numpy as np
import pytest

from sudoku_solver import SearchExhausted, Unassigned
from sudoku_solver.csp.search import SearchContext, backtrack, solve_grid
from sudoku_solver.eval.validity import is_valid_solution, preserves_clues
from sudoku_solver.grid.model import is_complete
from sudoku_solver.grid.parser import build_grid, parse_grid
from sudoku_solver.postprocess.render_result import grid_to_array


@pytest.mark.parametrize("policy", ["mrv", "first"])
def test_solve_grid_finds_known_solution(puzzle_text, puzzle_array, solution_array, policy):
    result = solve_grid(parse_grid(puzzle_text), policy=policy)
    board = grid_to_array(result.grid)

    assert is_complete(result.grid)
    assert np.array_equal(board, solution_array)
    assert preserves_clues(puzzle_array, board)
    assert result.stats.called >= 1


def test_solve_grid_does_not_mutate_input(puzzle_text):
    puzzle = parse_grid(puzzle_text)
    before = puzzle.copy()

    solve_grid(puzzle)

    assert puzzle == before


@pytest.mark.parametrize("policy", ["mrv", "first"])
def test_solve_grid_backtracks_after_failed_branch(hard_puzzle_text, hard_puzzle_array, policy):
    result = solve_grid(parse_grid(hard_puzzle_text), policy=policy)
    board = grid_to_array(result.grid)

    assert is_valid_solution(board)
    assert preserves_clues(hard_puzzle_array, board)
    # 深い所で失敗した候補から戻って、次の候補で解けている
    assert result.stats.failed > 0
    assert result.stats.called > result.stats.failed


@pytest.mark.parametrize("policy", ["mrv", "first"])
def test_solve_grid_is_deterministic(hard_puzzle_text, policy):
    first = solve_grid(parse_grid(hard_puzzle_text), policy=policy)
    second = solve_grid(parse_grid(hard_puzzle_text), policy=policy)

    assert first.grid == second.grid
    assert first.stats == second.stats


@pytest.mark.parametrize("policy", ["mrv", "first"])
def test_solve_empty_grid(policy):
    result = solve_grid(build_grid([0] * 81), policy=policy)

    assert is_valid_solution(grid_to_array(result.grid))


def test_one_blank_is_solved_without_branching(one_blank_text, solution_array):
    result = solve_grid(parse_grid(one_blank_text))

    assert np.array_equal(grid_to_array(result.grid), solution_array)
    assert result.stats.called == 1
    assert result.stats.failed == 0
    assert result.stats.contradictions == 0


def test_equal_clues_raise_search_exhausted():
    with pytest.raises(SearchExhausted) as exc:
        solve_grid(build_grid([3, 3] + [0] * 79))
    # 探索に入る前に矛盾が見つかる
    assert exc.value.stats.called == 0


def test_exhausted_root_raises_with_stats():
    grid = build_grid([0] * 81)
    for idx in (0, 1, 2):
        grid[idx] = Unassigned({1, 2})

    with pytest.raises(SearchExhausted) as exc:
        solve_grid(grid)

    assert exc.value.stats.called == 1
    assert exc.value.stats.contradictions == 2
    assert exc.value.stats.failed == 0


def test_backtrack_returns_none_on_failure():
    grid = build_grid([0] * 81)
    for idx in (0, 1, 2):
        grid[idx] = Unassigned({1, 2})
    ctx = SearchContext(policy="mrv")

    assert backtrack(grid, ctx) is None
    assert ctx.stats.called == 1


def test_backtrack_returns_complete_grid_immediately(solution_text):
    grid = parse_grid(solution_text)
    ctx = SearchContext(policy="first")

    assert backtrack(grid, ctx) is grid
    assert ctx.stats.called == 1


def test_solve_grid_rejects_unknown_policy(puzzle_text):
    with pytest.raises(ValueError):
        solve_grid(parse_grid(puzzle_text), policy="best")

from sudoku_solver.eval.validity import find_conflicts, is_valid_solution, preserves_clues


def test_known_solution_is_valid(solution_array):
    assert is_valid_solution(solution_array)
    assert find_conflicts(solution_array) == []


def test_incomplete_board_is_not_valid(puzzle_array):
    assert not is_valid_solution(puzzle_array)
    assert find_conflicts(puzzle_array) == []


def test_swapped_cells_break_validity(solution_array):
    board = solution_array.copy()
    board[0, 0], board[0, 1] = board[0, 1], board[0, 0]

    assert not is_valid_solution(board)
    kinds = {kind for kind, _, _ in find_conflicts(board)}
    assert kinds == {"col"}


def test_duplicate_in_row_is_reported(puzzle_array):
    board = puzzle_array.copy()
    board[0, 2] = 5

    assert ("row", 0, 5) in find_conflicts(board)
    assert ("box", 0, 5) in find_conflicts(board)


def test_preserves_clues(puzzle_array, solution_array):
    assert preserves_clues(puzzle_array, solution_array)

    board = solution_array.copy()
    board[0, 0] = 1
    assert not preserves_clues(puzzle_array, board)

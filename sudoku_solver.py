# sudoku_solver.py
from typing import List, NamedTuple, Sequence
import time

from sudoku_board import (
    BLANK,
    DIGITS,
    SIZE,
    Board,
    InconsistentBoardError,
    check_board,
    check_mutable_board,
    clone_board,
    parse_board,
    plot_grid,
    print_grid,
)
from sudoku_validator import validate_board, validate_cell

# ----------------------------
# Types
# ----------------------------
class SolveResult(NamedTuple):
    solved: bool
    board: Board

# ----------------------------
# Position list
# ----------------------------
def empty_positions(board: Board) -> List[int]:
    """Return flat indices (row * 9 + column) of every blank cell, row-major."""
    return [
        row * SIZE + column
        for row in range(SIZE)
        for column in range(SIZE)
        if board[row][column] == BLANK
    ]

# ----------------------------
# Backtracking solver
# ----------------------------
# instrumentation counters (module-level)
assignments_count = 0
backtracks_count = 0

def backtrack(board: Board, empty: List[int], i: int, verbose: bool = False) -> bool:
    """
    Try digits 1-9 at position empty[i], recursing into empty[i + 1] on each legal one.
    On exhaustion the cell is reset to blank so the caller can try its next digit.
    """
    global assignments_count, backtracks_count

    position = empty[i]
    row, column = divmod(position, SIZE)

    for digit in DIGITS:
        board[row][column] = digit
        if not validate_cell(board, row, column):
            continue

        assignments_count += 1
        if verbose:
            print(f"  ASSIGN ({row}, {column}) = {digit}")

        if i == len(empty) - 1 or backtrack(board, empty, i + 1, verbose=verbose):
            return True

    # undo
    board[row][column] = BLANK
    backtracks_count += 1
    if verbose:
        print(f"  UNASSIGN ({row}, {column}) (backtracking)")
    return False


def solve_sudoku(board: Board, verbose: bool = False) -> bool:
    """
    Solve board in place and report whether a solution was found.
    On failure the board is left with its original blank pattern.
    """
    global assignments_count, backtracks_count

    check_mutable_board(board)
    if not validate_board(board):
        raise InconsistentBoardError("Givens repeat a digit in a row, column or block")

    assignments_count = 0
    backtracks_count = 0

    empty = empty_positions(board)
    if verbose:
        print(f"Blank cells to fill: {len(empty)}")
    if not empty:
        return True
    return backtrack(board, empty, 0, verbose=verbose)


def solve(board: Sequence[Sequence[str]], verbose: bool = False) -> SolveResult:
    """Solve a copy of board; the caller's board is never modified."""
    check_board(board)
    working_board = clone_board(board)
    solved = solve_sudoku(working_board, verbose=verbose)
    return SolveResult(solved, working_board)

# ----------------------------
# Example Puzzle
# ----------------------------
if __name__ == "__main__":
    puzzle = parse_board(
        "53..7...."
        "6..195..."
        ".98....6."
        "8...6...3"
        "4..8.3..1"
        "7...2...6"
        ".6....28."
        "...419..5"
        "....8..79"
    )

    print("=== Given puzzle ===")
    print_grid(puzzle)

    start_time = time.perf_counter()
    result = solve(puzzle)
    elapsed_time = time.perf_counter() - start_time

    if result.solved:
        print("=== Solved puzzle ===")
        print_grid(result.board)
        try:
            plot_grid(result.board, givens=puzzle, title="Sudoku (backtracking solver)")
        except Exception as plot_exc:
            print("Plotting failed:", plot_exc)
    else:
        print("No solution found.")

    print(f"Assignments: {assignments_count}, Backtracks: {backtracks_count}, Time: {elapsed_time:.4f}s")

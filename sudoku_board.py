# sudoku_board.py
from typing import List, Optional, Sequence
import matplotlib.pyplot as plt

# ----------------------------
# Config
# ----------------------------
BLANK = "."
DIGITS: List[str] = [str(d) for d in range(1, 10)]
SIZE = 9
BLOCK_SIZE = 3
OUT_PNG = "sudoku_solved.png"
GIVEN_COLOR = "#000000"
FILLED_COLOR = "#1f78b4"

# ----------------------------
# Types
# ----------------------------
Board = List[List[str]]

# ----------------------------
# Errors
# ----------------------------
class InvalidInputError(ValueError):
    """Board is not 9x9 or holds something other than '1'-'9' / '.'."""


class InconsistentBoardError(ValueError):
    """The givens already repeat a digit in a row, column or block."""

# ----------------------------
# Shape checking and conversion
# ----------------------------
def check_board(board: Sequence[Sequence[str]]) -> None:
    """Raise InvalidInputError unless board is 9 rows of 9 digit/blank cells."""
    if len(board) != SIZE:
        raise InvalidInputError(f"Expected {SIZE} rows, got {len(board)}")
    for row_index, row in enumerate(board):
        if len(row) != SIZE:
            raise InvalidInputError(f"Row {row_index} has {len(row)} cells, expected {SIZE}")
        for column_index, cell in enumerate(row):
            if cell != BLANK and cell not in DIGITS:
                raise InvalidInputError(f"Invalid cell {cell!r} at ({row_index}, {column_index})")


def check_mutable_board(board: Board) -> None:
    """
    Raise InvalidInputError unless board can be filled in place:
    a list of nine distinct list rows, each passing check_board.
    """
    check_board(board)
    if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
        raise InvalidInputError("Board and its rows must be lists to be solved in place")
    if len({id(row) for row in board}) != SIZE:
        raise InvalidInputError("Board rows must be distinct list objects")


def clone_board(board: Sequence[Sequence[str]]) -> Board:
    return [list(row) for row in board]


def parse_board(text: str) -> Board:
    """
    Build a board from 81 cell characters, row-major.
    Whitespace and the '|' / '-' separators printed by print_grid are ignored; '0' is read as blank.
    """
    cells = [ch for ch in text if not ch.isspace() and ch not in "|-"]
    if len(cells) != SIZE * SIZE:
        raise InvalidInputError(f"Expected {SIZE * SIZE} cells, got {len(cells)}")
    cells = [BLANK if ch == "0" else ch for ch in cells]
    board = [cells[row * SIZE:(row + 1) * SIZE] for row in range(SIZE)]
    check_board(board)
    return board


def board_to_string(board: Sequence[Sequence[str]]) -> str:
    return "".join("".join(row) for row in board)

# ----------------------------
# Print Sudoku
# ----------------------------
def print_grid(board: Sequence[Sequence[str]]):
    for row_index in range(SIZE):
        row_str = ""
        for column_index in range(SIZE):
            row_str += board[row_index][column_index]
            if column_index in (2, 5):
                row_str += " | "
            else:
                row_str += " "
        print(row_str)
        if row_index in (2, 5):
            print("-" * 21)
    print()

# ----------------------------
# Visualization helper (optional)
# ----------------------------
def plot_grid(board: Sequence[Sequence[str]], givens: Optional[Sequence[Sequence[str]]] = None, out_png: str = OUT_PNG, title: str = "Sudoku"):
    """
    Render the board to a PNG.
    When `givens` is passed, cells that were blank there are drawn in FILLED_COLOR.
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    for line_index in range(SIZE + 1):
        line_width = 2.0 if line_index % BLOCK_SIZE == 0 else 0.5
        ax.plot([0, SIZE], [line_index, line_index], color="black", linewidth=line_width)
        ax.plot([line_index, line_index], [0, SIZE], color="black", linewidth=line_width)

    for row_index in range(SIZE):
        for column_index in range(SIZE):
            value = board[row_index][column_index]
            if value == BLANK:
                continue
            filled = givens is not None and givens[row_index][column_index] == BLANK
            ax.text(
                column_index + 0.5,
                SIZE - row_index - 0.5,
                value,
                ha="center",
                va="center",
                fontsize=18,
                color=FILLED_COLOR if filled else GIVEN_COLOR,
            )

    ax.set_xlim(0, SIZE)
    ax.set_ylim(0, SIZE)
    ax.set_aspect("equal")
    ax.set_axis_off()
    plt.title(title)
    plt.tight_layout()
    fig.savefig(out_png, dpi=100)
    print("Saved grid to", out_png)
    plt.close(fig)


if __name__ == "__main__":
    board = parse_board(
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
    print_grid(board)
    print(board_to_string(board))

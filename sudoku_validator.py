# sudoku_validator.py
from typing import List, Sequence

from sudoku_board import BLANK, BLOCK_SIZE, SIZE, Board, parse_board

# ----------------------------
# Units: rows, columns, blocks
# ----------------------------
def validate_set(cells: Sequence[str]) -> bool:
    """Return False if any digit appears more than once among the non-blank cells."""
    seen = set()
    for cell in cells:
        if cell == BLANK:
            continue
        if cell in seen:
            return False
        seen.add(cell)
    return True


def get_column(board: Board, n: int) -> List[str]:
    """Return column n, top to bottom."""
    return [row[n] for row in board]


def get_block(board: Board, block_x: int, block_y: int) -> List[List[str]]:
    """Return the 3x3 block whose top-left cell is at row (block_y % 3) * 3, column (block_x % 3) * 3."""
    start_row = (block_y % BLOCK_SIZE) * BLOCK_SIZE
    start_column = (block_x % BLOCK_SIZE) * BLOCK_SIZE
    return [row[start_column:start_column + BLOCK_SIZE] for row in board[start_row:start_row + BLOCK_SIZE]]


def flatten(block: List[List[str]]) -> List[str]:
    return [cell for row in block for cell in row]

# ----------------------------
# Whole-board and single-cell checks
# ----------------------------
def validate_board(board: Board) -> bool:
    """
    Validate all rows, then all columns, then all nine 3x3 blocks.
    Row i and column i are checked together; blocks are scanned x-major.
    """
    for index in range(SIZE):
        if not validate_set(board[index]):
            return False
        if not validate_set(get_column(board, index)):
            return False

    for block_x in range(BLOCK_SIZE):
        for block_y in range(BLOCK_SIZE):
            if not validate_set(flatten(get_block(board, block_x, block_y))):
                return False

    return True


def validate_cell(board: Board, row: int, column: int) -> bool:
    """
    Validate only the row, column and block containing (row, column).
    Equivalent to validate_board after a single write to an otherwise valid board.
    """
    if not validate_set(board[row]):
        return False
    if not validate_set(get_column(board, column)):
        return False
    return validate_set(flatten(get_block(board, column // BLOCK_SIZE, row // BLOCK_SIZE)))


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
    print("Board valid:", validate_board(board))
    board[8][8] = "7"
    print("After writing a duplicate 7 at (8, 8):", validate_board(board))

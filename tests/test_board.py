from pathlib import Path

import pytest

from sudoku_board import (
    BLANK,
    InvalidInputError,
    board_to_string,
    check_board,
    check_mutable_board,
    clone_board,
    parse_board,
    plot_grid,
    print_grid,
)
from puzzles import PUZZLE, SOLUTION


def test_parse_board_shape():
    board = parse_board(PUZZLE)
    assert len(board) == 9
    assert all(len(row) == 9 for row in board)
    assert board[0][:3] == ["5", "3", BLANK]


def test_parse_board_reads_zero_as_blank():
    board = parse_board(PUZZLE.replace(".", "0"))
    assert board == parse_board(PUZZLE)


def test_parse_board_rejects_wrong_length():
    with pytest.raises(InvalidInputError):
        parse_board(PUZZLE[:-1])


def test_parse_board_rejects_bad_character():
    with pytest.raises(InvalidInputError):
        parse_board("x" + PUZZLE[1:])


def test_board_to_string():
    assert board_to_string(parse_board(SOLUTION)) == SOLUTION


def test_check_board_rejects_short_board():
    board = parse_board(PUZZLE)[:8]
    with pytest.raises(InvalidInputError):
        check_board(board)


def test_check_board_rejects_short_row():
    board = parse_board(PUZZLE)
    board[3] = board[3][:8]
    with pytest.raises(InvalidInputError, match="Row 3"):
        check_board(board)


def test_check_board_rejects_integer_cells():
    board = parse_board(PUZZLE)
    board[0][0] = 5
    with pytest.raises(InvalidInputError):
        check_board(board)


def test_clone_board_is_independent():
    board = parse_board(PUZZLE)
    copy = clone_board(board)
    copy[0][2] = "4"
    assert board[0][2] == BLANK


def test_print_grid_output_parses_back(capsys):
    print_grid(parse_board(PUZZLE))
    out = capsys.readouterr().out
    assert " | " in out
    assert "-" * 21 in out
    assert board_to_string(parse_board(out)) == PUZZLE


def test_plot_grid_writes_png(tmp_path: Path):
    out_png = tmp_path / "grid.png"
    plot_grid(parse_board(SOLUTION), givens=parse_board(PUZZLE), out_png=str(out_png))
    assert out_png.exists()
    assert out_png.stat().st_size > 0


def test_check_mutable_board_accepts_parsed_board():
    check_mutable_board(parse_board(PUZZLE))


def test_check_mutable_board_rejects_immutable_rows():
    board = [tuple(row) for row in parse_board(PUZZLE)]
    with pytest.raises(InvalidInputError):
        check_mutable_board(board)


def test_check_mutable_board_rejects_aliased_rows():
    row = ["."] * 9
    with pytest.raises(InvalidInputError):
        check_mutable_board([row] * 9)

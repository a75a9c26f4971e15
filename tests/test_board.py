import pytest

from tetris_board import Board, ghost_y, is_valid_move
from tetris_piece import Piece
from tests.helpers import fill_row


def test_new_board_is_empty():
    b = Board(10, 20)
    assert all(b.is_empty(x, y) for x in range(10) for y in range(20))
    assert len(b.cells()) == 20 and len(b.cells()[0]) == 10


@pytest.mark.parametrize("cols,rows", [(0, 20), (10, 0), (-1, 5)])
def test_non_positive_dimensions_rejected(cols, rows):
    with pytest.raises(ValueError):
        Board(cols, rows)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Board.from_rows([[None, None], [None]])
    with pytest.raises(ValueError):
        Board.from_rows([])


def test_is_empty_out_of_range_is_false():
    b = Board(4, 4)
    assert not b.is_empty(-1, 0)
    assert not b.is_empty(0, 4)


def test_merge_writes_token():
    b = Board(10, 20)
    b.merge(Piece.spawn("O", 3, 18))
    assert b.grid[18][3:5] == ["O", "O"]
    assert b.grid[19][3:5] == ["O", "O"]
    assert not b.is_empty(4, 19)


def test_merge_drops_blocks_above_board():
    b = Board(10, 20)
    p = Piece.spawn("I", 0, -2)
    p.rotate()
    b.merge(p)
    assert b.grid[0][0] == "I" and b.grid[1][0] == "I"
    assert sum(1 for row in b.grid for cell in row if cell) == 2


def test_clear_without_full_rows_is_noop():
    b = Board(4, 3)
    b.grid[2] = ["a", None, "a", "a"]
    before = b.cells()
    assert b.clear_full_rows() == 0
    assert b.cells() == before


def test_clear_removes_all_full_rows_at_once():
    b = Board.from_rows([
        [None, None, None, None],
        ["a", None, None, None],
        ["x", "x", "x", "x"],
        [None, "b", None, None],
        ["y", "y", "y", "y"],
    ])
    assert b.clear_full_rows() == 2
    assert b.cells() == (
        (None, None, None, None),
        (None, None, None, None),
        (None, None, None, None),
        ("a", None, None, None),
        (None, "b", None, None),
    )
    assert b.rows == 5


def test_clear_adjacent_full_rows():
    b = Board(3, 4)
    fill_row(b, 2)
    fill_row(b, 3)
    b.grid[1][1] = "k"
    assert b.clear_full_rows() == 2
    assert b.grid[3] == [None, "k", None]
    assert b.grid[0] == b.grid[1] == b.grid[2] == [None, None, None]


def test_reset_empties_board():
    b = Board(3, 3)
    fill_row(b, 0)
    b.reset()
    assert all(cell is None for row in b.grid for cell in row)


@pytest.mark.parametrize("x,y", [(-1, 0), (9, 0), (3, 19), (3, 25)])
def test_out_of_bounds_is_invalid_regardless_of_occupancy(x, y):
    b = Board(10, 20)
    assert not is_valid_move(Piece.spawn("O", x, y), b)


def test_blocks_above_board_are_allowed():
    b = Board(10, 20)
    fill_row(b, 0)
    assert is_valid_move(Piece.spawn("O", 3, -2), b)
    assert not is_valid_move(Piece.spawn("O", 3, -1), b)


def test_occupied_cell_invalidates_whole_piece():
    b = Board(10, 20)
    b.grid[5][4] = "T"
    assert not is_valid_move(Piece.spawn("O", 3, 4), b)
    assert is_valid_move(Piece.spawn("O", 5, 4), b)


def test_ghost_y_lands_on_floor_and_stack():
    b = Board(10, 20)
    p = Piece.spawn("O", 3, 0)
    assert ghost_y(b, p) == 18
    fill_row(b, 19)
    assert ghost_y(b, p) == 17
    assert p.y == 0


def test_clear_and_collision_agree_on_empty_string_token():
    b = Board.from_rows([
        [None, None],
        ["", "x"],
    ])
    assert not b.is_empty(0, 1)
    assert b.clear_full_rows() == 1
    assert b.cells() == ((None, None), (None, None))

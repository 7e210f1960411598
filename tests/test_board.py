import pytest

from tetris_board import collide, is_occupied, merge, new_board, sweep
from tetris_shapes import SHAPES


def test_new_board_dimensions():
    board = new_board(10, 20)
    assert len(board) == 20 and all(len(r) == 10 for r in board)
    assert not any(map(any, board))


def test_new_board_rejects_bad_size():
    with pytest.raises(ValueError):
        new_board(0, 20)


def test_is_occupied_bounds():
    board = new_board(4, 4)
    board[3][1] = 1
    assert is_occupied(board, 3, 1)
    assert not is_occupied(board, 2, 1)
    assert is_occupied(board, 0, -1)
    assert is_occupied(board, 0, 4)
    assert is_occupied(board, 4, 0)
    # above the top is open
    assert not is_occupied(board, -1, 0)
    assert not is_occupied(board, -5, 2)


def test_collide_clear_board_at_spawn():
    board = new_board(10, 20)
    for shape in SHAPES.values():
        assert not collide(board, 4, 0, shape)


def test_collide_with_filled_cell():
    board = new_board(10, 20)
    board[1][5] = 1
    assert collide(board, 4, 0, SHAPES["O"])
    assert not collide(board, 2, 0, SHAPES["O"])


def test_collide_ignores_empty_cells_of_shape():
    board = new_board(10, 20)
    board[0][4] = 1
    # T's top-left cell is empty
    assert not collide(board, 4, 0, SHAPES["T"])


def test_collide_walls_and_floor():
    board = new_board(10, 20)
    assert collide(board, -1, 0, SHAPES["O"])
    assert collide(board, 9, 0, SHAPES["O"])
    assert collide(board, 0, 19, SHAPES["O"])
    assert not collide(board, 0, 18, SHAPES["O"])


def test_collide_above_top_is_not_blocking():
    board = new_board(10, 20)
    assert not collide(board, 3, -1, SHAPES["O"])
    assert not collide(board, 3, -3, SHAPES["I"])


def test_merge_writes_filled_cells_only():
    board = new_board(10, 20)
    merge(board, 3, 18, SHAPES["T"])
    assert board[18][3:6] == [0, 1, 0]
    assert board[19][3:6] == [1, 1, 1]
    assert sum(map(sum, board)) == 4


def test_sweep_two_separate_rows():
    board = new_board(4, 8)
    for r in range(8):
        board[r] = [r + 1, 0, 0, 0]
    board[2] = [1, 1, 1, 1]
    board[5] = [1, 1, 1, 1]
    kept = [list(board[r]) for r in range(8) if r not in (2, 5)]
    assert sweep(board) == 2
    assert len(board) == 8
    assert board[0] == [0, 0, 0, 0] and board[1] == [0, 0, 0, 0]
    assert board[2:] == kept


def test_sweep_four_rows_at_once():
    board = new_board(4, 6)
    board[1] = [1, 0, 0, 0]
    for r in range(2, 6):
        board[r] = [1, 1, 1, 1]
    assert sweep(board) == 4
    assert board[5] == [1, 0, 0, 0]
    assert not any(map(any, board[:5]))


def test_sweep_nothing_full():
    board = new_board(4, 4)
    board[3] = [1, 1, 0, 1]
    assert sweep(board) == 0
    assert board[3] == [1, 1, 0, 1]

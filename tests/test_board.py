import itertools

import pytest

from morrisclient.board import (
    Board,
    is_free_position,
    map_coord,
    remap_coordinates,
    render_board,
)
from morrisclient.model import PieceInfo, PlayerInfo

ALL_POINTS = list(itertools.product(range(3), range(8)))


@pytest.mark.parametrize("ring,spot", ALL_POINTS)
def test_coordinate_round_trip(ring, spot):
    assert map_coord(remap_coordinates(ring, spot)) == (ring, spot)


def test_remap_first_point():
    assert remap_coordinates(0, 0) == "A0"


def test_negative_spot_wraps():
    assert remap_coordinates(1, -1) == remap_coordinates(1, 7)


@pytest.mark.parametrize("pos", ["A", "C"])
def test_off_board_positions_map_to_none(pos):
    assert map_coord(pos) is None


@pytest.mark.parametrize("pos", ["Z1", "A8", "B", "", "AB"])
def test_invalid_position_raises(pos):
    with pytest.raises(ValueError):
        map_coord(pos)


@pytest.mark.parametrize("ring,spot", [(3, 0), (-1, 0), (0, 8)])
def test_invalid_coordinates_raise(ring, spot):
    with pytest.raises(ValueError):
        remap_coordinates(ring, spot)


def test_is_free_position():
    assert is_free_position("N") is True
    assert is_free_position("A0") is False


def test_empty_board_is_free_everywhere():
    board = Board()
    assert all(board.is_free(r, s) for r, s in ALL_POINTS)
    assert all(board.player_at(r, s) is None for r, s in ALL_POINTS)


def test_place_occupies_point():
    board = Board()
    coord = board.place(PieceInfo(1, 3, "B5"))
    assert coord == map_coord("B5")
    assert board.is_free(*coord) is False
    assert board.player_at(*coord) == 1
    free = [p for p in ALL_POINTS if board.is_free(*p)]
    assert len(free) == len(ALL_POINTS) - 1


@pytest.mark.parametrize("pos", ["A", "C"])
def test_place_off_board_piece_does_nothing(pos):
    board = Board()
    assert board.place(PieceInfo(0, 0, pos)) is None
    assert all(board.is_free(r, s) for r, s in ALL_POINTS)


def test_is_free_wraps_negative_spot():
    board = Board()
    board.place(PieceInfo(0, 0, remap_coordinates(2, 7)))
    assert board.is_free(2, -1) is False
    assert board.player_at(2, -1) == 0


def test_out_of_range_point_raises():
    with pytest.raises(IndexError):
        Board().is_free(3, 0)


def test_from_players_places_all_board_pieces():
    me = PlayerInfo(0, pieces=[PieceInfo(0, 0, "A1"), PieceInfo(0, 1, "A")])
    enemy = PlayerInfo(1, pieces=[PieceInfo(1, 0, "C3"), PieceInfo(1, 1, "C")])
    board = Board.from_players([me, enemy])
    assert board.player_at(*map_coord("A1")) == 0
    assert board.player_at(*map_coord("C3")) == 1
    occupied = [p for p in ALL_POINTS if not board.is_free(*p)]
    assert len(occupied) == me.count_pieces() + enemy.count_pieces()


def test_render_empty_board():
    lines = render_board([]).splitlines()
    assert len(lines) == 13
    assert lines[0] == " +-----------+-----------+ "
    assert lines[0] == lines[-1]


def test_render_marks_pieces():
    empty = render_board([]).splitlines()
    players = [
        PlayerInfo(0, pieces=[PieceInfo(0, 0, "A0")]),
        PlayerInfo(1, pieces=[PieceInfo(1, 0, "C0")]),
    ]
    lines = render_board(players).splitlines()
    assert lines[0][0:3] == "(1)"
    assert lines[4][8:11] == "(2)"
    assert lines[0][3:] == empty[0][3:]
    unchanged = [i for i in range(13) if i not in (0, 4)]
    assert all(lines[i] == empty[i] for i in unchanged)


def test_render_ignores_off_board_pieces():
    players = [PlayerInfo(0, pieces=[PieceInfo(0, i, "A") for i in range(9)])]
    assert render_board(players) == render_board([])
import io
import random

import pytest

from morrisclient.board import map_coord
from morrisclient.errors import FunctionFailedError
from morrisclient.model import GameInfo, PieceInfo, PlayerInfo
from morrisclient.thinker import Thinker


def player(number, positions):
    positions = list(positions) + ["A"] * (9 - len(positions))
    return PlayerInfo(number, pieces=[PieceInfo(number, i, p) for i, p in enumerate(positions)])


def make_thinker(seed=0):
    out = io.StringIO()
    return Thinker(random.Random(seed), out), out


def test_no_request_writes_nothing():
    thinker, out = make_thinker()
    game = GameInfo(provide_move=False)
    assert thinker.think(game, [player(0, []), player(1, [])]) is None
    assert out.getvalue() == ""
    assert thinker.step == 0


def test_set_phase_writes_command_and_clears_flag():
    thinker, out = make_thinker()
    game = GameInfo(provide_move=True)
    command = thinker.think(game, [player(0, ["A0"]), player(1, ["B0"])])
    assert out.getvalue() == command
    assert command.startswith("PLAY ") and command.endswith("\n")
    assert command[5:-1] not in {"A0", "B0"}
    assert map_coord(command[5:-1]) is not None
    assert game.provide_move is False
    assert thinker.step == 1


def test_capture_phase_targets_enemy():
    thinker, _ = make_thinker()
    game = GameInfo(provide_move=True, pieces_to_be_captured=1)
    command = thinker.think(game, [player(0, ["A0"]), player(1, ["C", "C2"])])
    assert command == "PLAY C2\n"


def test_move_phase_when_all_set():
    thinker, _ = make_thinker()
    mine = ["A0", "A1", "A2", "B0", "C"] + ["C"] * 4
    me = PlayerInfo(0, pieces=[PieceInfo(0, i, p) for i, p in enumerate(mine)])
    enemy = player(1, ["A7", "B1", "A3"])
    command = thinker.think(GameInfo(provide_move=True), [me, enemy])
    src, dst = command[5:-1].split(":")
    assert src in {"A0", "A1", "A2", "B0"}
    assert dst not in {"A0", "A1", "A2", "B0", "A7", "B1", "A3"}


def test_jump_phase_with_three_pieces():
    thinker, _ = make_thinker(5)
    mine = ["A0", "B3", "C6"] + ["C"] * 6
    me = PlayerInfo(0, pieces=[PieceInfo(0, i, p) for i, p in enumerate(mine)])
    command = thinker.think(GameInfo(provide_move=True), [me, player(1, ["A1"])])
    src, dst = command[5:-1].split(":")
    assert src in {"A0", "B3", "C6"}
    assert dst not in {"A0", "B3", "C6", "A1"}


def test_step_cycles():
    thinker, _ = make_thinker()
    players = [player(0, []), player(1, [])]
    for _ in range(17):
        thinker.think(GameInfo(provide_move=True), players)
    assert thinker.step == 0


def test_prints_board(capsys):
    thinker, _ = make_thinker()
    thinker.think(GameInfo(provide_move=True), [player(0, ["A0"]), player(1, [])])
    printed = capsys.readouterr().out
    assert printed.splitlines()[0].startswith("(1)")


def test_capture_without_targets_raises():
    thinker, out = make_thinker()
    game = GameInfo(provide_move=True, pieces_to_be_captured=1)
    with pytest.raises(FunctionFailedError):
        thinker.think(game, [player(0, ["A0"]), player(1, [])])
    assert out.getvalue() == ""
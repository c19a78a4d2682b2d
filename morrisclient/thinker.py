"""The thinker: picks the next command for the current game state."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import TextIO

from morrisclient.board import Board, render_board
from morrisclient.model import AVAILABLE, GameInfo, PlayerInfo
from morrisclient.phases import capture_a_piece, jump, make_a_move, set_piece

_STEP_CYCLE = 17


class Thinker:
    """Chooses moves and writes each command to an output stream."""

    def __init__(self, rng: random.Random | None = None, output: TextIO | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.output = output if output is not None else sys.stdout
        self.step = 0

    def think(self, game: GameInfo, players: Sequence[PlayerInfo]) -> str | None:
        """Write the next command if a move is requested; return it, or None."""
        if not game.provide_move:
            return None

        board = Board.from_players(players)
        print(render_board(players), end="")

        me = players[game.my_player_number]
        if game.pieces_to_be_captured > 0:
            command = capture_a_piece(board, players[game.enemy_player_number], self.rng, self.step)
        elif me.pieces[game.pieces_count - 1].pos == AVAILABLE:
            command = set_piece(board, self.rng, self.step)
        elif me.count_pieces() > 3:
            command = make_a_move(board, me, self.rng, self.step)
        else:
            command = jump(board, me, self.rng, self.step)
        self.step = (self.step + 1) % _STEP_CYCLE

        self.output.write(command)
        self.output.flush()
        game.provide_move = False
        return command
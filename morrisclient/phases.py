"""Move choice for each game phase: setting, moving, capturing and jumping."""

from __future__ import annotations

import random
from collections.abc import Iterator

from morrisclient.board import RINGS, SPOTS, Board, map_coord, remap_coordinates
from morrisclient.errors import FunctionFailedError
from morrisclient.model import PieceInfo, PlayerInfo

_RAND_LIMIT = 2**31


def _draws(rng: random.Random, step: int, modulus: int) -> Iterator[int]:
    """Yield an endless run of random values below ``modulus``, perturbed by ``step``."""
    while True:
        yield (rng.randrange(_RAND_LIMIT) + 3 * step + 1) % modulus
        step += 1


def _free_points(board: Board) -> list[tuple[int, int]]:
    return [
        (ring, spot)
        for ring in range(len(RINGS))
        for spot in range(SPOTS)
        if board.is_free(ring, spot)
    ]


def _move_targets(ring: int, spot: int, index: int) -> list[tuple[int, int]]:
    """Neighbouring points of ``(ring, spot)`` in the order they are tried."""
    order_lr = 1 if index % 2 == 0 else -1
    cross: list[tuple[int, int]] = []
    if spot % 2 == 1:
        if ring in (0, 1):
            cross.append((ring + 1, spot))
        if ring in (1, 2):
            cross.append((ring - 1, spot))
    same = [(ring, (spot - order_lr) % SPOTS), (ring, (spot + order_lr) % SPOTS)]
    return cross + same if order_lr == 1 else same + cross


def _piece_targets(piece: PieceInfo, index: int) -> list[tuple[int, int]]:
    coord = map_coord(piece.pos)
    if coord is None:
        return []
    return _move_targets(coord[0], coord[1], index)


def set_piece(board: Board, rng: random.Random, step: int) -> str:
    """Choose a random free point to place a new piece on."""
    if not _free_points(board):
        raise FunctionFailedError("setPiece")
    ring, spot = rng.randrange(len(RINGS)), rng.randrange(SPOTS)
    while not board.is_free(ring, spot):
        ring = (rng.randrange(_RAND_LIMIT) + 3 * step + 1) % len(RINGS)
        spot = (rng.randrange(_RAND_LIMIT) + 3 * step + 1) % SPOTS
        step += 1
    return f"PLAY {remap_coordinates(ring, spot)}\n"


def make_a_move(board: Board, player: PlayerInfo, rng: random.Random, step: int) -> str:
    """Move a random piece of ``player`` to a free neighbouring point."""
    pieces = player.pieces
    movable = any(
        board.is_free(*target)
        for index, piece in enumerate(pieces)
        for target in _piece_targets(piece, index)
    )
    if not movable:
        raise FunctionFailedError("makeAMove")
    for index in _draws(rng, step, len(pieces)):
        piece = pieces[index]
        if not piece.on_board():
            continue
        for ring, spot in _piece_targets(piece, index):
            if board.is_free(ring, spot):
                return f"PLAY {piece.pos}:{remap_coordinates(ring, spot)}\n"
    raise FunctionFailedError("makeAMove")  # pragma: no cover - the draw loop is endless


def capture_a_piece(board: Board, enemy: PlayerInfo, rng: random.Random, step: int) -> str:
    """Capture a random piece of ``enemy`` that stands on the board.

    Pieces in a mill may be captured too, so the board is not consulted.
    """
    pieces = enemy.pieces
    if not any(piece.on_board() for piece in pieces):
        raise FunctionFailedError("captureAPiece")
    for index in _draws(rng, step, len(pieces)):
        piece = pieces[index]
        if piece.on_board():
            return f"PLAY {piece.pos}\n"
    raise FunctionFailedError("captureAPiece")  # pragma: no cover


def jump(board: Board, player: PlayerInfo, rng: random.Random, step: int) -> str:
    """Move a random piece of ``player`` to any free point."""
    pieces = player.pieces
    if not any(piece.on_board() for piece in pieces) or not _free_points(board):
        raise FunctionFailedError("jump")
    for index in _draws(rng, step, len(pieces)):
        piece = pieces[index]
        if not piece.on_board():
            continue
        rings = _draws(rng, step, len(RINGS))
        spots = _draws(rng, step, SPOTS)
        for ring, spot in zip(rings, spots):
            if board.is_free(ring, spot):
                return f"PLAY {piece.pos}:{remap_coordinates(ring, spot)}\n"
    raise FunctionFailedError("jump")  # pragma: no cover
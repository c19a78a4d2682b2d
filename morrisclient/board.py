"""Board geometry: ring/spot coordinates, occupancy and text rendering."""

from __future__ import annotations

from collections.abc import Iterable

from morrisclient.model import AVAILABLE, CAPTURED, EMPTY, PieceInfo, PlayerInfo

RINGS = "ABC"
SPOTS = 8

_TEMPLATE = (
    " +-----------+-----------+ ",
    " |           |           | ",
    " |   +-------+-------+   | ",
    " |   |       |       |   | ",
    " |   |   +---+---+   |   | ",
    " |   |   |       |   |   | ",
    " +---+---+       +---+---+ ",
    " |   |   |       |   |   | ",
    " |   |   +---+---+   |   | ",
    " |   |       |       |   | ",
    " |   +-------+-------+   | ",
    " |           |           | ",
    " +-----------+-----------+ ",
)

_BOARD_X = (
    0, 12, 24, 24, 24, 12, 0, 0,
    4, 12, 20, 20, 20, 12, 4, 4,
    8, 12, 16, 16, 16, 12, 8, 8,
)

_BOARD_Y = (
    0, 0, 0, 6, 12, 12, 12, 6,
    2, 2, 2, 6, 10, 10, 10, 6,
    4, 4, 4, 6, 8, 8, 8, 6,
)

_DIGITS = "01234567"


def map_coord(pos: str) -> tuple[int, int] | None:
    """Turn a position such as ``B3`` into ``(ring, spot)``; None for off-board pieces."""
    if pos in (AVAILABLE, CAPTURED):
        return None
    if len(pos) != 2 or pos[0] not in RINGS or pos[1] not in _DIGITS:
        raise ValueError(f"invalid board position: {pos!r}")
    return RINGS.index(pos[0]), int(pos[1])


def remap_coordinates(ring: int, spot: int) -> str:
    """Turn ``(ring, spot)`` into a position string; a spot of -1 wraps to 7."""
    if spot < 0:
        spot += SPOTS
    if not 0 <= ring < len(RINGS) or not 0 <= spot < SPOTS:
        raise ValueError(f"invalid coordinates: ({ring}, {spot})")
    return f"{RINGS[ring]}{spot}"


def is_free_position(pos: str) -> bool:
    """True if ``pos`` is the marker of an empty board point."""
    return pos == EMPTY


def _board_index(pos: str) -> int | None:
    if len(pos) >= 2 and pos[0] in RINGS and pos[1] in _DIGITS:
        return RINGS.index(pos[0]) * SPOTS + int(pos[1])
    return None


def render_board(players: Iterable[PlayerInfo]) -> str:
    """Draw the board as text, marking each piece as ``(n)`` with n the player's index + 1."""
    rows = [list(line) for line in _TEMPLATE]
    for index, player in enumerate(players):
        marker = ("(", chr(ord("1") + index), ")")
        for piece in player.pieces[:9]:
            cell = _board_index(piece.pos)
            if cell is None:
                continue
            x, y = _BOARD_X[cell], _BOARD_Y[cell]
            rows[y][x:x + 3] = marker
    return "".join("".join(row) + "\n" for row in rows)


class Board:
    """Occupancy of the 3 x 8 board points."""

    def __init__(self) -> None:
        self._cells: list[list[PieceInfo | None]] = [
            [None] * SPOTS for _ in RINGS
        ]

    @classmethod
    def from_players(cls, players: Iterable[PlayerInfo]) -> Board:
        """Build a board holding every on-board piece of the given players."""
        board = cls()
        for player in players:
            for piece in player.pieces:
                board.place(piece)
        return board

    @staticmethod
    def _index(ring: int, spot: int) -> tuple[int, int]:
        if spot < 0:
            spot += SPOTS
        if not 0 <= ring < len(RINGS) or not 0 <= spot < SPOTS:
            raise IndexError(f"no board point at ({ring}, {spot})")
        return ring, spot

    def place(self, piece: PieceInfo) -> tuple[int, int] | None:
        """Put a piece on its position; return its coordinates, or None if off board."""
        coord = map_coord(piece.pos)
        if coord is None:
            return None
        ring, spot = coord
        self._cells[ring][spot] = piece
        return coord

    def is_free(self, ring: int, spot: int) -> bool:
        """True if no piece stands at ``(ring, spot)``; a spot of -1 wraps to 7."""
        ring, spot = self._index(ring, spot)
        return self._cells[ring][spot] is None

    def player_at(self, ring: int, spot: int) -> int | None:
        """Owner of the piece at ``(ring, spot)``, or None if the point is empty."""
        ring, spot = self._index(ring, spot)
        piece = self._cells[ring][spot]
        return None if piece is None else piece.player_num
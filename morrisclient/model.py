"""Game state shared between the connection and the thinker."""

from __future__ import annotations

from dataclasses import dataclass, field

AVAILABLE = "A"
CAPTURED = "C"
EMPTY = "N"


@dataclass
class PieceInfo:
    """One piece: its owner, its number and its position (``A``, ``C`` or ``A0``..``C7``)."""

    player_num: int
    piece_num: int
    pos: str = AVAILABLE

    def on_board(self) -> bool:
        """True if the piece stands on the board (neither available nor captured)."""
        return self.pos not in (AVAILABLE, CAPTURED)


@dataclass
class PlayerInfo:
    """A player and their pieces."""

    player_number: int
    name: str = ""
    ready: bool = False
    is_winner: bool = False
    pieces: list[PieceInfo] = field(default_factory=list)

    def count_pieces(self) -> int:
        """Number of this player's pieces currently on the board."""
        return sum(1 for piece in self.pieces if piece.on_board())


@dataclass
class GameInfo:
    """Overall game state."""

    game_name: str = ""
    my_player_number: int = 0
    enemy_player_number: int = 1
    count_player: int = 2
    thinker_pid: int = 0
    connector_pid: int = 0
    provide_move: bool = False
    pieces_to_be_captured: int = 0
    pieces_count: int = 9
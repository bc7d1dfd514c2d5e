"""Core chess types: directions, pieces, colours and moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Bitboard = int
Square = int

NUM_SQUARES = 64
FULL_BOARD: Bitboard = (1 << NUM_SQUARES) - 1

WHITE_OO_MASK: Bitboard = 0x0000000000000050
WHITE_OOO_MASK: Bitboard = 0x0000000000000014
BLACK_OO_MASK: Bitboard = 0x5000000000000000
BLACK_OOO_MASK: Bitboard = 0x1400000000000000

WHITE_OO_RIGHTS_MASK = 0x1
WHITE_OOO_RIGHTS_MASK = 0x2
BLACK_OO_RIGHTS_MASK = 0x4
BLACK_OOO_RIGHTS_MASK = 0x8


class Direction(IntEnum):
    """The eight compass directions a sliding piece can travel."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    @property
    def vector(self) -> int:
        """Square index offset for one step in this direction."""
        return _DIR_VECTORS[self]

    @property
    def stopper(self) -> Bitboard:
        """Squares from which no further step in this direction is possible."""
        return _RAY_STOPPERS[self]


_DIR_VECTORS = (8, 9, 1, -7, -8, -9, -1, 7)
_RAY_STOPPERS = (
    0xFF00000000000000,
    0xFF80808080808080,
    0x8080808080808080,
    0x80808080808080FF,
    0x00000000000000FF,
    0x01010101010101FF,
    0x0101010101010101,
    0xFF01010101010101,
)


class Piece(IntEnum):
    """Piece kinds; NONE marks the absence of a piece."""

    PAWN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5
    NONE = 7


PIECES = tuple(p for p in Piece if p is not Piece.NONE)


class Colour(IntEnum):
    """Side colours."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Colour:
        """The other side."""
        return Colour.BLACK if self is Colour.WHITE else Colour.WHITE


@dataclass(frozen=True)
class Move:
    """A move given by the bitboard of its origin and destination squares."""

    colour: Colour
    piece: Piece
    from_to: Bitboard
    captured: Piece = Piece.NONE
    is_en_passant: bool = False
    castle: int = 0
    promotion: Piece = Piece.NONE
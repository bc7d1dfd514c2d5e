"""Bitboard chess position."""

from __future__ import annotations

from .types import FULL_BOARD, PIECES, Bitboard, Colour, Move, Piece

_SIGNATURES = {
    Piece.PAWN: "P",
    Piece.ROOK: "R",
    Piece.KNIGHT: "N",
    Piece.BISHOP: "B",
    Piece.QUEEN: "Q",
    Piece.KING: "K",
}

_WHITE_ANSI = 96
_BLACK_ANSI = 31


def _bit(*squares: int) -> Bitboard:
    bb = 0
    for sq in squares:
        bb |= 1 << sq
    return bb


class IllegalTurnError(ValueError):
    """Raised when a move is made by the side not on turn."""


class Board:
    """A chess position held as piece and colour bitboards."""

    def __init__(self) -> None:
        self._white_to_move = True
        self._castling_rights = 0x0F
        self._en_passant_target = 0
        self._half_moves = 0
        self._piece_bbs: dict[Piece, Bitboard] = {
            Piece.PAWN: 0x00FF00000000FF00,
            Piece.ROOK: 0x8100000000000081,
            Piece.KNIGHT: _bit(1, 6, 57, 62),
            Piece.BISHOP: 0x2400000000000024,
            Piece.QUEEN: 0x0800000000000008,
            Piece.KING: 0x1000000000000010,
        }
        self._colour_bbs: dict[Colour, Bitboard] = {
            Colour.WHITE: 0x000000000000FFFF,
            Colour.BLACK: 0xFFFF000000000000,
        }
        self._occupied: Bitboard = 0xFFFF00000000FFFF

    def piece_bb(self, piece: Piece) -> Bitboard:
        """Squares holding ``piece`` of either colour."""
        return self._piece_bbs[piece]

    def colour_bb(self, colour: Colour) -> Bitboard:
        """Squares holding pieces of ``colour``."""
        return self._colour_bbs[colour]

    @property
    def occupied(self) -> Bitboard:
        return self._occupied

    @property
    def white_to_move(self) -> bool:
        return self._white_to_move

    @property
    def side_to_move(self) -> Colour:
        return Colour.WHITE if self._white_to_move else Colour.BLACK

    @property
    def castling_rights(self) -> int:
        return self._castling_rights

    @property
    def half_moves(self) -> int:
        return self._half_moves

    def en_passant_square(self, colour: Colour) -> Bitboard:
        """Square ``colour`` may capture en passant onto, or 0."""
        if not self._en_passant_target:
            return 0
        rank = 5 if colour == Colour.WHITE else 2
        return (self._en_passant_target << (rank * 8)) & FULL_BOARD

    def make_move(self, move: Move) -> None:
        """Apply ``move``; raise IllegalTurnError if it is not that side's turn."""
        if self._white_to_move != (move.colour == Colour.WHITE):
            raise IllegalTurnError(f"it is not {move.colour.name.lower()}'s turn")
        mover = Colour(move.colour)
        opponent = mover.opponent
        from_bb = move.from_to & self._colour_bbs[mover]
        to_bb = move.from_to & self._colour_bbs[opponent]

        self._piece_bbs[move.piece] ^= move.from_to
        self._colour_bbs[mover] ^= move.from_to

        if move.captured != Piece.NONE:
            self._piece_bbs[move.captured] ^= to_bb
            self._colour_bbs[opponent] ^= to_bb
            self._occupied ^= from_bb
        else:
            self._occupied ^= move.from_to

        self._white_to_move = not self._white_to_move

        if move.captured != Piece.NONE or move.piece == Piece.PAWN:
            self._half_moves += 1
        else:
            self._half_moves = 1

    def render(self) -> str:
        """The board as coloured text, rank 8 first."""
        lines = []
        for rank in range(7, -1, -1):
            cells = []
            for file in range(8):
                mask = 1 << (rank * 8 + file)
                if not self._occupied & mask:
                    cells.append(". ")
                    continue
                code = _WHITE_ANSI if self._colour_bbs[Colour.WHITE] & mask else _BLACK_ANSI
                cells.extend(
                    f"\033[{code}m{_SIGNATURES[piece]}\033[0m "
                    for piece in PIECES
                    if self._piece_bbs[piece] & mask
                )
            lines.append("".join(cells) + "\n")
        return "".join(lines) + "\n"

    def print_board(self) -> None:
        """Write the rendered board to standard output."""
        print(self.render(), end="")


def format_bitboard(bitboard: Bitboard) -> str:
    """A bitboard as an 8x8 grid of 1s and 0s, rank 8 first."""
    rows = (
        "".join("1 " if bitboard >> (rank * 8 + file) & 1 else "0 " for file in range(8))
        + "\n"
        for rank in range(7, -1, -1)
    )
    return "".join(rows) + "\n"


def print_bitboard(bitboard: Bitboard) -> None:
    """Write a bitboard grid to standard output."""
    print(format_bitboard(bitboard), end="")
"""Pseudo-legal move generation over bitboards."""

from __future__ import annotations

from .board import Board
from .lookup import knight_lookup, ray_lookup
from .types import (
    BLACK_OO_MASK,
    BLACK_OO_RIGHTS_MASK,
    BLACK_OOO_MASK,
    BLACK_OOO_RIGHTS_MASK,
    FULL_BOARD,
    NUM_SQUARES,
    PIECES,
    WHITE_OO_MASK,
    WHITE_OO_RIGHTS_MASK,
    WHITE_OOO_MASK,
    WHITE_OOO_RIGHTS_MASK,
    Bitboard,
    Colour,
    Direction,
    Move,
    Piece,
    Square,
)

_WHITE_PAWN_RANK: Bitboard = 0x000000000000FF00
_BLACK_PAWN_RANK: Bitboard = 0x00FF000000000000
_TOP_BIT: Bitboard = 1 << 63

_CASTLES = {
    WHITE_OO_MASK: WHITE_OO_RIGHTS_MASK,
    WHITE_OOO_MASK: WHITE_OOO_RIGHTS_MASK,
    BLACK_OO_MASK: BLACK_OO_RIGHTS_MASK,
    BLACK_OOO_MASK: BLACK_OOO_RIGHTS_MASK,
}


def _bit(square: int) -> Bitboard:
    """Single-square bitboard, or 0 for a square off the board."""
    return 1 << square if 0 <= square < NUM_SQUARES else 0


def _shift(bb: Bitboard, offset: int) -> Bitboard:
    return (bb << offset) & FULL_BOARD if offset > 0 else bb >> -offset


def _lowest_square(bb: Bitboard) -> Square:
    return (bb & -bb).bit_length() - 1


def _highest_square(bb: Bitboard) -> Square:
    return bb.bit_length() - 1


def _not_own(board: Board, colour: Colour, bb: Bitboard) -> Bitboard:
    return bb & ~board.colour_bb(colour) & FULL_BOARD


def pawn_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """Pushes and captures for a pawn of ``colour`` on ``square``."""
    empty = ~board.occupied & FULL_BOARD
    targets = board.colour_bb(Colour(colour).opponent) | board.en_passant_square(colour)
    file = square % 8
    bb = 0
    if colour == Colour.WHITE:
        if _bit(square + 8) & empty:
            bb |= _bit(square + 8)
            if _bit(square) & _WHITE_PAWN_RANK and _bit(square + 16) & empty:
                bb |= _bit(square + 16)
        if file != 0 and _bit(square + 7) & targets:
            bb |= _bit(square + 7)
        if file != 7 and _bit(square + 9) & targets:
            bb |= _bit(square + 9)
    else:
        if _bit(square - 8) & empty:
            bb |= _bit(square - 8)
            if _bit(square) & _BLACK_PAWN_RANK and _bit(square - 16) & empty:
                bb |= _bit(square - 16)
        if file != 7 and _bit(square - 7) & targets:
            bb |= _bit(square - 7)
        if file != 0 and _bit(square - 9) & targets:
            bb |= _bit(square - 9)
    return bb


def knight_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """Knight destinations not occupied by its own side."""
    return _not_own(board, colour, knight_lookup(square))


def ray_attacks(board: Board, square: Square, direction: int) -> Bitboard:
    """Squares along ``direction`` up to and including the first blocker."""
    direction = Direction(direction)
    attacks = ray_lookup(square, direction)
    blockers = attacks & board.occupied
    if direction.vector > 0:
        stop = _lowest_square(blockers | _TOP_BIT)
    else:
        stop = _highest_square(blockers | 1)
    return attacks ^ ray_lookup(stop, direction)


def bishop_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """Diagonal slides not ending on its own side."""
    bb = 0
    for direction in Direction:
        if direction % 2 == 1:
            bb |= ray_attacks(board, square, direction)
    return _not_own(board, colour, bb)


def rook_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """Orthogonal slides not ending on its own side."""
    bb = 0
    for direction in Direction:
        if direction % 2 == 0:
            bb |= ray_attacks(board, square, direction)
    return _not_own(board, colour, bb)


def king_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """One-step king moves not ending on its own side."""
    king = 1 << square
    bb = 0
    for direction in Direction:
        if king & direction.stopper:
            continue
        bb |= _shift(king, direction.vector)
    return _not_own(board, colour, bb)


def queen_moves(board: Board, square: Square, colour: Colour) -> Bitboard:
    """Union of bishop and rook moves."""
    return bishop_moves(board, square, colour) | rook_moves(board, square, colour)


_GENERATORS = {
    Piece.PAWN: pawn_moves,
    Piece.KNIGHT: knight_moves,
    Piece.BISHOP: bishop_moves,
    Piece.ROOK: rook_moves,
    Piece.QUEEN: queen_moves,
    Piece.KING: king_moves,
}


def piece_moves(board: Board, square: Square, piece: Piece, colour: Colour) -> Bitboard:
    """Destinations for ``piece`` on ``square``; 0 for an unknown piece."""
    generator = _GENERATORS.get(piece)
    return generator(board, square, colour) if generator else 0


def least_significant_bit(bitboard: Bitboard) -> Bitboard:
    """The lowest set bit of ``bitboard`` as a bitboard."""
    return bitboard & -bitboard


def _bits(bitboard: Bitboard):
    while bitboard:
        bit = least_significant_bit(bitboard)
        bitboard ^= bit
        yield bit


def piece_type(board: Board, bitboard: Bitboard) -> Piece:
    """The first piece kind found on ``bitboard``, or Piece.NONE."""
    return next((p for p in PIECES if board.piece_bb(p) & bitboard), Piece.NONE)


def all_moves(board: Board, colour: Colour) -> list[Move]:
    """Every pseudo-legal move for ``colour``, grouped by piece kind."""
    moves = []
    for piece in PIECES:
        for origin in _bits(board.piece_bb(piece) & board.colour_bb(colour)):
            square = _lowest_square(origin)
            for target in _bits(piece_moves(board, square, piece, colour)):
                captured = piece_type(board, target) if target & board.occupied else Piece.NONE
                moves.append(Move(Colour(colour), piece, target | origin, captured))
    return moves


def create_move(board: Board, from_to: Bitboard, piece: Piece, colour: Colour) -> Move:
    """Build a move, flagging en passant captures and castling."""
    is_en_passant = False
    castle = 0
    if piece == Piece.PAWN:
        is_en_passant = bool(from_to & board.en_passant_square(colour))
    elif piece == Piece.KING:
        castle = _CASTLES.get(from_to, 0)
    return Move(
        Colour(colour),
        Piece(piece),
        from_to,
        Piece.NONE,
        is_en_passant,
        castle,
        Piece.NONE,
    )
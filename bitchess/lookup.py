"""Precomputed knight-move and sliding-ray lookup tables."""

from __future__ import annotations

from functools import cache

from .types import NUM_SQUARES, Bitboard, Direction, Square

_MASK = (1 << 64) - 1


def _knight_targets(square: Square) -> Bitboard:
    file = square % 8
    bb = 0
    if file >= 2 and square <= 55:
        bb |= 1 << (square + 6)
    if file >= 1 and square <= 47:
        bb |= 1 << (square + 15)
    if file <= 6 and square <= 47:
        bb |= 1 << (square + 17)
    if file <= 5 and square <= 55:
        bb |= 1 << (square + 10)
    if file <= 5 and square >= 8:
        bb |= 1 << (square - 6)
    if file <= 6 and square >= 16:
        bb |= 1 << (square - 15)
    if file >= 1 and square >= 16:
        bb |= 1 << (square - 17)
    if file >= 2 and square >= 8:
        bb |= 1 << (square - 10)
    return bb


def _shift(bb: Bitboard, offset: int) -> Bitboard:
    return (bb << offset) & _MASK if offset > 0 else bb >> -offset


def _ray(square: Square, direction: Direction) -> Bitboard:
    piece = 1 << square
    if piece & direction.stopper:
        return 0
    bb = 0
    for step in range(1, 8):
        bb |= _shift(piece, step * direction.vector)
        if bb & direction.stopper:
            break
    return bb


@cache
def knight_table() -> tuple[Bitboard, ...]:
    """Knight destinations for every square."""
    return tuple(_knight_targets(sq) for sq in range(NUM_SQUARES))


@cache
def ray_table() -> tuple[tuple[Bitboard, ...], ...]:
    """Rays to the board edge for every square and direction."""
    return tuple(
        tuple(_ray(sq, d) for d in Direction) for sq in range(NUM_SQUARES)
    )


def knight_lookup(square: Square) -> Bitboard:
    """Squares a knight on ``square`` attacks on an empty board."""
    return knight_table()[square]


def ray_lookup(square: Square, direction: int) -> Bitboard:
    """Squares from ``square`` to the board edge along ``direction``."""
    return ray_table()[square][Direction(direction)]
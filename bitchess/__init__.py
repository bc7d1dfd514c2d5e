"""Bitboard chess board representation and pseudo-legal move generation."""

__version__ = "0.1.0"
__all__ = ["types", "lookup", "board", "movegen", "cli"]
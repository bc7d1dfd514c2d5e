# bitchess

A small chess board built on 64-bit bitboards, with pseudo-legal move
generation for every piece type.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
bitchess
bitchess --moves 3
```

This sets up the starting position and plays moves automatically. Each
move is the last one that `all_moves` produces for the side to move.
`--moves` sets how many moves are played (7 by default). The command then
prints the resulting board, rank 8 at the top, with white pieces in bright
cyan and black pieces in red (ANSI colour codes). Empty squares are shown
as `.`.

## Library use

```python
from bitchess.board import Board, format_bitboard
from bitchess.types import Colour, Piece
from bitchess.movegen import all_moves, knight_moves

board = Board()

# Bitboard of the squares the g1 knight can reach
print(format_bitboard(knight_moves(board, 6, Colour.WHITE)))

# Every pseudo-legal move for White, as Move records
moves = all_moves(board, Colour.WHITE)
board.make_move(moves[-1])
board.print_board()
```

Squares are numbered from 0 (a1) to 63 (h8), rank by rank. A bitboard is a
Python `int` in which bit `n` stands for square `n`.

### `bitchess.types`

- `Direction`: the eight compass directions, each with a `vector` (square
  offset of one step) and a `stopper` (squares from which no step in that
  direction is possible).
- `Piece`: `PAWN`, `ROOK`, `KNIGHT`, `BISHOP`, `QUEEN`, `KING`, and `NONE`
  for no piece.
- `Colour`: `WHITE` and `BLACK`, with `opponent` giving the other side.
- `Move`: a frozen record of `colour`, `piece`, `from_to` (the origin and
  destination squares as one bitboard), `captured`, `is_en_passant`,
  `castle` and `promotion`.

### `bitchess.lookup`

`knight_lookup(square)` and `ray_lookup(square, direction)` return the
knight targets and the ray to the board edge from a square on an empty
board. `knight_table()` and `ray_table()` return the whole tables, built
once and cached.

### `bitchess.board`

`Board()` holds the starting position. It offers `piece_bb(piece)`,
`colour_bb(colour)`, `en_passant_square(colour)` and the properties
`occupied`, `white_to_move`, `side_to_move`, `castling_rights` and
`half_moves`.

`Board.make_move(move)` applies a move and passes the turn. It raises
`IllegalTurnError` (a `ValueError`) when the move is for the side that is
not on move; no other legality checks are made. After a capture or a pawn
move `half_moves` goes up by one; after any other move it is set to 1.

`Board.render()` returns the coloured board as text and
`Board.print_board()` writes it to standard output. `format_bitboard(bb)`
and `print_bitboard(bb)` show any bitboard as an 8x8 grid of `1` and `0`.

### `bitchess.movegen`

`pawn_moves`, `knight_moves`, `bishop_moves`, `rook_moves`, `queen_moves`
and `king_moves` each take `(board, square, colour)` and return a bitboard
of destinations. `piece_moves(board, square, piece, colour)` dispatches on
the piece kind, and `ray_attacks(board, square, direction)` gives a
sliding ray up to and including its first blocker.

`all_moves(board, colour)` lists every pseudo-legal move for a side,
grouped by piece kind, with `captured` set for captures.
`create_move(board, from_to, piece, colour)` builds a `Move`, marking pawn
moves onto the en passant square and king moves that match a castling
pattern (`castle` is then the matching castling-rights bit).

`least_significant_bit(bb)` and `piece_type(board, bb)` are small helpers
used by the generator.

### `bitchess.cli`

`play_last_moves(board, count)` plays the last generated move `count`
times and returns the moves played; `main(argv=None)` is the `bitchess`
command.

## What it does not do

This is a board and move generator, not a playing program. There is no
engine or search, no interactive play, and no loading of positions: every
`Board` starts from the initial position. Moves are pseudo-legal only:
checks and checkmate are not detected, castling and promotion are not
generated, `make_move` never sets an en passant square or changes the
castling rights, and the game is never declared over.

## Modules

- `bitchess.types`: the `Direction`, `Piece` and `Colour` enums and the `Move` record.
- `bitchess.lookup`: the precomputed knight-move and ray tables.
- `bitchess.board`: `Board`, `IllegalTurnError`, `format_bitboard` and `print_bitboard`.
- `bitchess.movegen`: move generation for each piece and `all_moves`.
- `bitchess.cli`: the `bitchess` command and `play_last_moves`.
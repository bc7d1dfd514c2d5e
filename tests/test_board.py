import pytest

from bitchess.board import Board, IllegalTurnError, format_bitboard, print_bitboard
from bitchess.types import PIECES, Colour, Move, Piece


def _bb(*squares):
    result = 0
    for sq in squares:
        result |= 1 << sq
    return result


def test_initial_position():
    board = Board()
    assert board.occupied == 0xFFFF00000000FFFF
    assert board.piece_bb(Piece.PAWN) == 0x00FF00000000FF00
    assert board.piece_bb(Piece.KNIGHT) == _bb(1, 6, 57, 62)
    assert board.colour_bb(Colour.WHITE) == 0x000000000000FFFF
    assert board.white_to_move is True
    assert board.castling_rights == 0x0F
    assert board.en_passant_square(Colour.WHITE) == 0


def test_initial_bitboards_are_consistent():
    board = Board()
    union = 0
    for piece in PIECES:
        assert union & board.piece_bb(piece) == 0
        union |= board.piece_bb(piece)
    assert union == board.occupied
    assert board.colour_bb(Colour.WHITE) | board.colour_bb(Colour.BLACK) == board.occupied


def test_move_by_wrong_side_raises():
    board = Board()
    with pytest.raises(IllegalTurnError):
        board.make_move(Move(Colour.BLACK, Piece.PAWN, _bb(52, 36)))
    assert board.white_to_move is True


def test_quiet_pawn_move():
    board = Board()
    board.make_move(Move(Colour.WHITE, Piece.PAWN, _bb(12, 28)))
    assert board.occupied & _bb(28)
    assert not board.occupied & _bb(12)
    assert board.piece_bb(Piece.PAWN) & _bb(28)
    assert board.colour_bb(Colour.WHITE) & _bb(28)
    assert board.side_to_move is Colour.BLACK


def test_non_pawn_quiet_move_resets_half_moves():
    board = Board()
    board.make_move(Move(Colour.WHITE, Piece.PAWN, _bb(12, 28)))
    board.make_move(Move(Colour.BLACK, Piece.PAWN, _bb(52, 36)))
    before = board.half_moves
    board.make_move(Move(Colour.WHITE, Piece.KNIGHT, _bb(1, 18)))
    assert board.half_moves == 1
    assert before > 1


def test_capture_updates_bitboards():
    board = Board()
    board.make_move(Move(Colour.WHITE, Piece.KNIGHT, _bb(1, 18)))
    board.make_move(Move(Colour.BLACK, Piece.PAWN, _bb(51, 35)))
    count_before = bin(board.occupied).count("1")
    halves_before = board.half_moves
    board.make_move(Move(Colour.WHITE, Piece.KNIGHT, _bb(18, 35), Piece.PAWN))
    assert board.piece_bb(Piece.KNIGHT) & _bb(35)
    assert not board.piece_bb(Piece.PAWN) & _bb(35)
    assert not board.colour_bb(Colour.BLACK) & _bb(35)
    assert board.colour_bb(Colour.WHITE) & _bb(35)
    assert not board.occupied & _bb(18)
    assert bin(board.occupied).count("1") == count_before - 1
    assert board.half_moves == halves_before + 1


def test_render_shape_and_content():
    text = Board().render()
    lines = text.split("\n")
    assert len(lines) == 10
    assert lines[8] == "" and lines[9] == ""
    assert lines[4] == ". " * 8
    assert lines[0].startswith("\033[31mR\033[0m ")
    assert lines[7].startswith("\033[96mR\033[0m ")


def test_render_reflects_move():
    board = Board()
    board.make_move(Move(Colour.WHITE, Piece.PAWN, _bb(12, 28)))
    lines = board.render().split("\n")
    assert "\033[96mP\033[0m" in lines[4]
    assert lines[6].count(". ") == 1


def test_print_board_matches_render(capsys):
    board = Board()
    board.print_board()
    assert capsys.readouterr().out == board.render()


def test_format_bitboard():
    text = format_bitboard(_bb(0, 63))
    lines = text.split("\n")
    assert lines[0] == "0 " * 7 + "1 "
    assert lines[7] == "1 " + "0 " * 7
    assert text.endswith("\n\n")
    assert text.count("1") == 2


def test_print_bitboard(capsys):
    print_bitboard(0)
    assert capsys.readouterr().out == format_bitboard(0)
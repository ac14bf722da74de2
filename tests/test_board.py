import pytest

from chessgame.board import INITIAL_LAYOUT, Board, MoveResult
from chessgame.pieces import Color, Pawn, Queen
from chessgame.point import Point


def layout(*rows):
    return "".join(rows)


def sq(name):
    return Point(ord(name[0]) - ord("a") + 1, int(name[1]))


def test_initial_render():
    lines = Board().render().splitlines()
    assert len(lines) == 8
    assert lines[0] == "r n b q k b n r"
    assert lines[-1] == "R N B Q K B N R"
    assert lines[3] == " ".join("#" * 8)


def test_render_matches_layout():
    board = Board(INITIAL_LAYOUT)
    assert board.render().replace(" ", "").replace("\n", "") == INITIAL_LAYOUT


def test_bad_layout_length():
    with pytest.raises(ValueError):
        Board("rnbqkbnr")


def test_simple_pawn_move():
    board = Board()
    assert board.move_figure(sq("e2"), sq("e4"), Color.WHITE) is MoveResult.OK
    assert isinstance(board.figure_at(sq("e4")), Pawn)
    assert board.figure_at(sq("e2")).is_empty


def test_pawn_loses_double_step_after_move():
    board = Board()
    assert board.move_figure(sq("e2"), sq("e3"), Color.WHITE) is MoveResult.OK
    assert board.move_figure(sq("e3"), sq("e5"), Color.WHITE) is MoveResult.ILLEGAL_MOVE


def test_error_codes():
    board = Board()
    before = board.render()
    assert board.move_figure(sq("e7"), sq("e5"), Color.WHITE) is MoveResult.NOT_OWN_FIGURE
    assert board.move_figure(sq("a1"), sq("a2"), Color.WHITE) is MoveResult.OWN_FIGURE_AT_DESTINATION
    assert board.move_figure(Point(0, 1), sq("a2"), Color.WHITE) is MoveResult.INVALID_SQUARE
    assert board.move_figure(sq("a2"), Point(1, 9), Color.WHITE) is MoveResult.INVALID_SQUARE
    assert board.move_figure(sq("a2"), sq("a2"), Color.WHITE) is MoveResult.SAME_SQUARE
    assert board.move_figure(sq("a1"), sq("a3"), Color.WHITE) is MoveResult.ILLEGAL_MOVE
    assert board.render() == before


def test_result_codes_and_success():
    assert MoveResult("8") is MoveResult.CHECKMATE
    board = Board()
    good = board.move_figure(sq("e2"), sq("e4"), Color.WHITE)
    assert good is MoveResult.OK
    assert good.successful
    bad = board.move_figure(sq("e7"), sq("e5"), Color.WHITE)
    assert bad is MoveResult.NOT_OWN_FIGURE
    assert not bad.successful
    assert MoveResult.CHECK.successful
    assert not MoveResult.SELF_CHECK.successful


def test_self_check_is_refused_and_undone():
    board = Board(layout(
        "####r###",
        "########",
        "########",
        "#######k",
        "########",
        "########",
        "####R###",
        "####K###",
    ))
    before = board.render()
    assert board.move_figure(sq("e2"), sq("d2"), Color.WHITE) is MoveResult.SELF_CHECK
    assert board.render() == before
    assert not board.is_check(Color.WHITE)


def test_check():
    board = Board(layout(
        "#######k",
        "########",
        "########",
        "########",
        "########",
        "########",
        "#R######",
        "K#######",
    ))
    assert not board.is_check(Color.BLACK)
    assert board.move_figure(sq("b2"), sq("b8"), Color.WHITE) is MoveResult.CHECK
    assert board.is_check(Color.BLACK)
    assert not board.is_checkmate(Color.BLACK)


def test_back_rank_checkmate():
    board = Board(layout(
        "#######k",
        "######pp",
        "########",
        "########",
        "########",
        "########",
        "########",
        "R#K#####",
    ))
    assert board.move_figure(sq("a1"), sq("a8"), Color.WHITE) is MoveResult.CHECKMATE
    assert board.is_checkmate(Color.BLACK)


def test_fools_mate():
    board = Board()
    assert board.move_figure(sq("f2"), sq("f3"), Color.WHITE) is MoveResult.OK
    assert board.move_figure(sq("e7"), sq("e5"), Color.BLACK) is MoveResult.OK
    assert board.move_figure(sq("g2"), sq("g4"), Color.WHITE) is MoveResult.OK
    assert board.move_figure(sq("d8"), sq("h4"), Color.BLACK) is MoveResult.CHECKMATE
    assert board.is_check(Color.WHITE)


def test_checkmate_search_leaves_board_unchanged():
    board = Board()
    before = board.render()
    assert not board.is_checkmate(Color.WHITE)
    assert board.render() == before


def test_white_promotion():
    board = Board(layout(
        "########",
        "P#######",
        "####k###",
        "########",
        "########",
        "########",
        "########",
        "####K###",
    ))
    assert board.move_figure(sq("a7"), sq("a8"), Color.WHITE) is MoveResult.OK
    promoted = board.figure_at(sq("a8"))
    assert isinstance(promoted, Queen)
    assert promoted.symbol == "Q"


def test_black_promotion():
    board = Board(layout(
        "####k###",
        "########",
        "########",
        "########",
        "########",
        "####K###",
        "#######p",
        "########",
    ))
    assert board.move_figure(sq("h2"), sq("h1"), Color.BLACK) is MoveResult.OK
    promoted = board.figure_at(sq("h1"))
    assert isinstance(promoted, Queen)
    assert promoted.symbol == "q"


def test_capture_replaces_figure():
    board = Board()
    board.move_figure(sq("e2"), sq("e4"), Color.WHITE)
    board.move_figure(sq("d7"), sq("d5"), Color.BLACK)
    assert board.move_figure(sq("e4"), sq("d5"), Color.WHITE) is MoveResult.OK
    captor = board.figure_at(sq("d5"))
    assert captor.color is Color.WHITE
    assert board.figure_at(sq("e4")).is_empty


def test_figure_at_off_board():
    with pytest.raises(IndexError):
        Board().figure_at(Point(9, 1))
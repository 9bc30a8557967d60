import pytest

from portalchess.board import ChessBoard
from portalchess.config import ConfigReader, Position
from portalchess.pieces import King, Pawn, Piece


def _config(board_size=8, pieces=None, custom_pieces=None):
    data = {
        "game_settings": {"name": "Test", "board_size": board_size, "turn_limit": 10},
        "pieces": pieces
        or [
            {
                "type": "King",
                "count": 1,
                "positions": {"white": [{"x": 0, "y": 0}], "black": [{"x": 1, "y": 1}]},
            }
        ],
    }
    if custom_pieces is not None:
        data["custom_pieces"] = custom_pieces
    return ConfigReader().load_from_data(data)


def test_pieces_are_placed_from_config():
    board = ChessBoard(_config())
    white = board.get_piece(Position(0, 0))
    black = board.get_piece(Position(1, 1))
    assert isinstance(white, King)
    assert white.color == "white"
    assert white.position == Position(0, 0)
    assert black.color == "black"
    assert len(board) == 2


def test_empty_square_returns_none():
    board = ChessBoard(_config())
    assert board.get_piece(Position(3, 3)) is None


def test_unknown_piece_type_is_not_placed():
    board = ChessBoard(
        _config(
            custom_pieces=[
                {"type": "Wizard", "positions": {"white": [{"x": 4, "y": 4}]}}
            ]
        )
    )
    assert board.get_piece(Position(4, 4)) is None
    assert len(board) == 2


def test_custom_pieces_of_known_type_are_placed():
    board = ChessBoard(
        _config(
            custom_pieces=[{"type": "Pawn", "positions": {"black": [{"x": 2, "y": 5}]}}]
        )
    )
    piece = board.get_piece(Position(2, 5))
    assert isinstance(piece, Pawn)
    assert piece.color == "black"


@pytest.mark.parametrize(
    "position, expected",
    [
        (Position(0, 0), True),
        (Position(8, 8), True),
        (Position(9, 0), False),
        (Position(0, 9), False),
        (Position(-1, 3), False),
        (Position(3, -1), False),
    ],
)
def test_in_bounds(position, expected):
    assert ChessBoard(_config()).in_bounds(position) is expected


def test_place_piece_out_of_bounds_is_ignored():
    board = ChessBoard(_config())
    piece = Piece("King", "white", None, None)
    assert board.place_piece(Position(20, 20), piece) is False
    assert board.get_piece(Position(20, 20)) is None


def test_place_piece_replaces_existing():
    board = ChessBoard(_config())
    piece = Piece("Queen", "black", None, None)
    assert board.place_piece(Position(0, 0), piece) is True
    assert board.get_piece(Position(0, 0)) is piece


def test_out_of_bounds_config_position_is_skipped():
    board = ChessBoard(
        _config(pieces=[{"type": "Rook", "positions": {"white": [{"x": 30, "y": 2}]}}])
    )
    assert len(board) == 0


def test_render_small_board():
    board = ChessBoard(
        _config(board_size=2, pieces=[{"type": "King", "positions": {"white": [{"x": 0, "y": 0}]}}])
    )
    assert board.render() == "2 . . \n1 ♔ . \n  a b \n"


def test_render_shape():
    board = ChessBoard(_config())
    lines = board.render().splitlines()
    assert len(lines) == 9
    assert lines[0].startswith("8 ")
    assert lines[7].startswith("1 ")
    assert lines[-1].split() == list("abcdefgh")
    assert lines[6].split()[2] == "♚"
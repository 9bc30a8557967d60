import pytest

from portalchess.config import Movement, SpecialAbilities
from portalchess.pieces import (
    Bishop,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
    create_piece,
)


@pytest.mark.parametrize(
    "kind, cls",
    [
        ("Pawn", Pawn),
        ("Knight", Knight),
        ("Bishop", Bishop),
        ("Rook", Rook),
        ("Queen", Queen),
        ("King", King),
    ],
)
def test_create_piece_builds_matching_class(kind, cls):
    movement = Movement(forward=1)
    abilities = SpecialAbilities(royal=True)
    piece = create_piece(kind, "white", movement, abilities)
    assert isinstance(piece, cls)
    assert piece.kind == kind
    assert piece.color == "white"
    assert piece.movement == movement
    assert piece.special_abilities == abilities


def test_create_piece_unknown_type_returns_none():
    assert create_piece("Dragon", "black", Movement(), SpecialAbilities()) is None


def test_new_piece_has_not_moved_and_has_no_position():
    piece = Rook("black", Movement(), SpecialAbilities())
    assert piece.has_moved is False
    assert piece.position is None


@pytest.mark.parametrize(
    "color, kind, symbol",
    [
        ("white", "King", "♔"),
        ("white", "Queen", "♕"),
        ("white", "Rook", "♖"),
        ("white", "Bishop", "♗"),
        ("white", "Knight", "♘"),
        ("white", "Pawn", "♙"),
        ("black", "King", "♚"),
        ("black", "Queen", "♛"),
        ("black", "Rook", "♜"),
        ("black", "Bishop", "♝"),
        ("black", "Knight", "♞"),
        ("black", "Pawn", "♟"),
    ],
)
def test_unicode_symbols(color, kind, symbol):
    piece = create_piece(kind, color, Movement(), SpecialAbilities())
    assert piece.unicode_symbol() == symbol


def test_unknown_kind_or_color_has_blank_symbol():
    assert Piece("Dragon", "white", Movement(), SpecialAbilities()).unicode_symbol() == " "
    assert Piece("King", "red", Movement(), SpecialAbilities()).unicode_symbol() == " "
"""Chess pieces and the factory that builds them by type name."""

from __future__ import annotations

from portalchess.config import Movement, Position, SpecialAbilities

_SYMBOLS = {
    "white": {
        "King": "♔",
        "Queen": "♕",
        "Rook": "♖",
        "Bishop": "♗",
        "Knight": "♘",
        "Pawn": "♙",
    },
    "black": {
        "King": "♚",
        "Queen": "♛",
        "Rook": "♜",
        "Bishop": "♝",
        "Knight": "♞",
        "Pawn": "♟",
    },
}


class Piece:
    """A piece on the board with its movement rules and abilities."""

    def __init__(
        self,
        kind: str,
        color: str,
        movement: Movement,
        special_abilities: SpecialAbilities,
    ) -> None:
        self.kind = kind
        self.color = color
        self.movement = movement
        self.special_abilities = special_abilities
        self.position: Position | None = None
        self.has_moved = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, color={self.color!r}, "
            f"position={self.position!r})"
        )

    def unicode_symbol(self) -> str:
        """Return the chess glyph for this piece, or a space if it has none."""
        return _SYMBOLS.get(self.color, {}).get(self.kind, " ")


class Pawn(Piece):
    """A pawn."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("Pawn", color, movement, special_abilities)


class Knight(Piece):
    """A knight."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("Knight", color, movement, special_abilities)


class Bishop(Piece):
    """A bishop."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("Bishop", color, movement, special_abilities)


class Rook(Piece):
    """A rook."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("Rook", color, movement, special_abilities)


class Queen(Piece):
    """A queen."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("Queen", color, movement, special_abilities)


class King(Piece):
    """A king."""

    def __init__(
        self, color: str, movement: Movement, special_abilities: SpecialAbilities
    ) -> None:
        super().__init__("King", color, movement, special_abilities)


_PIECE_TYPES: dict[str, type[Piece]] = {
    "Pawn": Pawn,
    "Knight": Knight,
    "Bishop": Bishop,
    "Rook": Rook,
    "Queen": Queen,
    "King": King,
}


def create_piece(
    kind: str,
    color: str,
    movement: Movement,
    special_abilities: SpecialAbilities,
) -> Piece | None:
    """Build the piece named ``kind``; return None for an unknown type."""
    piece_type = _PIECE_TYPES.get(kind)
    if piece_type is None:
        return None
    return piece_type(color, movement, special_abilities)
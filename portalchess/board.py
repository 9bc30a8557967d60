"""The chess board: holds pieces by square and renders itself as text."""

from __future__ import annotations

from portalchess.config import GameConfig, PieceConfig, Position
from portalchess.pieces import Piece, create_piece


class ChessBoard:
    """A square board populated from a game configuration."""

    def __init__(self, config: GameConfig) -> None:
        self.size = config.game_settings.board_size
        self._squares: dict[Position, Piece] = {}
        for piece_config in (*config.pieces, *config.custom_pieces):
            self._populate(piece_config)

    def _populate(self, piece_config: PieceConfig) -> None:
        for color, positions in piece_config.positions.items():
            for position in positions:
                piece = create_piece(
                    piece_config.kind,
                    color,
                    piece_config.movement,
                    piece_config.special_abilities,
                )
                if piece is not None:
                    piece.position = position
                    self.place_piece(position, piece)

    def __len__(self) -> int:
        return len(self._squares)

    def __iter__(self):
        """Iterate over (position, piece) pairs of occupied squares."""
        return iter(self._squares.items())

    def get_piece(self, position: Position) -> Piece | None:
        """Return the piece on ``position``, or None when the square is empty."""
        return self._squares.get(position)

    def place_piece(self, position: Position, piece: Piece) -> bool:
        """Put ``piece`` on ``position`` if it is on the board.

        Returns True when the piece was placed.
        """
        if not self.in_bounds(position):
            return False
        self._squares[position] = piece
        return True

    def in_bounds(self, position: Position) -> bool:
        """Return True when ``position`` lies within the board's limits."""
        return 0 <= position.x <= self.size and 0 <= position.y <= self.size

    def render(self) -> str:
        """Draw the board with rank numbers on the left and file letters below."""
        lines = []
        for rank in range(self.size, 0, -1):
            cells = []
            for file in range(self.size):
                piece = self._squares.get(Position(file, rank - 1))
                cells.append(piece.unicode_symbol() if piece is not None else ".")
            lines.append(f"{rank} " + "".join(f"{cell} " for cell in cells))
        letters = "".join(f"{chr(ord('a') + file)} " for file in range(self.size))
        lines.append("  " + letters)
        return "\n".join(lines) + "\n"
"""Game configuration: data model and JSON loading with validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

STANDARD_ABILITIES = ("castling", "royal", "jump_over", "promotion", "en_passant")
COLORS = ("white", "black")


class ConfigError(ValueError):
    """Raised when a configuration cannot be read or is invalid."""


@dataclass(frozen=True, order=True)
class Position:
    """A square on the board."""

    x: int
    y: int


@dataclass
class Movement:
    """Movement capabilities of a piece."""

    forward: int = 0
    sideways: int = 0
    diagonal: int = 0
    l_shape: bool = False
    diagonal_capture: int = 0
    first_move_forward: int = 0


@dataclass
class SpecialAbilities:
    """Special abilities of a piece, plus any custom boolean abilities."""

    castling: bool = False
    royal: bool = False
    jump_over: bool = False
    promotion: bool = False
    en_passant: bool = False
    custom_abilities: dict[str, bool] = field(default_factory=dict)


@dataclass
class PieceConfig:
    """Configuration of one piece type and where its pieces start."""

    kind: str = ""
    positions: dict[str, list[Position]] = field(default_factory=dict)
    movement: Movement = field(default_factory=Movement)
    special_abilities: SpecialAbilities = field(default_factory=SpecialAbilities)
    count: int = 0


@dataclass
class PortalProperties:
    """Behaviour of a portal."""

    preserve_direction: bool = True
    allowed_colors: list[str] = field(default_factory=list)
    cooldown: int = 0


@dataclass
class PortalConfig:
    """A portal linking an entry square to an exit square."""

    kind: str = "Portal"
    id: str = ""
    entry: Position = field(default_factory=lambda: Position(0, 0))
    exit: Position = field(default_factory=lambda: Position(0, 0))
    properties: PortalProperties = field(default_factory=PortalProperties)


@dataclass
class GameSettings:
    """General settings of a game."""

    name: str = "Custom Chess"
    board_size: int = 8
    turn_limit: int = 100


@dataclass
class GameConfig:
    """A complete game configuration."""

    game_settings: GameSettings = field(default_factory=GameSettings)
    pieces: list[PieceConfig] = field(default_factory=list)
    custom_pieces: list[PieceConfig] = field(default_factory=list)
    portals: list[PortalConfig] = field(default_factory=list)


def _field(obj: Any, key: str, default: Any) -> Any:
    """Read ``key`` from a JSON object, falling back to ``default``.

    The value must be convertible to the type of ``default``.
    """
    if not isinstance(obj, dict):
        raise ConfigError(f"cannot read {key!r} from a non-object value")
    if key not in obj:
        return default
    value = obj[key]
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(default, int):
        if isinstance(value, (int, float)):
            try:
                return int(value)
            except (OverflowError, ValueError) as exc:
                raise ConfigError(f"{key!r} is not a valid number") from exc
    elif isinstance(default, str):
        if isinstance(value, str):
            return value
    raise ConfigError(
        f"{key!r} has type {type(value).__name__}, expected {type(default).__name__}"
    )


def _parse_position(data: Any) -> Position:
    return Position(_field(data, "x", 0), _field(data, "y", 0))


def _parse_special_abilities(data: Any) -> SpecialAbilities:
    if not isinstance(data, dict):
        return SpecialAbilities()
    abilities = SpecialAbilities(
        **{name: _field(data, name, False) for name in STANDARD_ABILITIES}
    )
    abilities.custom_abilities = {
        key: value
        for key, value in data.items()
        if key not in STANDARD_ABILITIES and isinstance(value, bool)
    }
    return abilities


def _parse_movement(data: Any) -> Movement:
    return Movement(
        forward=_field(data, "forward", 0),
        sideways=_field(data, "sideways", 0),
        diagonal=_field(data, "diagonal", 0),
        l_shape=_field(data, "l_shape", False),
        diagonal_capture=_field(data, "diagonal_capture", 0),
        first_move_forward=_field(data, "first_move_forward", 0),
    )


def _parse_piece(data: Any) -> PieceConfig:
    piece = PieceConfig(kind=_field(data, "type", ""), count=_field(data, "count", 0))

    positions = data.get("positions")
    if isinstance(positions, dict):
        for color in COLORS:
            entries = positions.get(color)
            if isinstance(entries, list):
                parsed = [_parse_position(entry) for entry in entries]
                if parsed:
                    piece.positions[color] = parsed

    if "movement" in data:
        piece.movement = _parse_movement(data["movement"])
    if "special_abilities" in data:
        piece.special_abilities = _parse_special_abilities(data["special_abilities"])
    return piece


def _parse_pieces(data: Any, key: str) -> list[PieceConfig]:
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        return []
    return [_parse_piece(entry) for entry in data[key]]


def _parse_portal(data: Any) -> PortalConfig:
    portal = PortalConfig(
        kind=_field(data, "type", "Portal"),
        id=_field(data, "id", ""),
    )

    positions = data.get("positions")
    if isinstance(positions, dict):
        if "entry" in positions:
            portal.entry = _parse_position(positions["entry"])
        if "exit" in positions:
            portal.exit = _parse_position(positions["exit"])

    if "properties" in data:
        properties = data["properties"]
        portal.properties.preserve_direction = _field(
            properties, "preserve_direction", True
        )
        portal.properties.cooldown = _field(properties, "cooldown", 0)
        colors = properties.get("allowed_colors")
        if isinstance(colors, list):
            if not all(isinstance(color, str) for color in colors):
                raise ConfigError("allowed_colors must hold only strings")
            portal.properties.allowed_colors = list(colors)
        else:
            portal.properties.allowed_colors = list(COLORS)
    return portal


def _parse_portals(data: Any) -> list[PortalConfig]:
    if not isinstance(data, dict) or not isinstance(data.get("portals"), list):
        return []
    return [_parse_portal(entry) for entry in data["portals"]]


def _parse_game_settings(data: Any) -> GameSettings:
    if isinstance(data, dict) and "game_settings" in data:
        settings = data["game_settings"]
        return GameSettings(
            name=_field(settings, "name", "Custom Chess"),
            board_size=_field(settings, "board_size", 8),
            turn_limit=_field(settings, "turn_limit", 100),
        )
    return GameSettings()


def _in_board(position: Position, size: int) -> bool:
    return 0 <= position.x < size and 0 <= position.y < size


class ConfigReader:
    """Loads a game configuration from JSON and validates it."""

    def __init__(self) -> None:
        self.config = GameConfig()

    def load_from_file(self, path: str | Path) -> GameConfig:
        """Load and validate a configuration file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to open config file: {path}") from exc
        return self.load_from_string(text)

    def load_from_string(self, text: str) -> GameConfig:
        """Load and validate a configuration from a JSON document."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Error parsing config: {exc}") from exc
        return self.load_from_data(data)

    def load_from_data(self, data: Any) -> GameConfig:
        """Load and validate a configuration from decoded JSON data."""
        self.config = GameConfig(
            game_settings=_parse_game_settings(data),
            pieces=_parse_pieces(data, "pieces"),
            custom_pieces=_parse_pieces(data, "custom_pieces"),
            portals=_parse_portals(data),
        )
        self.validate()
        return self.config

    def validate(self) -> None:
        """Check the loaded configuration, raising ConfigError on the first problem."""
        config = self.config
        settings = config.game_settings
        if not settings.name:
            raise ConfigError("Game name is missing")
        if settings.board_size <= 0:
            raise ConfigError("Invalid board size")
        if settings.turn_limit <= 0:
            raise ConfigError("Invalid turn limit")
        if not config.pieces:
            raise ConfigError("No pieces defined")

        for piece in config.pieces:
            if not piece.kind:
                raise ConfigError("Piece is missing type")
            if not piece.positions:
                raise ConfigError(f"Piece {piece.kind} has no positions")

        for piece in config.custom_pieces:
            if not piece.kind:
                raise ConfigError("Custom piece is missing type")
            if not piece.positions:
                raise ConfigError(f"Custom piece {piece.kind} has no positions")

        for portal in config.portals:
            if not portal.id:
                raise ConfigError("Portal is missing ID")
            if not _in_board(portal.entry, settings.board_size):
                raise ConfigError(
                    f"Portal {portal.id} entry position is outside board bounds"
                )
            if not _in_board(portal.exit, settings.board_size):
                raise ConfigError(
                    f"Portal {portal.id} exit position is outside board bounds"
                )
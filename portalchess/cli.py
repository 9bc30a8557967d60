"""Command line entry point: show a game configuration and its board."""

from __future__ import annotations

import argparse
import sys

from portalchess.board import ChessBoard
from portalchess.config import (
    ConfigError,
    ConfigReader,
    GameConfig,
    PieceConfig,
    PortalConfig,
    SpecialAbilities,
)

DEFAULT_CONFIG_PATH = "data/chess_pieces.json"


def format_special_abilities(abilities: SpecialAbilities) -> str:
    """List the abilities a piece has, each followed by a space."""
    names = [
        label
        for label, enabled in (
            ("Castling", abilities.castling),
            ("Royal", abilities.royal),
            ("Jump-over", abilities.jump_over),
            ("Promotion", abilities.promotion),
            ("En-passant", abilities.en_passant),
        )
        if enabled
    ]
    names.extend(key for key, value in abilities.custom_abilities.items() if value)
    return "".join(f"{name} " for name in names)


def _format_movement(piece: PieceConfig) -> str:
    movement = piece.movement
    parts = []
    if movement.forward > 0:
        parts.append(f"Forward: {movement.forward}")
    if movement.sideways > 0:
        parts.append(f"Sideways: {movement.sideways}")
    if movement.diagonal > 0:
        parts.append(f"Diagonal: {movement.diagonal}")
    if movement.l_shape:
        parts.append("L-shape: Yes")
    if movement.diagonal_capture > 0:
        parts.append(f"Diagonal Capture: {movement.diagonal_capture}")
    if movement.first_move_forward > 0:
        parts.append(f"First Move Forward: {movement.first_move_forward}")
    return "".join(f"{part} " for part in parts)


def format_piece_info(piece: PieceConfig) -> str:
    """Describe a piece type: count, movement, abilities and start squares."""
    lines = [
        f"Type: {piece.kind} (Count: {piece.count})",
        f"  Movement: {_format_movement(piece)}",
        f"  Special Abilities: {format_special_abilities(piece.special_abilities)}",
    ]
    for color in ("white", "black"):
        if color in piece.positions:
            squares = "".join(f"({pos.x},{pos.y}) " for pos in piece.positions[color])
            lines.append(f"  {color.capitalize()} positions: {squares}")
    return "\n".join(lines) + "\n"


def format_portal_info(portal: PortalConfig) -> str:
    """Describe a portal: its squares and properties."""
    properties = portal.properties
    colors = "".join(f"{color} " for color in properties.allowed_colors)
    lines = [
        f"Portal ID: {portal.id}",
        f"  Entry: ({portal.entry.x},{portal.entry.y})",
        f"  Exit: ({portal.exit.x},{portal.exit.y})",
        f"  Preserve direction: {'Yes' if properties.preserve_direction else 'No'}",
        f"  Cooldown: {properties.cooldown} turns",
        f"  Allowed colors: {colors}",
    ]
    return "\n".join(lines) + "\n"


def format_config(config: GameConfig) -> str:
    """Describe a whole game configuration."""
    settings = config.game_settings
    parts = [
        "==== Game Configuration ====\n",
        f"Game: {settings.name}\n",
        f"Board size: {settings.board_size}x{settings.board_size}\n",
        f"Turn limit: {settings.turn_limit}\n",
        "\n==== Standard Pieces ====\n",
    ]
    parts.extend(format_piece_info(piece) for piece in config.pieces)
    if config.custom_pieces:
        parts.append("\n==== Custom Pieces ====\n")
        parts.extend(format_piece_info(piece) for piece in config.custom_pieces)
    parts.append("\n==== Portals ====\n")
    parts.extend(format_portal_info(portal) for portal in config.portals)
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Load a configuration, print it and draw the starting board."""
    parser = argparse.ArgumentParser(
        prog="portalchess",
        description="Show a chess game configuration and its starting board.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"path to the JSON configuration (default: {DEFAULT_CONFIG_PATH})",
    )
    args = parser.parse_args(argv)

    try:
        config = ConfigReader().load_from_file(args.config)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        print("Failed to load configuration. Exiting.", file=sys.stderr)
        return 1

    sys.stdout.write(format_config(config))
    sys.stdout.write("\n")
    sys.stdout.write(ChessBoard(config).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
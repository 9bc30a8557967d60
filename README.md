# portalchess

Reads a chess variant described by a JSON configuration (board size, turn
limit, standard and custom pieces with their movement rules and special
abilities, and portals that link two squares), validates it, prints it and
draws the starting board.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
portalchess path/to/game.json
```

Without an argument the command reads `data/chess_pieces.json`. It loads and
validates the configuration, prints the game settings, every standard and
custom piece with its count, movement, abilities and starting squares, every
portal with its squares, direction setting, cooldown and allowed colours, and
finally draws the starting board with chess symbols, ranks on the left and
file letters underneath. A configuration that cannot be read, is not valid
JSON or fails validation is reported on standard error and the command exits
with status 1.

## Configuration format

```json
{
  "game_settings": {"name": "Portal Chess", "board_size": 8, "turn_limit": 100},
  "pieces": [
    {
      "type": "Rook",
      "count": 2,
      "positions": {"white": [{"x": 0, "y": 0}], "black": [{"x": 0, "y": 7}]},
      "movement": {"forward": 8, "sideways": 8},
      "special_abilities": {"castling": true}
    }
  ],
  "custom_pieces": [],
  "portals": [
    {
      "id": "portal1",
      "positions": {"entry": {"x": 2, "y": 3}, "exit": {"x": 5, "y": 4}},
      "properties": {"preserve_direction": true, "cooldown": 2,
                     "allowed_colors": ["white", "black"]}
    }
  ]
}
```

- Missing game settings fall back to "Custom Chess", an 8×8 board and a
  limit of 100 turns.
- Movement values default to 0 (`l_shape` to false); absent coordinates
  default to 0.
- Any boolean entry in `special_abilities` beyond the standard ones
  (castling, royal, jump_over, promotion, en_passant) is kept as a custom
  ability.
- When a portal has `properties` without `allowed_colors`, both colours are
  allowed; `preserve_direction` defaults to true and `cooldown` to 0.

Validation requires a game name, a positive board size and turn limit, at
least one piece, a type and at least one position for every piece and custom
piece, and an id and on-board entry and exit squares for every portal.

## Library use

```python
from portalchess.config import ConfigReader
from portalchess.board import ChessBoard

reader = ConfigReader()
config = reader.load_from_file("game.json")
board = ChessBoard(config)
print(board.render())
```

- `portalchess.config`: the dataclasses `GameConfig`, `GameSettings`,
  `PieceConfig`, `Movement`, `SpecialAbilities`, `PortalConfig`,
  `PortalProperties` and `Position`, and `ConfigReader` with
  `load_from_file`, `load_from_string` (JSON text) and `load_from_data`
  (decoded data). Each returns the `GameConfig` and raises `ConfigError`
  when the configuration cannot be read or fails validation.
- `portalchess.pieces`: `Piece` and its subclasses `Pawn`, `Knight`,
  `Bishop`, `Rook`, `Queen` and `King`; `create_piece` builds one by type
  name and returns None for any other name; `Piece.unicode_symbol` gives the
  chess glyph.
- `portalchess.board`: `ChessBoard` with `get_piece`, `place_piece`,
  `in_bounds` and `render`.
- `portalchess.cli`: `main` and the `format_config`, `format_piece_info`,
  `format_portal_info` and `format_special_abilities` helpers that produce
  the command's text.
- `portalchess.stack.MoveStack`: move history with `record_move`,
  `undo_move` and `last_move`; empty-stack access raises `IndexError`.
- `portalchess.cooldown.CooldownQueue`: first-in, first-out queue for
  portals on cooldown; empty-queue access raises `IndexError`.
- `portalchess.graph.Graph`: adjacency lists of weighted `Edge`s and a
  breadth-first search over a residual capacity matrix that returns the
  parent list when the sink is reachable and None otherwise.

## What it does not do

The package describes and displays a game; it does not play one. There is no
move generation or move validation, no turns, and portals and cooldowns are
not applied to the board. Only the six standard piece types are placed on the
board: custom piece types are listed by the command but left off the drawing.
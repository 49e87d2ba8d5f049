"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass

from emailchess.core.enums import Side


@dataclass
class GameSettings:
    """All game-level settings."""

    # Push the encoded board to ``on_board_exported`` after every commit.
    export_on_commit: bool = True

    # Side to move when a new game starts from the initial layout.
    starting_side: Side = Side.WHITE

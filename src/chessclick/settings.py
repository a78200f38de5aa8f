"""Application settings and command-line overrides."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, fields
from enum import Enum


class GameOverPolicy(str, Enum):
    """What the board does once the engine reports the game is over."""

    RESTART = "restart"  # start a fresh game on the next tick
    FREEZE = "freeze"  # keep the final position, ignore input
    CALLBACK = "callback"  # hand control to a user callback


BOARD_THEMES = ("Blue", "Classic", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Window
    window_width: int = 1000
    window_height: int = 1000
    window_title: str = "Chessclick"

    # Board
    board_theme: str = "Blue"
    piece_set: str = ""  # empty: draw Unicode glyphs
    on_game_over: GameOverPolicy = GameOverPolicy.RESTART

    # Loop
    frame_interval_ms: int = 16

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def window_size(self) -> tuple[float, float]:
        return (float(self.window_width), float(self.window_height))


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessclick", description="Interactive chessboard."
    )
    parser.add_argument("--width", dest="window_width", type=_positive_int)
    parser.add_argument("--height", dest="window_height", type=_positive_int)
    parser.add_argument("--theme", dest="board_theme", choices=BOARD_THEMES)
    parser.add_argument(
        "--piece-set",
        dest="piece_set",
        help="subdirectory of assets/pieces (default: Unicode glyphs)",
    )
    parser.add_argument(
        "--on-game-over",
        dest="on_game_over",
        type=GameOverPolicy,
        choices=[GameOverPolicy.RESTART, GameOverPolicy.FREEZE],
        metavar="{restart,freeze}",
        help="restart a finished game or keep it on screen (default: restart)",
    )
    parser.add_argument(
        "--frame-interval", dest="frame_interval_ms", type=_positive_int
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Default settings overridden by any flags present in *argv*."""
    namespace = build_parser().parse_args(argv)
    settings = AppSettings()
    for f in fields(AppSettings):
        value = getattr(namespace, f.name, None)
        if value is not None:
            setattr(settings, f.name, value)
    return settings

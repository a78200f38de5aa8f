"""Application entry point."""

from __future__ import annotations

import sys

from chessclick.settings import settings_from_args


def main(argv: list[str] | None = None) -> None:
    """Launch the Chessclick application."""
    from chessclick.ui.bootstrap import run_application

    settings = settings_from_args(sys.argv[1:] if argv is None else argv)
    sys.exit(run_application(settings))


if __name__ == "__main__":
    main()

"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "CHESSLET_LOG_LEVEL"


def configure_logging(level_name: str | None = None) -> int:
    """Configure root logging from *level_name* or ``$CHESSLET_LOG_LEVEL``."""
    name = (level_name or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return level


def main() -> None:
    """Launch the Chesslet application."""
    from chesslet.ui.bootstrap import run_application

    configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()

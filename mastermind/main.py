"""
Process entry: read settings, set up logging, play one game.
"""

import logging
import sys
from typing import Optional

from .config import load_settings
from .console import Console
from .players import CodeGenerationError
from .random_client import make_draw
from .session import run

log = logging.getLogger(__name__)


def main(console: Optional[Console] = None) -> int:
    settings = load_settings()

    # Logs go to stderr so they never mix with the board on stdout
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = console or Console()
    draw = make_draw(settings.random_source, settings.random_timeout)

    try:
        run(console, draw)
    except EOFError:
        console.show("Game aborted.")
        return 1
    except CodeGenerationError:
        log.exception("Could not generate a code")
        return 2
    return 0


def run_cli() -> None:
    sys.exit(main())

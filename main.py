# main.py
from __future__ import annotations
import sys
import logging

from rich.console import Console

from app.config import SETTINGS, GameSettings
from app.errors import TyperaceError
from core.chrono import Clock
from core.threads import EventSource
from services.controller import SessionController
from services.words import WordSupplier
from ui.renderer import Renderer
from ui.terminal import RawTerminal
from ui.view import project


def setup_logging(log_file: str = SETTINGS.log_file) -> None:
    # stdout belongs to the full-screen UI, so log to a file only
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.exception("Unhandled exception", exc_info=(exctype, value, tb))
        sys.stderr.write(f"{exctype.__name__}: {value}\n")
        # exit with non-zero so run scripts don't think it succeeded
        sys.exit(1)

    sys.excepthook = excepthook


def run_session(controller: SessionController, events, renderer: Renderer) -> int:
    """Advance, draw, then wait for the next event; until the player quits."""
    events = iter(events)
    while True:
        controller.advance()
        renderer.draw(project(controller.state, controller.clock, controller.settings))
        if not controller.handle(next(events)):
            return 0


def main(settings: GameSettings = SETTINGS) -> int:
    setup_logging(settings.log_file)

    clock = Clock()
    if not clock.is_monotonic():
        logging.warning("Platform clock is not monotonic")
    console = Console()

    try:
        controller = SessionController.create(clock, WordSupplier(), settings)
        with RawTerminal(console=console) as terminal:
            source = EventSource(terminal, clock, settings.tick_ms, settings.channel_capacity)
            with source as events, Renderer(console) as renderer:
                code = run_session(controller, events, renderer)
    except TyperaceError as e:
        logging.exception("Fatal error")
        sys.stderr.write(f"typerace: {e}\n")
        return 1

    logging.info("Exited cleanly with score %d", controller.state.score)
    return code


if __name__ == "__main__":
    sys.exit(main())

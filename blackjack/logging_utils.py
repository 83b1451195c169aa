"""Logging setup and the event-to-log bridge."""

import logging

from blackjack.game.events import GameEvent

_event_log = logging.getLogger("blackjack.events")


def setup_logging(level: str = "WARNING") -> None:
    """Call once at program start (terminal_ui/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def log_event(event: GameEvent) -> None:
    """Mirror an engine event to the log. Subscribe to all events."""
    _event_log.debug("%s", event)

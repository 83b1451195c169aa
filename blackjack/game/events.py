"""Events published by the round engine.

The engine never talks to a screen or a keyboard. Everything a front end
needs to narrate a round (cards landing, the dealer drawing, money moving)
is published here as a ``GameEvent`` and delivered to subscribers in the
order it happened.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """What happened, roughly in the order a round produces them."""

    BET_PLACED = auto()
    INVALID_BET = auto()
    DECK_SHUFFLED = auto()
    CARD_DEALT = auto()
    ROUND_STARTED = auto()

    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_TWENTY_ONE = auto()
    PLAYER_BUSTS = auto()
    INVALID_ACTION = auto()

    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()
    ROUND_ENDED = auto()
    GAME_ENDED = auto()


@dataclass(frozen=True)
class GameEvent:
    """One thing that happened, with whatever details go with it."""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [self.event_type.name]
        parts.extend(f"{key}={value}" for key, value in self.data.items())
        return " ".join(parts)


Listener = Callable[[GameEvent], None]


class EventEmitter:
    """
    Fan events out to listeners and keep a record of them.

    A listener registered for one ``EventType`` hears only that type; one
    registered with ``None`` hears everything, after the typed listeners.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[EventType | None, list[Listener]] = defaultdict(list)
        self._log: list[GameEvent] = []

    def subscribe(self, handler: Listener, event_type: EventType | None = None) -> None:
        self._listeners[event_type].append(handler)

    def emit(self, event: GameEvent) -> None:
        self._log.append(event)
        for key in (event.event_type, None):
            for handler in self._listeners.get(key, ()):
                handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword details, publish it and hand it back."""
        event = GameEvent(event_type, data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Everything emitted so far, oldest first. Mutating it has no effect."""
        return list(self._log)

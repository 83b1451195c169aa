"""ASCII card art and the terminal display."""

import sys
from typing import Sequence, TextIO

from blackjack.cards import Card
from blackjack.game.outcome import Outcome
from blackjack.game.engine import RoundResult
from blackjack.game.session import Display
from blackjack.hand import Hand

CARD_TOP = "┌─────────┐"
CARD_BOTTOM = "└─────────┘"
HIDDEN = "?"

BANNER = (
    "===================================\n"
    "        BLACKJACK ENGINE           \n"
    "==================================="
)


def card_lines(card: Card | None) -> list[str]:
    """
    Return the five rows of one card box.

    Pass None for a face-down card; nothing about the card is drawn.
    """
    if card is None:
        rank, pip = HIDDEN, HIDDEN
    else:
        rank, pip = str(card.rank), card.suit.value
    return [
        CARD_TOP,
        f"│ {rank:<2}      │",
        f"│    {pip}    │",
        f"│      {rank:>2} │",
        CARD_BOTTOM,
    ]


def log_line(cards: Sequence[Card], hide_first: bool = False) -> str:
    """Plain-text listing of a hand, e.g. 'Log: [HIDDEN] [10 Spades]'."""
    parts = []
    for i, card in enumerate(cards):
        if i == 0 and hide_first:
            parts.append("[HIDDEN]")
        else:
            parts.append(f"[{card.label}]")
    return "Log: " + " ".join(parts)


def render_hand(cards: Sequence[Card], owner: str, hide_first: bool = False) -> str:
    """Render a titled row of card boxes followed by the log line."""
    boxes = [
        card_lines(None if i == 0 and hide_first else card)
        for i, card in enumerate(cards)
    ]
    rows = [" ".join(parts) for parts in zip(*boxes)]
    return "\n".join([f"--- {owner} ---", *rows, log_line(cards, hide_first)])


def result_message(result: RoundResult) -> str:
    """One-line description of how the round went."""
    if result.outcome is Outcome.BUST:
        return f"BUST! Player went over 21. Balance -${result.bet}"
    if result.outcome is Outcome.WIN:
        return f"WINNER! Player beats Dealer. Balance +${result.bet}"
    if result.outcome is Outcome.LOSS:
        return f"DEALER WINS! Player loses. Balance -${result.bet}"
    return "PUSH! It's a tie. Bet returned."


class TerminalDisplay(Display):
    """Writes the table to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def _write(self, text: str = "") -> None:
        print(text, file=self._stream)

    def show_banner(self) -> None:
        self._write(BANNER)

    def show_hand(self, hand: Hand, owner: str, hide_first: bool = False) -> None:
        self._write()
        self._write(render_hand(hand.cards, owner, hide_first))

    def show_total(self, total: int) -> None:
        self._write(f"\nYOUR TOTAL: {total}")

    def show_message(self, message: str) -> None:
        self._write(message)

    def show_result(self, result: RoundResult) -> None:
        self._write(result_message(result))

    def show_final_balance(self, balance: int) -> None:
        self._write(f"\nFINAL BALANCE: ${balance}")
        self._write("Terminating session...")

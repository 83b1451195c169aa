"""Exception hierarchy for the blackjack engine and its terminal front end."""


class BlackjackError(Exception):
    """Base class for all game errors."""


class InvalidBetError(BlackjackError, ValueError):
    """Raised when a wager is not a positive amount within the balance."""

    def __init__(self, amount: object, balance: int, reason: str) -> None:
        self.amount = amount
        self.balance = balance
        self.reason = reason
        super().__init__(reason)


class DeckExhaustedError(BlackjackError, IndexError):
    """Raised when drawing from an empty deck.

    A single round never needs more than a fraction of a fresh deck, so
    this signals a broken invariant rather than a recoverable condition.
    """


class MalformedInputError(BlackjackError, ValueError):
    """Raised when typed input cannot be understood."""

    def __init__(self, raw: str, message: str) -> None:
        self.raw = raw
        super().__init__(message)

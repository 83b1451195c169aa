"""Main entry point for terminal blackjack."""

import argparse
import logging
from random import Random
from typing import Sequence

from blackjack.game.engine import BlackjackGame
from blackjack.game.session import Session
from blackjack.logging_utils import log_event, setup_logging
from config import GameConfig, config
from terminal_ui.prompts import TerminalInput
from terminal_ui.render import TerminalDisplay

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive whole number")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blackjack",
        description="Single-player blackjack in the terminal.",
    )
    parser.add_argument(
        "--balance",
        type=_positive_int,
        default=config.game.starting_balance,
        help="starting balance (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed the shuffle for a reproducible game",
    )
    parser.add_argument(
        "--log-level",
        default=config.effective_log_level,
        help="logging level, logs go to stderr (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one session. Always exits 0; bad input is handled interactively."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    game_config = GameConfig(starting_balance=args.balance)
    game = BlackjackGame(
        starting_balance=game_config.starting_balance,
        rng=Random(args.seed),
    )
    game.subscribe(log_event)

    display = TerminalDisplay()
    session = Session(game, TerminalInput(), display)

    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, ending session")
        display.show_final_balance(game.balance)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

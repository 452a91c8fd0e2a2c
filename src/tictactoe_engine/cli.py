"""
Command-line interface for playing tic-tac-toe.
"""

import argparse
import logging
from typing import List, Optional

from tictactoe_engine.api import play_game
from tictactoe_engine.utils.config import Config, DEFAULT_AVATARS, DIFFICULTIES, MODES
from tictactoe_engine.utils.factory import create_engine


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against a friend or the computer"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=list(MODES.keys()),
        default="single-player",
        help="Game mode (default: single-player)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=list(DIFFICULTIES.keys()),
        default="medium",
        help="Computer strength in single-player mode (default: medium)",
    )
    parser.add_argument(
        "--avatar1",
        default=DEFAULT_AVATARS[0],
        help=f"Mark shown for player 1 (default: {DEFAULT_AVATARS[0]})",
    )
    parser.add_argument(
        "--avatar2",
        default=DEFAULT_AVATARS[1],
        help=f"Mark shown for player 2 (default: {DEFAULT_AVATARS[1]})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the computer's tie-breaks (default: random)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move decision",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        mode=args.mode,
        difficulty=args.difficulty,
        player1_avatar=args.avatar1,
        player2_avatar=args.avatar2,
        seed=args.seed,
    )
    engine = create_engine(config)

    try:
        play_game(engine)
    except (KeyboardInterrupt, EOFError):
        pass


if __name__ == "__main__":
    main()

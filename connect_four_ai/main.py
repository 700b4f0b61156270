import argparse
from typing import Optional, Sequence

from . import errors
from .connect_four import RULES, ConnectFour, GameMode
from .constants import Difficulty
from .logger import Logger, LogLevel


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="c4", description="Play connect four against a friend or the computer.")
    parser.add_argument(
        "--mode",
        choices=[m.name.lower() for m in GameMode],
        help="Rules to play by. Prompted for if omitted.",
    )
    parser.add_argument(
        "--players",
        type=int,
        choices=[0, 1, 2],
        help="Number of human players. Prompted for if omitted.",
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        help="AI strength. Prompted for if omitted and the AI is playing.",
    )
    parser.add_argument(
        "--log-level",
        default=LogLevel.NONE.name,
        choices=[level.name for level in LogLevel],
        type=str.upper,
        help="Amount of diagnostic output.",
    )
    parser.add_argument("--no-rules", action="store_true", help="Skip the rules screen.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Configure a game from the command line (prompting for anything missing) and play it to the end."""
    args = parse_args(argv)
    log = Logger(args.log_level)
    if not args.no_rules:
        log.normal(RULES)

    try:
        game = ConnectFour.new(
            mode=GameMode[args.mode.upper()] if args.mode else None,
            players=args.players,
            difficulty=Difficulty[args.difficulty.upper()] if args.difficulty else None,
            log_level=args.log_level,
        )
        finished = game.play()
    except errors.TooManyAttemptsError as e:
        log.error(e)
        return 1
    except (EOFError, KeyboardInterrupt):
        log.normal("\nGame abandoned.")
        return 1
    return 0 if finished else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line entry point: ``python -m neonpong``."""
import argparse
import logging

from .config import MAX_STEPS_PER_FRAME, WINNING_SCORE, ConfigError, GameConfig
from .logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neon-pong", description="Neon Pong - two players, one keyboard")
    parser.add_argument("--winning-score", type=int, default=WINNING_SCORE,
                        help=f"Points needed to win (default: {WINNING_SCORE})")
    parser.add_argument("--max-ball-speed", type=float, default=None,
                        help="Cap on horizontal ball speed per step (default: no cap)")
    parser.add_argument("--max-steps-per-frame", type=int, default=MAX_STEPS_PER_FRAME,
                        help=f"Catch-up limit per frame, 0 for none (default: {MAX_STEPS_PER_FRAME})")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serves and effects")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GameConfig:
    try:
        return GameConfig(
            winning_score=args.winning_score,
            max_ball_speed=args.max_ball_speed,
            max_steps_per_frame=args.max_steps_per_frame or None,
        )
    except ConfigError as e:
        parser.error(str(e))


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(parser, args)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    # imported late so --help works without opening a window
    from .app import PongApp
    PongApp(config, muted=args.mute, seed=args.seed).run()


if __name__ == "__main__":
    main()

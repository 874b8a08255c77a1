from __future__ import annotations

import argparse
import logging
import random

from ui.cli import gameloop
from ui.logger_config import setup_logger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ciphermind", description="CipherMind, a Mastermind code-breaking puzzle."
    )
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the secret code and messages (reproducible games).")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Verbosity of the log written to stderr.")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(level=getattr(logging, args.log_level))

    rng = random.Random(args.seed)
    gameloop(rng=rng, color=not args.no_color)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

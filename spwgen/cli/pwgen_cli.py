#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys

from spwgen.core.config import LOG_LEVEL_CHOICES, GeneratorConfig, load_config, parse_log_level
from spwgen.core.error_dialect import format_error_text
from spwgen.core.history import HistoryStore
from spwgen.core.models import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, PasswordRequest, Policy
from spwgen.core.password_service import generate_passwords

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_level_arg(value: str) -> str:
    try:
        return parse_log_level(value, "--log-level")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None, config: GeneratorConfig | None = None) -> argparse.Namespace:
    cfg = GeneratorConfig() if config is None else config
    parser = argparse.ArgumentParser(description="Secure password generator using os.urandom")

    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=cfg.default_length,
        help=f"password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}, default: {cfg.default_length})",
    )
    parser.add_argument("-n", "--count", type=int, default=cfg.default_count, help="number of passwords to print")

    # Character classes
    parser.add_argument("--no-lowercase", action="store_true", help="exclude lowercase letters (a-z)")
    parser.add_argument("--no-uppercase", action="store_true", help="exclude uppercase letters (A-Z)")
    parser.add_argument("--no-digits", action="store_true", help="exclude digits (0-9)")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols (!@#$%%^&* ...)")
    parser.add_argument("--extended-ascii", action="store_true", help="include extended characters (e.g. ñáéíóú€£)")
    parser.add_argument(
        "--allow-ambiguous",
        action="store_true",
        help="keep look-alike characters (Il1O0) in the pool",
    )

    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print entropy, strength tier and estimated crack time per output.",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help=f"After the outputs, print the in-memory history (newest first, up to {cfg.history_size}).",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level_arg,
        choices=LOG_LEVEL_CHOICES,
        default=cfg.log_level,
        help=f"diagnostic log level on stderr (default: {cfg.log_level})",
    )
    return parser.parse_args(argv)


def policy_from_args(args: argparse.Namespace) -> Policy:
    return Policy(
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        digits=not args.no_digits,
        symbols=not args.no_symbols,
        extended_ascii=args.extended_ascii,
        allow_ambiguous=args.allow_ambiguous,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        config = load_config()
    except ValueError as exc:
        print(format_error_text(exc, default_code="invalid_config"), file=sys.stderr)
        return 2

    args = parse_args(argv, config)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    history = HistoryStore(config.history_size)
    request = PasswordRequest(policy=policy_from_args(args), length=args.length, count=args.count)
    try:
        result = generate_passwords(request, history=history, guesses_per_second=config.guesses_per_second)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    if args.history:
        print("# history")
        for entry in history.list():
            print(entry)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

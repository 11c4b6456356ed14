"""passmint command-line interface.

Usage examples:
    python -m passmint generate -n 20 -c 5
    python -m passmint generate --no-symbols --exclude-ambiguous --copy
    python -m passmint score 'aB3!defgh' alllowercase
"""

import argparse
import logging
import random
import sys
import time

from passmint import (
    CATEGORIES,
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    REVEAL_STAGGER_MS,
    GenerationRequest,
    NoPassword,
    score,
)
from passmint.clipboard import copy_password

BAR_WIDTH = 20


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passmint",
        description="Generate passwords and rate their strength.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_LENGTH})",
    )
    for name in CATEGORIES:
        gen_p.add_argument(f"--no-{name}", action="store_true")
    gen_p.add_argument(
        "-a", "--exclude-ambiguous", action="store_true",
        help="Leave out look-alike characters (lI1O0o)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--seed", type=int,
        help="Seed the random source for reproducible output",
    )
    gen_p.add_argument(
        "--copy", action="store_true",
        help="Copy the last generated password to the clipboard",
    )
    gen_p.add_argument(
        "--animate", action="store_true",
        help="Reveal each password one character at a time",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Rate password strength")
    score_p.add_argument("passwords", nargs="+", help="Passwords to rate")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _bar(level) -> str:
    filled = round(level.fill_percent * BAR_WIDTH / 100)
    return "#" * filled + "-" * (BAR_WIDTH - filled)


def _reveal(text: str, stagger_ms: int = REVEAL_STAGGER_MS) -> None:
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        time.sleep(stagger_ms / 1000)


def _cmd_generate(args: argparse.Namespace) -> int:
    request = GenerationRequest.from_settings(
        [name for name in CATEGORIES if not getattr(args, f"no_{name}")],
        args.exclude_ambiguous,
        args.length,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    pwd = None
    for _ in range(args.count):
        pwd = request.assemble(rng)
        if isinstance(pwd, NoPassword):
            print(f"  {pwd}")
            return 0

        level = score(pwd)
        if args.animate:
            sys.stdout.write("  ")
            _reveal(pwd)
            print(f"  [{_bar(level)}] {level.label}")
        else:
            print(f"  {pwd}  [{_bar(level)}] {level.label}")

    if args.copy and pwd:
        if copy_password(pwd):
            print("  Copied to clipboard")
        else:
            print("  Could not copy to clipboard", file=sys.stderr)

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    for pwd in args.passwords:
        level = score(pwd)
        print(f"  '{pwd}'  [{_bar(level)}] {level.label} ({level.points})")
    return 0


if __name__ == "__main__":
    sys.exit(main())

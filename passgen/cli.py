"""PassGen command-line interface.

Usage examples:
    python -m passgen generate -n 20 -c 5
    python -m passgen generate --no-symbols --copy
    python -m passgen score 'Aa1!aaaa1234'
"""

import argparse
import logging
import sys

import pyperclip

from passgen import DEFAULT_LENGTH, MAX_SCORE, GeneratorConfig, score_strength
from passgen.widget import PasswordWidget


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and estimate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, clamped to 6-100 (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy",
        action="store_true",
        help="Copy the last generated password to the clipboard",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Estimate password strength")
    score_p.add_argument("passwords", nargs="+", help="Passwords to score")

    args = parser.parse_args(argv)

    if args.command == "generate" and args.count < 1:
        parser.error("--count must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _strength_line(report: dict) -> str:
    bar = "#" * report["score"] + "-" * (MAX_SCORE - report["score"])
    return f"[{bar}] {report['label']} ({report['score']}/{MAX_SCORE})"


def _cmd_generate(args: argparse.Namespace) -> int:
    config = GeneratorConfig(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        digits=not args.no_digits,
        symbols=not args.no_symbols,
    )
    widget = PasswordWidget(config)
    for i in range(args.count):
        if i:
            widget.regenerate()
        print(f"  {widget.password}  {_strength_line(widget.strength)}")

    if args.copy:
        try:
            widget.copy()
        except pyperclip.PyperclipException as exc:
            print(f"Error: could not copy to clipboard: {exc}", file=sys.stderr)
            return 1
        print("  Copied to clipboard.")

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    for pwd in args.passwords:
        report = score_strength(pwd)
        print(f"  '{pwd}'  {_strength_line(report)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

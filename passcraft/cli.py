"""CLI for PassCraft — generate passwords and rate their strength."""

import argparse
import logging
import sys

from rich import print
from rich.markup import escape
from rich.panel import Panel

from .config import DEFAULTS
from .errors import PassCraftError
from .generator import generate_password
from .score import POLICIES, TOTAL_BLOCKS, StrengthScore, score_password

LABEL_STYLES = {"Weak": "red", "Medium": "yellow", "Strong": "green"}


def strength_bar(strength: StrengthScore) -> str:
    style = LABEL_STYLES.get(strength.label, "white")
    filled = "■" * strength.blocks
    empty = "□" * (TOTAL_BLOCKS - strength.blocks)
    return f"[{style}]{filled}[/{style}]{empty} [{style}]{strength.label}[/{style}]"


def cmd_generate(args):
    for i in range(args.copies):
        pw = generate_password(
            length=args.length,
            use_upper=not args.no_upper,
            use_lower=not args.no_lower,
            use_digits=not args.no_digits,
            use_symbols=not args.no_symbols,
        )
        strength = score_password(pw, args.policy)
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  {strength_bar(strength)}")
    return 0


def cmd_score(args):
    strength = score_password(args.password, args.policy)
    header = f"Strength: {strength.label}"
    body = (
        f"Score: {strength.value} ({strength.policy} policy)\n"
        f"Indicator: {strength_bar(strength)}"
    )
    print(Panel(body, title=header))
    return 0


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=DEFAULTS["length"], help="Password length (1-25)")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--copies", type=positive_int, default=1, help="How many passwords to generate")
    gen.add_argument("--policy", choices=sorted(POLICIES), default=DEFAULTS["strength_policy"],
                     help="Strength scoring policy")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Rate the strength of a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--policy", choices=sorted(POLICIES), default=DEFAULTS["strength_policy"],
                    help="Strength scoring policy")
    sc.set_defaults(func=cmd_score)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except PassCraftError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())

"""Simple CLI for the tip split calculator.

Usage examples:
  python cli.py tip --bill 50 --split 2 --tip 0.18
  python cli.py interactive
"""
from argparse import ArgumentParser
import logging
import os
import sys

from tipsplit.display import build_view
from tipsplit.engine import TipEngine

INTERACTIVE_HELP = "Commands: bill <amount>, +, -, tip <fraction>, show, reset, quit"


def print_view(engine: TipEngine, symbol: str, out=None) -> None:
    out = out or sys.stdout
    view = build_view(engine.snapshot(), symbol)
    print(f"Total Per Person: {view.total_per_person}", file=out)
    if view.show_details:
        print(f"Bill: {view.bill_amount}", file=out)
        print(f"Split: {view.split_count}", file=out)
        print(f"Tip ({view.tip_percent}): {view.tip_amount}", file=out)


def run_interactive(engine: TipEngine, symbol: str, lines, out=None) -> None:
    """Drive the engine from text commands, printing the view after each one."""
    out = out or sys.stdout
    print(INTERACTIVE_HELP, file=out)
    for line in lines:
        cmd, _, arg = line.strip().partition(" ")
        if cmd in ("quit", "exit", "q"):
            break
        if cmd == "bill":
            engine.on_bill_text_changed(arg.strip())
        elif cmd == "+":
            engine.on_split_increment()
        elif cmd == "-":
            engine.on_split_decrement()
        elif cmd == "tip":
            engine.on_tip_fraction_changed(arg.strip())
        elif cmd == "reset":
            engine.reset()
        elif cmd == "show" or not cmd:
            pass
        else:
            print(f"Unknown command: {cmd}. {INTERACTIVE_HELP}", file=out)
            continue
        print_view(engine, symbol, out)


def main(argv=None):
    parser = ArgumentParser(prog="tipsplit")
    parser.add_argument("--currency", default=os.environ.get("CURRENCY_SYMBOL", "$"), help="Currency prefix")
    parser.add_argument("--verbose", action="store_true", help="Log engine updates")
    sub = parser.add_subparsers(dest="cmd")

    p_tip = sub.add_parser("tip", help="Calculate tip and total per person")
    p_tip.add_argument("--bill", required=True, help="Bill amount (e.g., 50.00)")
    p_tip.add_argument("--split", type=int, default=1, help="Number of people, 1-100")
    p_tip.add_argument("--tip", type=float, default=0.0, help="Tip fraction between 0 and 1 (e.g., 0.18)")

    sub.add_parser("interactive", help="Adjust bill, split and tip step by step")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "tip":
        engine = TipEngine(bill_text=args.bill)
        if not engine.set_split_count(args.split) and args.split != engine.split_count:
            print(f"Split must be between 1 and 100, got {args.split}", file=sys.stderr)
            return 2
        engine.set_tip_fraction(args.tip)
        print_view(engine, args.currency)
    elif args.cmd == "interactive":
        run_interactive(TipEngine(), args.currency, sys.stdin)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())

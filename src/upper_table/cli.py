"""Command line entry point for the upper-case table generator."""

import argparse
import sys
from pathlib import Path

from upper_table.expressions import BASELINE, CHARS_TO_TEST, UPPER_EXPRESSIONS
from upper_table.export import save_workbook
from upper_table.generator import generate


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="upper-table",
        description="Write the PL/SQL script that, run in Oracle, prints the OracleUpperTable module.",
    )
    parser.add_argument("-o", "--output", type=Path, help="write the script here instead of stdout")
    parser.add_argument("--year", type=int, help="copyright year for the generated header")
    parser.add_argument("--workbook", type=Path, help="also write the expression table to this .xlsx file")
    parser.add_argument("--list", action="store_true", help="list the expressions and exit")
    return parser.parse_args(argv)


def list_expressions(out) -> None:
    """Print one row per expression, the baseline marked with an asterisk."""
    for expr in UPPER_EXPRESSIONS:
        marker = "*" if expr.name == BASELINE else " "
        print(f"{marker} {expr.name:<18} {expr.language:<4} {expr.expression}", file=out)


def main(argv=None) -> int:
    args = _parse_args(argv)

    if args.list:
        list_expressions(sys.stdout)
        return 0

    try:
        if args.output is None:
            generate(sys.stdout, year=args.year)
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                generate(f, year=args.year)
            print(f"Saved: {args.output}", file=sys.stderr)
        print(
            f"Expressions: {len(UPPER_EXPRESSIONS)}, characters tested: {len(CHARS_TO_TEST)}",
            file=sys.stderr,
        )

        if args.workbook is not None:
            path = save_workbook(args.workbook)
            print(f"Saved: {path}", file=sys.stderr)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

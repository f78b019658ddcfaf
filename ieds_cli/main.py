"""
Main entry point for the IEDS CLI.

Usage:
    python -m ieds_cli matrix1 [matrix2] [options]

Example:
    python -m ieds_cli prisoners.csv
    python -m ieds_cli p1.csv p2.csv -w --output trace.csv
"""

import argparse
import sys
from typing import List, NoReturn, Optional

from ieds_core.config import Strictness
from ieds_core.exceptions import IEDSError, UsageError

from .config_builder import build_config, build_game, format_config_summary
from .runner import run_elimination
from .reporter import print_full_report, print_usage, export_to_csv, export_reduced_csv


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _ArgumentParser(
        prog="ieds",
        description="Iterated Elimination of Dominated Strategies calculator",
        add_help=True,
    )

    parser.add_argument(
        "matrices",
        nargs="*",
        default=[],
        help="CSV payoff matrix for player 1, optionally followed by player 2"
    )

    # Strictness (last flag wins)
    parser.add_argument(
        "-w", "--weak",
        dest="strictness",
        action="store_const",
        const=Strictness.WEAK,
        default=None,
        help="Eliminate weakly dominated strategies"
    )
    parser.add_argument(
        "-v", "--very-weak",
        dest="strictness",
        action="store_const",
        const=Strictness.VERYWEAK,
        help="Eliminate very weakly dominated strategies"
    )

    parser.add_argument(
        "--live-only",
        action="store_true",
        help="Compare live opponent strategies only (eliminated ones no longer count as ties)"
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Stop after this many iterations"
    )

    # Output control
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path for the elimination trace"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Hide the per-iteration trace"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Raises:
        UsageError: on unrecognized options or invalid option values
    """
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)
    if unknown:
        raise UsageError(f"Unrecognized arguments: {' '.join(unknown)}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        args = parse_args(argv)
        config = build_config(args)
        matrices = build_game(args)
    except IEDSError as e:
        print(e, file=sys.stderr)
        print_usage()
        return 1

    try:
        if not args.quiet:
            print("Configuration:")
            print(format_config_summary(config, args))
            print()

        result = run_elimination(matrices, config, show_trace=not args.quiet)
        print_full_report(result)

        # Export to CSV if requested
        if args.output:
            export_to_csv(result, args.output)
            export_reduced_csv(result, args.output)

        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 130
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

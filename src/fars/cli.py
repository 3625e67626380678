"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]   Monthly accident counts by year
    fars map --state N --year YYYY [...]      State accident map (HTML)

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.  Input files are looked up in ``--data-dir``
(default: the current working directory).

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month × year accident table.

    Exits with status 1 when none of the requested years could be read.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import fars_summarize_years

    summary = fars_summarize_years(args.years, data_dir=args.data_dir)
    if len(summary.columns) <= 1:
        _die(f"No readable data for years: {', '.join(args.years)}")

    print(summary.to_string(index=False))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path, index=False)
        print(f"\nSaved summary to {out_path}")


def handle_map(args: argparse.Namespace) -> None:
    """Write the accident map for one state and year to HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import fars_map_state

    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output=args.output,
        )
    except (FileNotFoundError, ValueError) as exc:
        # InvalidStateError is a ValueError
        _die(str(exc))

    if fig is not None:
        print(f"Saved map to {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System\n"
            "Monthly accident summaries and state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug messages.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=".",
        metavar="DIR",
        help="Directory holding accident_<YYYY>.csv.bz2 files (default: .).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Optional CSV file to write the summary table to.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot one state's accidents for one year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YYYY",
        help="Year to plot.",
    )
    p_map.add_argument(
        "--data-dir",
        default=".",
        metavar="DIR",
        help="Directory holding accident_<YYYY>.csv.bz2 files (default: .).",
    )
    p_map.add_argument(
        "--output",
        required=True,
        metavar="FILE",
        help="HTML file to write the map to.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()

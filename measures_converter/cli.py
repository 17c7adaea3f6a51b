"""Command-line interface for the measures converter."""

import argparse
import logging
import sys

from measures_converter.config import MEASUREMENT_UNITS
from measures_converter.converter import (
    all_units,
    build_factor_table,
    convert_text,
    get_to_units,
    parse_value,
    validate_tables,
)
from measures_converter.session import ConverterSession

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit", "q")


# --- Command handlers ---

def cmd_convert(args):
    result = convert_text(args.value, args.from_unit, args.to_unit)
    print(result.message())
    if not result.ok:
        sys.exit(1)


def cmd_units(args):
    categories = [args.category] if args.category else list(MEASUREMENT_UNITS)
    for category in categories:
        print(f"{category}:")
        for unit in MEASUREMENT_UNITS[category]:
            print(f"  - {unit}")


def cmd_targets(args):
    for unit in get_to_units(args.unit):
        print(unit)


def cmd_table(args):
    df = build_factor_table(args.category)
    print(df.to_string(float_format=lambda x: f"{x:.10g}", na_rep="N/A"))


def cmd_check(args):
    issues = validate_tables()
    if not issues:
        print("Conversion tables are consistent.")
        return
    for issue in issues:
        print(issue)
    print(f"\n{len(issues)} issue(s) found.")
    sys.exit(1)


def _print_interactive_help():
    print("Enter a number to convert it, or:")
    print("  from <unit>   change the source unit")
    print("  to <unit>     change the target unit")
    print("  units         list the available units")
    print("  quit          leave")


def cmd_interactive(args):
    session = ConverterSession()
    _print_interactive_help()

    while True:
        print(f"\n[{session.from_unit} -> {session.to_unit}]")
        try:
            line = input("Value: ").strip()
        except EOFError:
            print()
            break

        if not line:
            continue
        if line.lower() in QUIT_COMMANDS:
            break

        keyword, _, rest = line.partition(" ")
        keyword = keyword.lower()
        rest = rest.strip()

        if keyword == "from":
            if rest not in session.from_unit_options():
                print(f"Unknown unit. Choose from: {', '.join(session.from_unit_options())}")
                continue
            session.select_from_unit(rest)
        elif keyword == "to":
            options = session.to_unit_options()
            if rest not in options:
                print(f"Invalid target. Choose from: {', '.join(options)}")
                continue
            session.select_to_unit(rest)
        elif keyword == "units":
            print(f"From: {', '.join(session.from_unit_options())}")
            print(f"To:   {', '.join(session.to_unit_options())}")
        elif keyword == "help":
            _print_interactive_help()
        else:
            print(session.convert(line))


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="measures_converter",
        description="Measures Converter - convert length and weight units",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    units = all_units()
    categories = list(MEASUREMENT_UNITS.keys())

    convert_p = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_p.add_argument("value", help="Value to convert")
    convert_p.add_argument("--from", dest="from_unit", required=True, choices=units,
                           help="Source unit")
    convert_p.add_argument("--to", dest="to_unit", required=True, choices=units,
                           help="Target unit")
    convert_p.set_defaults(func=cmd_convert)

    units_p = subparsers.add_parser("units", help="List measurement categories and units")
    units_p.add_argument("--category", choices=categories)
    units_p.set_defaults(func=cmd_units)

    targets_p = subparsers.add_parser("targets", help="List units a source unit converts to")
    targets_p.add_argument("unit", choices=units)
    targets_p.set_defaults(func=cmd_targets)

    table_p = subparsers.add_parser("table", help="Show the conversion factors for a category")
    table_p.add_argument("category", choices=categories)
    table_p.set_defaults(func=cmd_table)

    check_p = subparsers.add_parser("check", help="Check the conversion tables for consistency")
    check_p.set_defaults(func=cmd_check)

    interactive_p = subparsers.add_parser("interactive", help="Convert values interactively")
    interactive_p.set_defaults(func=cmd_interactive)

    return parser


def _protect_negative_value(argv: list) -> list:
    """Keep a dash-prefixed number such as "-1e3" positional for ``convert``.

    argparse only treats plain negatives like "-5" as values and would read
    "-1e3" as an unknown flag. A leading space is never an option prefix,
    and parse_value strips it again.
    """
    if "convert" not in argv:
        return argv
    start = argv.index("convert") + 1
    protected = argv[:start]
    for token in argv[start:]:
        if token == "--":
            return protected + argv[len(protected):]
        if token.startswith("-") and parse_value(token) is not None:
            token = " " + token
        protected.append(token)
    return protected


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(_protect_negative_value(list(argv)))

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("measures_converter").setLevel(level)

    if not args.command:
        parser.print_help()
        return

    logger.debug("Running command %s", args.command)
    args.func(args)

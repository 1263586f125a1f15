"""
Command-line argument parsing for taskspec.

Subcommands: render, vars, validate.
"""

import argparse
import sys

from . import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    raw_argv = argv if argv is not None else sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="taskspec",
        description="Substitute parameters and resources into task specifications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_build_epilog(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ── render ──
    _add_render_subparser(subparsers)

    # ── vars ──
    _add_vars_subparser(subparsers)

    # ── validate ──
    _add_validate_subparser(subparsers)

    args = parser.parse_args(raw_argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    return args


def _add_render_subparser(subparsers):
    """Add the 'render' subcommand."""
    render_parser = subparsers.add_parser(
        "render",
        help="Write the task with all parameters and resources substituted",
    )
    _add_input_options(render_parser)
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        metavar="PATH",
        help="Write the rendered task to PATH instead of the terminal",
    )
    render_parser.add_argument(
        "--show-map",
        action="store_true",
        help="Print each replacement map before applying it",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when placeholders remain unresolved",
    )


def _add_vars_subparser(subparsers):
    """Add the 'vars' subcommand."""
    vars_parser = subparsers.add_parser(
        "vars",
        help="List the placeholders a task references and their values",
    )
    _add_input_options(vars_parser)


def _add_validate_subparser(subparsers):
    """Add the 'validate' subcommand."""
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check the structure of task and run documents",
    )
    validate_parser.add_argument("task", help="Path to the task JSON file")
    validate_parser.add_argument(
        "--run",
        default=None,
        metavar="PATH",
        help="Path to the run JSON file (params and resources)",
    )


def _add_input_options(parser):
    """Add the task/run/param options shared by render and vars."""
    parser.add_argument("task", help="Path to the task JSON file")

    input_group = parser.add_argument_group("values")
    input_group.add_argument(
        "--run",
        default=None,
        metavar="PATH",
        help="Path to the run JSON file (params and resources)",
    )
    input_group.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Parameter value; overrides the run file (repeatable)",
    )


# ─── Epilog ──────────────────────────────────────────────────────


def _build_epilog() -> str:
    return """
examples:
  # Substitute defaults and run values, print the result
  %(prog)s render task.json --run run.json

  # Override a parameter and write to a file
  %(prog)s render task.json -p greeting=hello -o rendered.json

  # Fail when anything is left unresolved
  %(prog)s render task.json --run run.json --strict

  # Show placeholders and what they resolve to
  %(prog)s vars task.json --run run.json

  # Check documents before rendering
  %(prog)s validate task.json --run run.json
"""

#!/usr/bin/env python3
"""
taskspec — parameter substitution for task specifications.

Entry script. Validates dependencies, parses args, and dispatches commands.

Usage:
    python run.py render TASK.json [--run RUN.json] [-p NAME=VALUE] [-o OUT.json]
    python run.py vars TASK.json [--run RUN.json] [-p NAME=VALUE]
    python run.py validate TASK.json [--run RUN.json]
    python run.py --help
"""

import os
import sys
from pathlib import Path


def check_dependencies():
    """Ensure required packages are installed before importing anything else."""
    try:
        import rich  # noqa: F401
    except ImportError:
        print("╔═══════════════════════════════════════════════════════════╗")
        print("║  ❌ Missing dependency: 'rich' is not installed.        ║")
        print("║                                                          ║")
        print("║  Quick fix:                                              ║")
        print("║    pip install -e .                                      ║")
        print("╚═══════════════════════════════════════════════════════════╝")
        sys.exit(1)


def main():
    check_dependencies()

    # Ensure our package is importable
    pkg_dir = str(Path(__file__).resolve().parent)
    if pkg_dir not in sys.path:
        sys.path.insert(0, pkg_dir)

    from taskspec.cli import parse_args
    from taskspec.config import DEBUG_ENV
    from taskspec.display import setup_logging

    try:
        args = parse_args()
        setup_logging(args.verbose)

        command = args.command

        if command == "render":
            from taskspec.commands.render_cmd import handle_render

            sys.exit(handle_render(args))

        elif command == "vars":
            from taskspec.commands.vars_cmd import handle_vars

            sys.exit(handle_vars(args))

        elif command == "validate":
            from taskspec.commands.validate_cmd import handle_validate

            sys.exit(handle_validate(args))

        else:
            print(f"Unknown command: {command}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\n\n⚠️  Aborted by user.")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ Fatal error: {e}", file=sys.stderr)

        if os.environ.get(DEBUG_ENV, "").lower() in ("1", "true", "yes"):
            import traceback

            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    main()

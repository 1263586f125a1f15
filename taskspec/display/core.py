"""
Core display components: console singleton, constants and logging setup.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# ─── Singleton Console ───────────────────────────────────────────

console = Console(highlight=False)

# ─── Constants ───────────────────────────────────────────────────

STATUS_ICONS = {
    "resolved": "✅",
    "unresolved": "❌",
}

STATUS_STYLES = {
    "resolved": "green",
    "unresolved": "red",
}


# ─── Logging ─────────────────────────────────────────────────────


def setup_logging(verbose: bool = False):
    """Route log records through the shared console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )

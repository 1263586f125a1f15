"""
Rich terminal display helpers for taskspec.

All public symbols are re-exported here so that imports like
``from taskspec.display import show_error, console`` work.
"""

# ─── Core primitives ─────────────────────────────────────────────
from .core import STATUS_ICONS, STATUS_STYLES, console, setup_logging

# ─── Utility messages ────────────────────────────────────────────
from .messages import show_error, show_info, show_success, show_warning

# ─── Tables ──────────────────────────────────────────────────────
from .tables import show_replacements, show_validation_result, show_variables

__all__ = [
    "STATUS_ICONS",
    "STATUS_STYLES",
    # Core
    "console",
    "setup_logging",
    # Messages
    "show_error",
    "show_info",
    "show_success",
    "show_warning",
    # Tables
    "show_replacements",
    "show_validation_result",
    "show_variables",
]

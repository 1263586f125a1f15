"""
Vars command: list placeholders referenced by a task and their values.
"""

from pathlib import Path

from ..display import show_info, show_variables
from .render_cmd import _build_stages, _collect_variables, _prepare


def handle_vars(args) -> int:
    """Show every placeholder in the task with the value it would get."""
    prepared = _prepare(args)
    if prepared is None:
        return 1
    task, run, params = prepared

    keys = _collect_variables(task)
    if not keys:
        show_info("No placeholders found.")
        return 0

    combined: dict[str, str] = {}
    for _, replacements in _build_stages(task, run, params):
        combined.update(replacements)

    rows = [{"key": key, "value": combined.get(key)} for key in keys]
    show_variables(Path(args.task).stem, rows)
    return 0

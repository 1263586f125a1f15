"""
Render command: substitute params and resources into a task.
"""

import json
from pathlib import Path

from ..apply import apply_replacements, param_replacements, resource_replacements
from ..config import INPUT_SCOPE, OUTPUT_SCOPE
from ..display import (
    console,
    show_error,
    show_replacements,
    show_success,
    show_validation_result,
    show_warning,
)
from ..loader import TaskRun, parse_param_overrides, read_json_object, unwrap_task_data
from ..model import Param, TaskSpec
from ..templating import find_variables
from ..validators import validate_run_data, validate_task_data


def handle_render(args) -> int:
    """Render the task and print it or write it to --output."""
    prepared = _prepare(args)
    if prepared is None:
        return 1
    task, run, params = prepared

    rendered = task
    for title, replacements in _build_stages(task, run, params):
        if getattr(args, "show_map", False):
            show_replacements(replacements, title=title)
        rendered = apply_replacements(rendered, replacements)

    text = json.dumps(rendered.to_dict(), ensure_ascii=False, indent=2)
    output = getattr(args, "output", None)
    if output:
        out_path = Path(output)
        tmp_path = out_path.with_suffix(out_path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        tmp_path.replace(out_path)
        show_success(f"Rendered task written to {out_path}")
    else:
        console.print_json(text)

    unresolved = _collect_variables(rendered)
    for key in unresolved:
        show_warning(f"Unresolved placeholder: ${{{key}}}")

    if unresolved and getattr(args, "strict", False):
        show_error(f"{len(unresolved)} placeholders left unresolved")
        return 1
    return 0


# ─── Shared Helpers ──────────────────────────────────────────────


def _prepare(args) -> tuple[TaskSpec, TaskRun, list[Param]] | None:
    """
    Load and validate the task, the run file and -p overrides.

    Shows errors and returns None when anything cannot be used.
    """
    try:
        task_data = unwrap_task_data(read_json_object(Path(args.task)))
        run_data = read_json_object(Path(args.run)) if args.run else {}
        overrides = parse_param_overrides(args.param)
    except (FileNotFoundError, ValueError) as e:
        show_error(str(e))
        return None

    result = validate_task_data(task_data)
    if not result.ok:
        show_validation_result(args.task, result)
        return None
    task = TaskSpec.from_dict(task_data)

    result = validate_run_data(run_data)
    if not result.ok:
        show_validation_result(args.run, result)
        return None
    run = TaskRun.from_dict(run_data)

    return task, run, run.params + overrides


def _build_stages(task: TaskSpec, run: TaskRun, params: list[Param]) -> list[tuple[str, dict]]:
    """Replacement maps in application order: params, input, output resources."""
    return [
        ("Parameters", param_replacements(task.inputs, params)),
        ("Input resources", resource_replacements(run.input_resources, INPUT_SCOPE)),
        ("Output resources", resource_replacements(run.output_resources, OUTPUT_SCOPE)),
    ]


def _collect_variables(task: TaskSpec) -> list[str]:
    """Placeholder keys referenced by the task's steps and volumes."""
    data = task.to_dict()
    found: dict[str, None] = {}

    def _walk(obj):
        if isinstance(obj, str):
            for key in find_variables(obj):
                found.setdefault(key, None)
        elif isinstance(obj, dict):
            for value in obj.values():
                _walk(value)
        elif isinstance(obj, list):
            for item in obj:
                _walk(item)

    _walk(data.get("steps"))
    _walk(data.get("volumes"))
    return list(found)

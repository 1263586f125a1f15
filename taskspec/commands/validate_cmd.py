"""
Validate command: structural checks of task and run documents.
"""

from pathlib import Path

from ..display import show_error, show_validation_result
from ..loader import read_json_object, unwrap_task_data
from ..model import TaskSpec
from ..validators import validate_run_data, validate_task_data


def handle_validate(args) -> int:
    """Validate the task (and the run file, if given)."""
    try:
        task_data = unwrap_task_data(read_json_object(Path(args.task)))
    except (FileNotFoundError, ValueError) as e:
        show_error(str(e))
        return 1

    result = validate_task_data(task_data)
    show_validation_result(args.task, result)
    ok = result.ok

    if args.run:
        try:
            run_data = read_json_object(Path(args.run))
        except (FileNotFoundError, ValueError) as e:
            show_error(str(e))
            return 1
        task = TaskSpec.from_dict(task_data) if result.ok else None
        run_result = validate_run_data(run_data, task)
        show_validation_result(args.run, run_result)
        ok = ok and run_result.ok

    return 0 if ok else 1

"""
Loading of task and run documents for taskspec.

Task document: a task spec object, optionally wrapped as ``{"spec": {...}}``.
Run document::

    {
      "params": [{"name": "greeting", "value": "hello"}],
      "resources": {
        "inputs":  {"source": {"type": "git", "params": {"url": "..."}}},
        "outputs": {"image":  {"type": "image", "params": {"url": "..."}}}
      }
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import INPUT_SCOPE, OUTPUT_SCOPE
from .model import Param, TaskSpec
from .resources import PipelineResource

logger = logging.getLogger(__name__)


@dataclass
class TaskRun:
    """Values supplied for one invocation of a task."""

    params: list[Param] = field(default_factory=list)
    input_resources: dict[str, PipelineResource] = field(default_factory=dict)
    output_resources: dict[str, PipelineResource] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> "TaskRun":
        resources = d.get("resources") or {}
        return cls(
            params=[Param.from_dict(p) for p in d.get("params") or []],
            input_resources=_load_bindings(resources.get(INPUT_SCOPE)),
            output_resources=_load_bindings(resources.get(OUTPUT_SCOPE)),
        )


def _load_bindings(bindings: dict | None) -> dict[str, PipelineResource]:
    if not bindings:
        return {}
    return {name: PipelineResource.from_dict(name, r) for name, r in bindings.items()}


def read_json_object(path: Path) -> dict:
    """Read a JSON file whose top level must be an object."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug("Reading %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def unwrap_task_data(data: dict) -> dict:
    """Return the task spec object, unwrapping ``{"spec": {...}}`` documents."""
    spec = data.get("spec")
    if isinstance(spec, dict) and "steps" not in data:
        return spec
    return data


def load_task(path: Path) -> TaskSpec:
    """Load a task spec from a JSON file."""
    return TaskSpec.from_dict(unwrap_task_data(read_json_object(path)))


def load_run(path: Path) -> TaskRun:
    """Load run params and resource bindings from a JSON file."""
    return TaskRun.from_dict(read_json_object(path))


def parse_param_overrides(items: list[str] | None) -> list[Param]:
    """Parse ``NAME=VALUE`` command-line items into params."""
    params = []
    for item in items or []:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid parameter '{item}', expected NAME=VALUE")
        params.append(Param(name=name, value=value))
    return params

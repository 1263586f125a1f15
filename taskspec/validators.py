"""
Validation of task and run documents for taskspec.

Runs before substitution; substitution itself never rejects a document.
"""

from dataclasses import dataclass, field

from .config import RESOURCE_SCOPES, RESOURCE_TYPES
from .model import ENV_FROM_REF_TYPES, TaskSpec


@dataclass
class ValidationResult:
    """Collects errors and warnings from validation checks."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def validate_task_data(data: dict) -> ValidationResult:
    """Validate the structure of a task spec object."""
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error("Task must be a JSON object")
        return result

    steps = data.get("steps")
    if not isinstance(steps, list):
        result.add_error("'steps' must be a list")
    else:
        if not steps:
            result.add_warning("Task has no steps")
        for i, step in enumerate(steps):
            result.merge(_validate_step(step, f"steps[{i}]"))

    inputs = data.get("inputs") or {}
    if not isinstance(inputs, dict):
        result.add_error("'inputs' must be an object")
    else:
        result.merge(_validate_param_list(inputs.get("params") or [], "inputs.params"))

    volumes = data.get("volumes") or []
    if not isinstance(volumes, list):
        result.add_error("'volumes' must be a list")
        return result

    for i, volume in enumerate(volumes):
        if not isinstance(volume, dict):
            result.add_error(f"volumes[{i}] must be an object")
            continue
        if not volume.get("name"):
            result.add_error(f"volumes[{i}] is missing 'name'")
        sources = [k for k in volume if k != "name"]
        if len(sources) > 1:
            result.add_error(f"volumes[{i}] has more than one source: {', '.join(sources)}")

    return result


STEP_LIST_FIELDS = ("command", "args", "env", "envFrom", "volumeMounts")
STEP_OBJECT_LIST_FIELDS = ("env", "envFrom", "volumeMounts")


def _validate_step(step, where: str) -> ValidationResult:
    """Check one step's shape; each one-of field may hold a single source."""
    result = ValidationResult()
    if not isinstance(step, dict):
        result.add_error(f"{where} must be an object")
        return result

    if not step.get("image"):
        result.add_warning(f"{where} ({step.get('name', '?')}) has no image")

    for key in STEP_LIST_FIELDS:
        if key in step and step[key] is not None and not isinstance(step[key], list):
            result.add_error(f"{where}.{key} must be a list")

    for key in STEP_OBJECT_LIST_FIELDS:
        items = step.get(key)
        if not isinstance(items, list):
            continue
        for j, item in enumerate(items):
            if not isinstance(item, dict):
                result.add_error(f"{where}.{key}[{j}] must be an object")

    for j, env in enumerate(step.get("env") or []):
        value_from = env.get("valueFrom") if isinstance(env, dict) else None
        if isinstance(value_from, dict) and len(value_from) > 1:
            result.add_error(
                f"{where}.env[{j}].valueFrom has more than one source: {', '.join(value_from)}"
            )

    for j, env_from in enumerate(step.get("envFrom") or []):
        if not isinstance(env_from, dict):
            continue
        refs = [cls.kind for cls in ENV_FROM_REF_TYPES if cls.kind in env_from]
        if len(refs) > 1:
            result.add_error(f"{where}.envFrom[{j}] has more than one ref: {', '.join(refs)}")

    return result


def _validate_param_list(params, where: str) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(params, list):
        result.add_error(f"'{where}' must be a list")
        return result

    seen = set()
    for i, p in enumerate(params):
        if not isinstance(p, dict) or not p.get("name"):
            result.add_error(f"{where}[{i}] is missing 'name'")
            continue
        name = str(p["name"])
        if name in seen:
            result.add_warning(f"Duplicate parameter '{name}' in {where}")
        seen.add(name)
    return result


def validate_run_data(data: dict, task: TaskSpec | None = None) -> ValidationResult:
    """Validate run params and resource bindings, optionally against a task."""
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error("Run must be a JSON object")
        return result

    params = data.get("params") or []
    result.merge(_validate_param_list(params, "params"))

    if task is not None and isinstance(params, list):
        declared = {p.name for p in task.inputs}
        for p in params:
            if isinstance(p, dict) and p.get("name") and str(p["name"]) not in declared:
                result.add_warning(f"Parameter '{p['name']}' is not declared by the task")

    resources = data.get("resources") or {}
    if not isinstance(resources, dict):
        result.add_error("'resources' must be an object")
        return result

    for scope, bindings in resources.items():
        if scope not in RESOURCE_SCOPES:
            result.add_warning(
                f"Unknown resource scope '{scope}'. Must be one of: {', '.join(RESOURCE_SCOPES)}"
            )
            continue
        if not isinstance(bindings, dict):
            result.add_error(f"'resources.{scope}' must be an object")
            continue
        for name, resource in bindings.items():
            if not isinstance(resource, dict):
                result.add_error(f"Resource '{scope}.{name}' must be an object")
                continue
            type_name = resource.get("type")
            if not isinstance(type_name, str) or type_name not in RESOURCE_TYPES:
                result.add_error(
                    f"Resource '{scope}.{name}' has invalid type '{type_name}'. "
                    f"Must be one of: {', '.join(sorted(RESOURCE_TYPES))}"
                )

    return result

"""
Apply parameter and resource values to a task specification.

Builds replacement maps from declared defaults, run parameters and resolved
resources, then rewrites every templated field of a deep copy of the task.
The input task is never modified.
"""

import copy
import logging
from collections.abc import Iterable, Mapping

from .config import PARAM_KEY_PREFIX
from .model import (
    ENV_VAR_SOURCE_TYPES,
    ConfigMapVolumeSource,
    Param,
    PersistentVolumeClaimVolumeSource,
    SecretVolumeSource,
    TaskParam,
    TaskSpec,
)
from .resources import ResolvedResource
from .templating import apply_replacements as _apply

logger = logging.getLogger(__name__)


# ─── Replacement Maps ────────────────────────────────────────────


def param_replacements(
    defaults: Iterable[TaskParam],
    params: Iterable[Param],
) -> dict[str, str]:
    """
    Build ``inputs.params.NAME`` replacements.

    Two passes over the same map: declared defaults first (empty defaults
    are skipped), then run params, so a run value always overwrites the
    default. Duplicate names keep the last value.
    """
    replacements: dict[str, str] = {}

    for p in defaults:
        if p.default:
            replacements[f"{PARAM_KEY_PREFIX}.{p.name}"] = p.default

    for p in params:
        replacements[f"{PARAM_KEY_PREFIX}.{p.name}"] = p.value

    return replacements


def resource_replacements(
    resources: Mapping[str, ResolvedResource],
    scope: str,
) -> dict[str, str]:
    """Build ``SCOPE.resources.BINDING.FIELD`` replacements."""
    replacements: dict[str, str] = {}
    for binding_name, resource in resources.items():
        for key, value in resource.replacements().items():
            replacements[f"{scope}.resources.{binding_name}.{key}"] = value
    return replacements


# ─── Spec Rewriting ──────────────────────────────────────────────


def apply_replacements(spec: TaskSpec, replacements: Mapping[str, str]) -> TaskSpec:
    """
    Return a copy of spec with every templated field substituted.

    Templated fields are the step name, image, workingDir, command and
    args items, env values and secret/configmap key refs, envFrom prefixes
    and refs, volume mount name/mountPath/subPath, and volume names and
    their configMap, secret or persistentVolumeClaim source. Env var names
    and parameter declarations are left alone.
    """
    spec = copy.deepcopy(spec)
    logger.debug(
        "Applying %d replacements to %d steps, %d volumes",
        len(replacements),
        len(spec.steps),
        len(spec.volumes),
    )

    for step in spec.steps:
        step.name = _apply(step.name, replacements)
        step.image = _apply(step.image, replacements)
        step.args = [_apply(a, replacements) for a in step.args]

        for e in step.env:
            e.value = _apply(e.value, replacements)
            if isinstance(e.value_from, ENV_VAR_SOURCE_TYPES):
                e.value_from.name = _apply(e.value_from.name, replacements)
                e.value_from.key = _apply(e.value_from.key, replacements)

        for e in step.env_from:
            e.prefix = _apply(e.prefix, replacements)
            if e.ref is not None:
                e.ref.name = _apply(e.ref.name, replacements)

        step.working_dir = _apply(step.working_dir, replacements)
        step.command = [_apply(c, replacements) for c in step.command]

        for vm in step.volume_mounts:
            vm.name = _apply(vm.name, replacements)
            vm.mount_path = _apply(vm.mount_path, replacements)
            vm.sub_path = _apply(vm.sub_path, replacements)

    for v in spec.volumes:
        v.name = _apply(v.name, replacements)
        source = v.source
        if isinstance(source, ConfigMapVolumeSource):
            source.name = _apply(source.name, replacements)
        elif isinstance(source, SecretVolumeSource):
            source.secret_name = _apply(source.secret_name, replacements)
        elif isinstance(source, PersistentVolumeClaimVolumeSource):
            source.claim_name = _apply(source.claim_name, replacements)

    return spec


def apply_parameters(
    spec: TaskSpec,
    params: Iterable[Param],
    defaults: Iterable[TaskParam] | None = None,
) -> TaskSpec:
    """Apply run params over defaults (the task's own declarations when omitted)."""
    if defaults is None:
        defaults = spec.inputs
    return apply_replacements(spec, param_replacements(defaults, params))


def apply_resources(
    spec: TaskSpec,
    resources: Mapping[str, ResolvedResource],
    scope: str,
) -> TaskSpec:
    """Apply resolved resource fields under the given scope (inputs/outputs)."""
    return apply_replacements(spec, resource_replacements(resources, scope))

"""
Resolved resources exposing fields for substitution.

A resolved resource is anything with a ``replacements()`` method returning
short field name → string value. ``PipelineResource`` is the concrete type
built from run documents; its exported fields come from the resource type
registry in ``config``.
"""

from dataclasses import dataclass, field
from typing import Protocol

from .config import get_resource_type


class ResolvedResource(Protocol):
    def replacements(self) -> dict[str, str]: ...


@dataclass
class PipelineResource:
    """A resource bound to concrete values (git repo, image, bucket, cluster)."""

    name: str
    type: str
    params: dict[str, str] = field(default_factory=dict)

    def replacements(self) -> dict[str, str]:
        """
        Fields available as ``${SCOPE.resources.BINDING.<field>}``.

        Always exports ``name`` and ``type``, every field the resource type
        declares (``""`` when not supplied), then any extra params.
        """
        exported = {"name": self.name, "type": self.type}
        for field_name in get_resource_type(self.type).fields:
            exported[field_name] = self.params.get(field_name, "")
        for key, value in self.params.items():
            exported.setdefault(key, value)
        return exported

    @classmethod
    def from_dict(cls, binding_name: str, d: dict) -> "PipelineResource":
        """
        Build from a run document entry.

        ``params`` may be a mapping or a list of ``{"name", "value"}`` items.
        Raises KeyError for an unknown resource type.
        """
        type_name = str(d.get("type", ""))
        get_resource_type(type_name)

        raw_params = d.get("params") or {}
        if isinstance(raw_params, list):
            raw_params = {p.get("name", ""): p.get("value", "") for p in raw_params}

        return cls(
            name=str(d.get("name") or binding_name),
            type=type_name,
            params={str(k): "" if v is None else str(v) for k, v in raw_params.items()},
        )

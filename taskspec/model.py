"""
Task specification data model for taskspec.

Dataclasses mirroring the JSON task document (Kubernetes-style camelCase
keys). Every type round-trips through ``from_dict``/``to_dict`` and keeps
keys it does not model in ``_raw`` so they are written back unchanged.

One-of fields (env value sources, envFrom refs, volume sources) are
separate dataclasses tagged by a ``kind`` class attribute naming their
JSON key. Sources that are not modelled are carried as passthrough
objects holding the original JSON.
"""

from dataclasses import dataclass, field
from typing import ClassVar


def _as_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _set(d: dict, key: str, value):
    """Set key when value is non-empty, otherwise drop it (omitempty)."""
    if value:
        d[key] = value
    else:
        d.pop(key, None)


# ─── Parameters ──────────────────────────────────────────────────


@dataclass
class TaskParam:
    """A parameter declared by a task, with an optional default."""

    name: str
    default: str = ""
    description: str = ""
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        d["name"] = self.name
        _set(d, "default", self.default)
        _set(d, "description", self.description)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TaskParam":
        return cls(
            name=_as_str(d.get("name")),
            default=_as_str(d.get("default")),
            description=_as_str(d.get("description")),
            _raw=dict(d),
        )


@dataclass
class Param:
    """A parameter value supplied by a run."""

    name: str
    value: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, d: dict) -> "Param":
        return cls(name=_as_str(d.get("name")), value=_as_str(d.get("value")))


# ─── Tagged Sources ──────────────────────────────────────────────


@dataclass
class _NamedRef:
    kind: ClassVar[str] = ""

    name: str = ""
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        body = dict(self._raw)
        body["name"] = self.name
        return {self.kind: body}

    @classmethod
    def from_body(cls, body: dict):
        return cls(name=_as_str(body.get("name")), _raw=dict(body))


@dataclass
class _KeyRef(_NamedRef):
    key: str = ""

    def to_dict(self) -> dict:
        d = super().to_dict()
        d[self.kind]["key"] = self.key
        return d

    @classmethod
    def from_body(cls, body: dict):
        return cls(name=_as_str(body.get("name")), key=_as_str(body.get("key")), _raw=dict(body))


@dataclass
class _Passthrough:
    """A source kind this model does not know; written back verbatim."""

    kind: str = ""
    raw: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return dict(self.raw)


@dataclass
class SecretKeyRef(_KeyRef):
    kind: ClassVar[str] = "secretKeyRef"


@dataclass
class ConfigMapKeyRef(_KeyRef):
    kind: ClassVar[str] = "configMapKeyRef"


@dataclass
class OtherEnvVarSource(_Passthrough):
    pass


EnvVarSource = SecretKeyRef | ConfigMapKeyRef | OtherEnvVarSource


@dataclass
class ConfigMapEnvSource(_NamedRef):
    kind: ClassVar[str] = "configMapRef"


@dataclass
class SecretEnvSource(_NamedRef):
    kind: ClassVar[str] = "secretRef"


EnvFromRef = ConfigMapEnvSource | SecretEnvSource


@dataclass
class ConfigMapVolumeSource(_NamedRef):
    kind: ClassVar[str] = "configMap"


@dataclass
class SecretVolumeSource:
    kind: ClassVar[str] = "secret"

    secret_name: str = ""
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        body = dict(self._raw)
        body["secretName"] = self.secret_name
        return {self.kind: body}

    @classmethod
    def from_body(cls, body: dict) -> "SecretVolumeSource":
        return cls(secret_name=_as_str(body.get("secretName")), _raw=dict(body))


@dataclass
class PersistentVolumeClaimVolumeSource:
    kind: ClassVar[str] = "persistentVolumeClaim"

    claim_name: str = ""
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        body = dict(self._raw)
        body["claimName"] = self.claim_name
        return {self.kind: body}

    @classmethod
    def from_body(cls, body: dict) -> "PersistentVolumeClaimVolumeSource":
        return cls(claim_name=_as_str(body.get("claimName")), _raw=dict(body))


@dataclass
class OtherVolumeSource(_Passthrough):
    pass


VolumeSource = (
    ConfigMapVolumeSource | SecretVolumeSource | PersistentVolumeClaimVolumeSource | OtherVolumeSource
)

ENV_VAR_SOURCE_TYPES = (SecretKeyRef, ConfigMapKeyRef)
ENV_FROM_REF_TYPES = (ConfigMapEnvSource, SecretEnvSource)
VOLUME_SOURCE_TYPES = (ConfigMapVolumeSource, SecretVolumeSource, PersistentVolumeClaimVolumeSource)


def _pick_variant(d: dict, variants: tuple):
    """Return the first known variant present in d, built from its body."""
    for cls in variants:
        body = d.get(cls.kind)
        if isinstance(body, dict):
            return cls.from_body(body)
    return None


# ─── Step Fields ─────────────────────────────────────────────────


@dataclass
class EnvVar:
    """A single environment variable; ``name`` is a key, never a template."""

    name: str
    value: str = ""
    value_from: EnvVarSource | None = None
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        d["name"] = self.name
        _set(d, "value", self.value)
        _set(d, "valueFrom", self.value_from.to_dict() if self.value_from else None)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "EnvVar":
        value_from = None
        raw_from = d.get("valueFrom")
        if isinstance(raw_from, dict) and raw_from:
            value_from = _pick_variant(raw_from, ENV_VAR_SOURCE_TYPES)
            if value_from is None:
                value_from = OtherEnvVarSource(kind=next(iter(raw_from)), raw=dict(raw_from))
        return cls(
            name=_as_str(d.get("name")),
            value=_as_str(d.get("value")),
            value_from=value_from,
            _raw=dict(d),
        )


@dataclass
class EnvFromSource:
    """Import every key of a ConfigMap or Secret, optionally prefixed."""

    prefix: str = ""
    ref: EnvFromRef | None = None
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        _set(d, "prefix", self.prefix)
        for cls in ENV_FROM_REF_TYPES:
            d.pop(cls.kind, None)
        if self.ref is not None:
            d.update(self.ref.to_dict())
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "EnvFromSource":
        return cls(
            prefix=_as_str(d.get("prefix")),
            ref=_pick_variant(d, ENV_FROM_REF_TYPES),
            _raw=dict(d),
        )


@dataclass
class VolumeMount:
    name: str
    mount_path: str = ""
    sub_path: str = ""
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        d["name"] = self.name
        _set(d, "mountPath", self.mount_path)
        _set(d, "subPath", self.sub_path)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "VolumeMount":
        return cls(
            name=_as_str(d.get("name")),
            mount_path=_as_str(d.get("mountPath")),
            sub_path=_as_str(d.get("subPath")),
            _raw=dict(d),
        )


@dataclass
class Step:
    """A single container step of a task."""

    name: str = ""
    image: str = ""
    working_dir: str = ""
    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    env: list[EnvVar] = field(default_factory=list)
    env_from: list[EnvFromSource] = field(default_factory=list)
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        _set(d, "name", self.name)
        _set(d, "image", self.image)
        _set(d, "workingDir", self.working_dir)
        _set(d, "command", list(self.command))
        _set(d, "args", list(self.args))
        _set(d, "env", [e.to_dict() for e in self.env])
        _set(d, "envFrom", [e.to_dict() for e in self.env_from])
        _set(d, "volumeMounts", [v.to_dict() for v in self.volume_mounts])
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Step":
        return cls(
            name=_as_str(d.get("name")),
            image=_as_str(d.get("image")),
            working_dir=_as_str(d.get("workingDir")),
            command=[_as_str(c) for c in d.get("command") or []],
            args=[_as_str(a) for a in d.get("args") or []],
            env=[EnvVar.from_dict(e) for e in d.get("env") or []],
            env_from=[EnvFromSource.from_dict(e) for e in d.get("envFrom") or []],
            volume_mounts=[VolumeMount.from_dict(v) for v in d.get("volumeMounts") or []],
            _raw=dict(d),
        )


# ─── Volumes ─────────────────────────────────────────────────────


@dataclass
class Volume:
    """A volume; every key besides ``name`` belongs to its source."""

    name: str
    source: VolumeSource | None = None

    def to_dict(self) -> dict:
        d = {"name": self.name}
        if self.source is not None:
            d.update(self.source.to_dict())
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Volume":
        source_keys = {k: v for k, v in d.items() if k != "name"}
        source = _pick_variant(source_keys, VOLUME_SOURCE_TYPES)
        if source is None and source_keys:
            source = OtherVolumeSource(kind=next(iter(source_keys)), raw=source_keys)
        return cls(name=_as_str(d.get("name")), source=source)


# ─── Task ────────────────────────────────────────────────────────


@dataclass
class TaskSpec:
    """A task: declared input parameters, steps and volumes."""

    inputs: list[TaskParam] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    _raw: dict = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        d = dict(self._raw)
        inputs = dict(d.get("inputs") or {})
        _set(inputs, "params", [p.to_dict() for p in self.inputs])
        _set(d, "inputs", inputs)
        d["steps"] = [s.to_dict() for s in self.steps]
        _set(d, "volumes", [v.to_dict() for v in self.volumes])
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TaskSpec":
        inputs = d.get("inputs") or {}
        return cls(
            inputs=[TaskParam.from_dict(p) for p in inputs.get("params") or []],
            steps=[Step.from_dict(s) for s in d.get("steps") or []],
            volumes=[Volume.from_dict(v) for v in d.get("volumes") or []],
            _raw=dict(d),
        )

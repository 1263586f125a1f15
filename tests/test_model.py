"""Tests for taskspec.model module."""

import copy

from taskspec.model import (
    ConfigMapEnvSource,
    ConfigMapKeyRef,
    ConfigMapVolumeSource,
    EnvFromSource,
    EnvVar,
    OtherEnvVarSource,
    OtherVolumeSource,
    Param,
    PersistentVolumeClaimVolumeSource,
    SecretEnvSource,
    SecretKeyRef,
    SecretVolumeSource,
    Step,
    TaskParam,
    TaskSpec,
    Volume,
)

TASK_DATA = {
    "inputs": {
        "params": [
            {"name": "greeting", "default": "hi", "description": "What to say"},
            {"name": "target"},
        ],
        "resources": [{"name": "source", "type": "git"}],
    },
    "steps": [
        {
            "name": "say",
            "image": "alpine:${inputs.params.tag}",
            "workingDir": "/workspace",
            "command": ["echo"],
            "args": ["${inputs.params.greeting}"],
            "env": [
                {"name": "PLAIN", "value": "1"},
                {
                    "name": "TOKEN",
                    "valueFrom": {"secretKeyRef": {"name": "creds", "key": "token", "optional": True}},
                },
                {"name": "POD", "valueFrom": {"fieldRef": {"fieldPath": "metadata.name"}}},
            ],
            "envFrom": [{"prefix": "CFG_", "configMapRef": {"name": "settings"}}],
            "volumeMounts": [{"name": "ws", "mountPath": "/ws", "readOnly": True}],
            "resources": {"limits": {"cpu": "1"}},
        }
    ],
    "volumes": [
        {"name": "cfg", "configMap": {"name": "settings", "items": [{"key": "a", "path": "a"}]}},
        {"name": "sec", "secret": {"secretName": "creds"}},
        {"name": "data", "persistentVolumeClaim": {"claimName": "pvc-1", "readOnly": False}},
        {"name": "tmp", "emptyDir": {}},
    ],
}


class TestTaskSpecRoundTrip:
    def test_round_trip_preserves_document(self):
        data = copy.deepcopy(TASK_DATA)
        assert TaskSpec.from_dict(data).to_dict() == TASK_DATA

    def test_from_dict_does_not_modify_input(self):
        data = copy.deepcopy(TASK_DATA)
        TaskSpec.from_dict(data).to_dict()
        assert data == TASK_DATA

    def test_empty_document(self):
        spec = TaskSpec.from_dict({})
        assert spec.steps == []
        assert spec.volumes == []
        assert spec.inputs == []
        assert spec.to_dict() == {"steps": []}

    def test_param_declarations_parsed(self):
        spec = TaskSpec.from_dict(TASK_DATA)
        assert spec.inputs[0] == TaskParam(
            name="greeting",
            default="hi",
            description="What to say",
            _raw=TASK_DATA["inputs"]["params"][0],
        )
        assert spec.inputs[1].default == ""


class TestStep:
    def test_fields_parsed(self):
        step = TaskSpec.from_dict(TASK_DATA).steps[0]
        assert step.name == "say"
        assert step.working_dir == "/workspace"
        assert step.command == ["echo"]
        assert step.args == ["${inputs.params.greeting}"]
        assert step.volume_mounts[0].mount_path == "/ws"

    def test_empty_fields_omitted(self):
        assert Step(image="alpine").to_dict() == {"image": "alpine"}


class TestEnvVar:
    def test_secret_key_ref_variant(self):
        env = EnvVar.from_dict({"name": "T", "valueFrom": {"secretKeyRef": {"name": "s", "key": "k"}}})
        assert isinstance(env.value_from, SecretKeyRef)
        assert env.value_from.kind == "secretKeyRef"
        assert env.value_from.name == "s"
        assert env.value_from.key == "k"

    def test_config_map_key_ref_variant(self):
        env = EnvVar.from_dict(
            {"name": "T", "valueFrom": {"configMapKeyRef": {"name": "c", "key": "k"}}}
        )
        assert isinstance(env.value_from, ConfigMapKeyRef)
        assert env.value_from.kind == "configMapKeyRef"

    def test_unknown_value_source_passed_through(self):
        raw = {"resourceFieldRef": {"resource": "limits.cpu"}}
        env = EnvVar.from_dict({"name": "CPU", "valueFrom": raw})
        assert isinstance(env.value_from, OtherEnvVarSource)
        assert env.value_from.kind == "resourceFieldRef"
        assert env.to_dict() == {"name": "CPU", "valueFrom": raw}

    def test_plain_value(self):
        env = EnvVar.from_dict({"name": "A", "value": "1"})
        assert env.value == "1"
        assert env.value_from is None

    def test_to_dict_built_from_fields(self):
        env = EnvVar(name="T", value_from=SecretKeyRef(name="s", key="k"))
        assert env.to_dict() == {"name": "T", "valueFrom": {"secretKeyRef": {"name": "s", "key": "k"}}}


class TestEnvFromSource:
    def test_config_map_ref(self):
        e = EnvFromSource.from_dict({"configMapRef": {"name": "c"}})
        assert isinstance(e.ref, ConfigMapEnvSource)
        assert e.ref.name == "c"

    def test_secret_ref(self):
        e = EnvFromSource.from_dict({"prefix": "S_", "secretRef": {"name": "s"}})
        assert isinstance(e.ref, SecretEnvSource)
        assert e.prefix == "S_"

    def test_ref_replaced_in_output(self):
        e = EnvFromSource.from_dict({"configMapRef": {"name": "c"}})
        e.ref = SecretEnvSource(name="s")
        assert e.to_dict() == {"secretRef": {"name": "s"}}


class TestVolume:
    def test_source_variants(self):
        spec = TaskSpec.from_dict(TASK_DATA)
        cfg, sec, data, tmp = spec.volumes
        assert isinstance(cfg.source, ConfigMapVolumeSource)
        assert cfg.source.name == "settings"
        assert isinstance(sec.source, SecretVolumeSource)
        assert sec.source.secret_name == "creds"
        assert isinstance(data.source, PersistentVolumeClaimVolumeSource)
        assert data.source.claim_name == "pvc-1"
        assert isinstance(tmp.source, OtherVolumeSource)
        assert tmp.source.kind == "emptyDir"

    def test_volume_without_source(self):
        volume = Volume.from_dict({"name": "v"})
        assert volume.source is None
        assert volume.to_dict() == {"name": "v"}


class TestParams:
    def test_non_string_values_converted(self):
        assert TaskParam.from_dict({"name": "n", "default": 3}).default == "3"
        assert Param.from_dict({"name": "b", "value": True}).value == "true"
        assert Param.from_dict({"name": "z", "value": 0}).value == "0"

    def test_missing_value_is_empty(self):
        assert Param.from_dict({"name": "x"}).value == ""

    def test_param_to_dict(self):
        assert Param(name="x", value="v").to_dict() == {"name": "x", "value": "v"}

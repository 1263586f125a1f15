"""Tests for taskspec.loader module."""

import json

import pytest

from taskspec.loader import (
    TaskRun,
    load_run,
    load_task,
    parse_param_overrides,
    read_json_object,
)
from taskspec.model import Param

TASK = {
    "inputs": {"params": [{"name": "greeting", "default": "hi"}]},
    "steps": [{"name": "say", "image": "alpine", "args": ["${inputs.params.greeting}"]}],
}


def _write(path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestReadJsonObject:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_json_object(tmp_path / "nope.json")

    def test_invalid_json_raises_value_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            read_json_object(path)

    def test_non_object_raises_value_error(self, tmp_path):
        path = _write(tmp_path / "list.json", [1, 2])
        with pytest.raises(ValueError, match="must contain a JSON object"):
            read_json_object(path)


class TestLoadTask:
    def test_bare_spec(self, tmp_path):
        spec = load_task(_write(tmp_path / "task.json", TASK))
        assert spec.steps[0].name == "say"
        assert spec.inputs[0].default == "hi"

    def test_wrapped_spec(self, tmp_path):
        doc = {"kind": "Task", "metadata": {"name": "t"}, "spec": TASK}
        spec = load_task(_write(tmp_path / "task.json", doc))
        assert spec.steps[0].args == ["${inputs.params.greeting}"]


class TestLoadRun:
    def test_params_and_resources(self, tmp_path):
        run_doc = {
            "params": [{"name": "greeting", "value": "hello"}],
            "resources": {
                "inputs": {"source": {"type": "git", "params": {"url": "u"}}},
                "outputs": {"image": {"type": "image", "params": {"url": "r/app"}}},
            },
        }
        run = load_run(_write(tmp_path / "run.json", run_doc))
        assert run.params == [Param(name="greeting", value="hello")]
        assert run.input_resources["source"].params == {"url": "u"}
        assert run.output_resources["image"].type == "image"

    def test_empty_run(self):
        run = TaskRun.from_dict({})
        assert run.params == []
        assert run.input_resources == {}
        assert run.output_resources == {}


class TestParseParamOverrides:
    def test_name_value_pairs(self):
        assert parse_param_overrides(["a=1", "b=two"]) == [
            Param(name="a", value="1"),
            Param(name="b", value="two"),
        ]

    def test_value_may_contain_equals(self):
        assert parse_param_overrides(["q=x=y"]) == [Param(name="q", value="x=y")]

    def test_empty_value_allowed(self):
        assert parse_param_overrides(["a="]) == [Param(name="a", value="")]

    def test_none_returns_empty(self):
        assert parse_param_overrides(None) == []

    @pytest.mark.parametrize("item", ["novalue", "=v", "  =v"])
    def test_invalid_items_raise(self, item):
        with pytest.raises(ValueError, match="expected NAME=VALUE"):
            parse_param_overrides([item])

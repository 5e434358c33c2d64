"""Tests for load_fields() and dump_fields()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
import yaml

from modulefield.errors import ConfigNotFoundError, FieldDefinitionError
from modulefield.field import DefaultValue, ModuleField
from modulefield.loader import dump_fields, load_fields


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data, default_flow_style=False))
    return path


class TestLoadFields:
    def test_load(self, tmp_path: Path) -> None:
        path = write_yaml(
            tmp_path / "module.yaml",
            {
                "fields": [
                    {
                        "fieldID": "1",
                        "name": "title",
                        "kind": "String",
                        "isRequired": True,
                        "defaultValue": [{"value": "Untitled"}],
                    },
                    {"name": "done", "kind": "Bool", "isMulti": True},
                ]
            },
        )
        fields = load_fields(path)
        assert [f.name for f in fields] == ["title", "done"]
        assert fields[0].is_required is True
        assert fields[0].default_value == (DefaultValue("Untitled"),)
        assert fields[1].is_multi is False

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "module.yaml", {"fields": []})
        assert load_fields(str(path)) == []

    def test_invalid_name_kept_and_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = write_yaml(tmp_path / "module.yaml", {"fields": [{"name": "bad name"}]})
        with caplog.at_level(logging.WARNING, logger="modulefield.loader"):
            fields = load_fields(path)
        assert len(fields) == 1
        assert fields[0].is_valid is False
        assert "invalid name" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            load_fields(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "module.yaml"
        path.write_text("fields: [")
        with pytest.raises(FieldDefinitionError, match="invalid YAML"):
            load_fields(path)

    @pytest.mark.parametrize(
        ("data", "reason"),
        [
            ([1, 2], "must be a mapping"),
            ({"other": 1}, "'fields' must be a list"),
            ({"fields": {"name": "a"}}, "'fields' must be a list"),
            ({"fields": ["a"]}, "field 0 must be a mapping"),
        ],
    )
    def test_invalid_shape(self, tmp_path: Path, data: Any, reason: str) -> None:
        path = write_yaml(tmp_path / "module.yaml", data)
        with pytest.raises(FieldDefinitionError) as exc_info:
            load_fields(path)
        assert reason in exc_info.value.details["reason"]


class TestDumpFields:
    def test_dump_then_load(self, tmp_path: Path) -> None:
        fields = [
            ModuleField.from_dict({"fieldID": "3", "name": "tags", "isMulti": True, "options": {"a": [1, 2]}}),
            ModuleField.from_dict({"name": "owner", "kind": "User", "isSystem": True}),
        ]
        path = tmp_path / "module.yaml"
        path.write_text(dump_fields(fields))
        assert load_fields(path) == fields

    def test_uses_wire_keys(self) -> None:
        document = yaml.safe_load(dump_fields([ModuleField(name="a")]))
        assert document["fields"][0]["fieldID"] == "0"
        assert "isRequired" in document["fields"][0]

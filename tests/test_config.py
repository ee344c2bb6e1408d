"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from taskreview.exceptions import ConfigError
from taskreview.utils.config import get_default_config, load_config, merge_config, resolve_config


def test_merge_keeps_unrelated_defaults() -> None:
    """Nested sections are merged key by key."""

    merged = merge_config(get_default_config(), {"loader": {"columns": {"group": "Section"}}})

    assert merged["loader"]["columns"]["group"] == "Section"
    assert merged["loader"]["columns"]["id"] == "タスクID"
    assert merged["loader"]["delimiter"] == "\t"


def test_merge_does_not_mutate_base() -> None:
    """The defaults stay untouched."""

    base = get_default_config()
    merge_config(base, {"report": {"format": "json"}})

    assert base["report"]["format"] == "markdown"


def test_load_yaml_and_json(tmp_path) -> None:
    """Both supported formats load into dictionaries."""

    yaml_path = tmp_path / "c.yaml"
    yaml_path.write_text("report:\n  value_unit: slide\n", encoding="utf-8")
    json_path = tmp_path / "c.json"
    json_path.write_text('{"report": {"value_unit": "chapter"}}', encoding="utf-8")

    assert load_config(str(yaml_path)) == {"report": {"value_unit": "slide"}}
    assert load_config(str(json_path)) == {"report": {"value_unit": "chapter"}}


def test_load_rejects_unknown_suffix(tmp_path) -> None:
    """Only YAML and JSON are supported."""

    path = tmp_path / "c.ini"
    path.write_text("[x]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_resolve_tolerates_missing_implicit_file(tmp_path) -> None:
    """The implicit default path may be absent; an explicit one may not."""

    missing = str(tmp_path / "config.yaml")

    assert resolve_config(missing, explicit=False) == get_default_config()
    with pytest.raises(FileNotFoundError):
        resolve_config(missing)


def test_empty_yaml_file_means_defaults(tmp_path) -> None:
    """An empty YAML document does not break merging."""

    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert resolve_config(str(path)) == get_default_config()


def test_load_rejects_malformed_yaml(tmp_path) -> None:
    """YAML syntax errors surface as configuration errors."""

    path = tmp_path / "c.yaml"
    path.write_text("report: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_rejects_non_mapping_document(tmp_path) -> None:
    """The top level of a config file must be a mapping."""

    path = tmp_path / "c.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))

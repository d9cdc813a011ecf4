"""Tests for YAML configuration loading."""

import pytest

from schema_sqlgen.config import DEFAULTS, Config, find_config_file, get_config, setup_logging
from schema_sqlgen.generation.config import GeneratorConfig, identity


@pytest.fixture
def project_config(tmp_path, monkeypatch):
    """Load config.yaml from a temporary working directory."""
    (tmp_path / "config.yaml").write_text(
        "generation:\n"
        "  include_schema: false\n"
        "  manual_prefix: usp_\n"
        "output:\n"
        "  encoding: latin-1\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    config = get_config()
    config.reload()
    yield config
    monkeypatch.undo()
    config.reload()


def test_singleton():
    assert Config() is get_config()


def test_defaults():
    config = get_config()
    assert config.get("logging", "level") == DEFAULTS["logging"]["level"]
    assert config.get("generation", "missing", default=3) == 3
    assert config.get("nope") is None


def test_deep_merge_keeps_unset_defaults():
    merged = get_config()._deep_merge(DEFAULTS, {"generation": {"manual_prefix": "sp_"}})
    assert merged["generation"]["manual_prefix"] == "sp_"
    assert merged["generation"]["include_schema"] is True
    assert DEFAULTS["generation"]["manual_prefix"] == ""


def test_yaml_file_overrides_defaults(project_config):
    assert project_config.generation["include_schema"] is False
    assert project_config.generation["cursor_parameter_name"] is None

    generator_config = GeneratorConfig.from_config()
    assert generator_config.include_schema is False
    assert generator_config.manual_prefix == "usp_"
    assert generator_config.encoding == "latin-1"


def test_generator_config_from_dict():
    config = GeneratorConfig.from_dict({"manual_prefix": None, "cursor_parameter_name": "p_cursor"})
    assert config.manual_prefix == ""
    assert config.include_schema is True
    assert config.format_parameter is identity
    assert config.cursor_parameter_name == "p_cursor"


def test_setup_logging_accepts_level_names():
    setup_logging("debug")
    setup_logging()


def test_find_config_file_prefers_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yml").write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    assert find_config_file().resolve() == (tmp_path / "config.yml").resolve()

"""Tests for configuration loading."""

import pytest

from import_map.config import find_config_file, load_config
from import_map.models import AnalysisConfig


def test_defaults_when_no_config(tmp_path):
    config = load_config(base_dir=tmp_path)
    assert config == AnalysisConfig()
    assert config.max_file_size == 1024 * 1024
    assert "**/*.vue" in config.include
    assert "node_modules/**" in config.exclude


def test_import_map_toml(tmp_path):
    (tmp_path / "import-map.toml").write_text(
        '[import-map]\n'
        'working_dir = "frontend"\n'
        'include = ["src/**/*.ts"]\n'
        'max_file_size = 2048\n'
        'detect_type_only_imports = false\n',
        encoding="utf-8",
    )
    config = load_config(base_dir=tmp_path)
    assert config.working_dir == tmp_path / "frontend"
    assert config.include == ["src/**/*.ts"]
    assert config.max_file_size == 2048
    assert config.detect_type_only_imports is False
    assert config.exclude == AnalysisConfig().exclude


def test_top_level_keys(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text("generate_visualization = false\n", encoding="utf-8")
    assert load_config(path).generate_visualization is False


def test_pyproject_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.import-map]\noutput_dir = "/tmp/out"\n',
        encoding="utf-8",
    )
    assert find_config_file(tmp_path) == tmp_path / "pyproject.toml"
    assert str(load_config(base_dir=tmp_path).output_dir) == "/tmp/out"


def test_pyproject_without_table_is_ignored(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert find_config_file(tmp_path) is None


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "import-map.toml"
    path.write_text("[import-map]\nincludes = ['x']\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid config"):
        load_config(path)


def test_invalid_toml_rejected(tmp_path):
    path = tmp_path / "import-map.toml"
    path.write_text("[import-map\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)

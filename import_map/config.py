"""Configuration loading: defaults merged with an optional TOML file."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import replace
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from import_map.models import AnalysisConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "import-map.toml"
_TABLE = "import-map"


class ConfigFile(BaseModel):
    """Keys accepted in ``import-map.toml`` or ``[tool.import-map]``."""

    model_config = ConfigDict(extra="forbid")

    include: list[str] | None = None
    exclude: list[str] | None = None
    working_dir: Path | None = None
    output_dir: Path | None = None
    generate_visualization: bool | None = None
    max_file_size: int | None = None
    detect_type_only_imports: bool | None = None
    extensions: list[str] | None = None


def _read_table(path: Path) -> dict | None:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Failed to load config file {path}: {e}") from e

    if path.name == "pyproject.toml":
        return data.get("tool", {}).get(_TABLE)
    return data.get(_TABLE, data)


def find_config_file(base_dir: Path) -> Path | None:
    """Return ``import-map.toml``, or a pyproject.toml with ``[tool.import-map]``."""
    candidate = base_dir / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = base_dir / "pyproject.toml"
    if pyproject.is_file():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return None
        if _TABLE in data.get("tool", {}):
            return pyproject
    return None


def load_config(path: Path | None = None, *, base_dir: Path | None = None) -> AnalysisConfig:
    """Build an AnalysisConfig from defaults plus the given or discovered config file.

    Relative ``working_dir``/``output_dir`` values are taken relative to the
    config file's directory.
    """
    defaults = AnalysisConfig()
    if path is None:
        path = find_config_file(base_dir or Path.cwd())
        if path is None:
            logger.debug("No config file found, using defaults")
            return defaults

    table = _read_table(path)
    if not table:
        return defaults

    try:
        parsed = ConfigFile.model_validate(table)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e

    overrides = parsed.model_dump(exclude_none=True)
    for key in ("working_dir", "output_dir"):
        if key in overrides and not overrides[key].is_absolute():
            overrides[key] = path.parent / overrides[key]

    logger.debug("Loaded config from %s: %s", path, sorted(overrides))
    return replace(defaults, **overrides)

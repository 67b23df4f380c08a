from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from .utils import env_bool, env_str, load_yaml_file
from .validation import OUTPUT_FORMATS, validate_config_data

LOGGER = logging.getLogger(__name__)


@dataclass
class Settings:
    format: str = "table"  # table | plain | json
    show_progress: bool = True
    verbose: bool = False


@dataclass
class AppConfig:
    settings: Settings = field(default_factory=Settings)
    inputs: list[str] = field(default_factory=list)
    input_list: Path | None = None


def _build_settings(data: dict[str, Any]) -> Settings:
    return Settings(
        format=str(data.get("format", "table")),
        show_progress=bool(data.get("show_progress", True)),
        verbose=bool(data.get("verbose", False)),
    )


def apply_env_overrides(settings: Settings) -> Settings:
    """Return ``settings`` with FILESORT_* environment variables applied.

    Unset or unrecognized values leave the corresponding setting unchanged.
    """
    env_format = env_str("FILESORT_FORMAT")
    env_progress = env_bool("FILESORT_PROGRESS")
    env_verbose = env_bool("FILESORT_VERBOSE")

    updated = settings
    if env_format is not None:
        lowered = env_format.lower()
        if lowered not in OUTPUT_FORMATS:
            raise ValueError(
                f"FILESORT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}, got '{env_format}'"
            )
        updated = replace(updated, format=lowered)
    if env_progress is not None:
        updated = replace(updated, show_progress=env_progress)
    if env_verbose is not None:
        updated = replace(updated, verbose=env_verbose)
    return updated


def build_config(data: dict[str, Any], *, base_dir: Path | None = None) -> AppConfig:
    """Validate raw configuration data and build an ``AppConfig``.

    Relative ``input_list`` paths are resolved against ``base_dir`` when given.

    Raises:
        ValueError: If the data fails schema or semantic validation.
    """
    report = validate_config_data(data)
    for issue in report.warnings:
        LOGGER.warning("Configuration warning: %s", issue.describe())
    if not report.is_valid:
        details = "; ".join(issue.describe() for issue in report.errors)
        raise ValueError(f"Invalid configuration: {details}")

    settings = _build_settings(data.get("settings", {}) or {})

    input_list: Path | None = None
    raw_list = data.get("input_list")
    if raw_list:
        input_list = Path(raw_list).expanduser()
        if base_dir is not None and not input_list.is_absolute():
            input_list = base_dir / input_list

    return AppConfig(
        settings=settings,
        inputs=list(data.get("inputs", []) or []),
        input_list=input_list,
    )


def load_config(path: Path) -> AppConfig:
    try:
        data = load_yaml_file(path)
    except OSError as exc:
        raise ValueError(f"Unable to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Unable to parse config {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping at the top level")
    return build_config(data, base_dir=path.parent)

"""Config loading: YAML file, environment overrides, explicit flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gh_project_helper.contracts.config import HelperConfig
from gh_project_helper.contracts.exceptions import ConfigError

DEFAULT_CONFIG_NAME = ".gh-project-helper.yaml"
ENV_PREFIX = "GH_PROJECT_HELPER_"
_ENV_KEYS = ("token", "auth")


def default_config_path() -> Path:
    return Path.home() / DEFAULT_CONFIG_NAME


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file: {path}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"config file root must be a mapping: {path}")
    return dict(raw)


def load_config(
    path: str | Path | None = None,
    *,
    token: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> HelperConfig:
    """Build the effective config.

    Precedence, lowest to highest: config file, ``GH_PROJECT_HELPER_*``
    environment variables, the explicit *token* argument. Without *path* the
    file ``~/.gh-project-helper.yaml`` is read when it exists.
    """
    env = os.environ if environ is None else environ
    payload: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
        payload.update(_read_config_file(config_path))
    else:
        candidate = default_config_path()
        if candidate.is_file():
            payload.update(_read_config_file(candidate))

    for key in _ENV_KEYS:
        value = env.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            payload[key] = value
    if token:
        payload["token"] = token
        payload["auth"] = "token"

    try:
        return HelperConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

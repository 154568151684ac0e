# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and layered loading for hooksetup."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "hooksetup"
ENV_PREFIX: Final[str] = "HOOKSETUP_"

_ENV_FIELDS: Final[dict[str, str]] = {
    "TOOL": "tool",
    "PACKAGE": "package",
    "INSTALLER": "installer",
    "HOOK_TYPES": "hook_types",
    "EMOJI": "emoji",
}
_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class InstallerKind(str, Enum):
    """Enumerate package installers able to provide the hook manager."""

    PIP = "pip"
    UV = "uv"
    AUTO = "auto"


class HookSetupConfig(BaseModel):
    """Settings controlling which hook manager is installed and how."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tool: str = Field(default="pre-commit", min_length=1)
    package: str = Field(default="pre-commit", min_length=1)
    installer: InstallerKind = InstallerKind.PIP
    hook_types: tuple[str, ...] = ()
    install_hook_envs: bool = False
    emoji: bool = True

    @field_validator("hook_types", mode="before")
    @classmethod
    def _split_hook_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("hook_types")
    @classmethod
    def _dedupe_hook_types(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))


def load_config(
    root: Path,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> HookSetupConfig:
    """Return the effective configuration for ``root``.

    Precedence, lowest first: built-in defaults, ``[tool.hooksetup]`` in
    ``pyproject.toml``, ``HOOKSETUP_*`` environment variables, ``overrides``.

    Args:
        root: Repository root searched for ``pyproject.toml``.
        env: Environment mapping; defaults to ``os.environ``.
        overrides: Explicit values supplied by the caller (typically CLI flags).

    Returns:
        HookSetupConfig: Validated configuration.

    Raises:
        ConfigError: Raised when any layer contains invalid data.
    """

    data: dict[str, Any] = {}
    data.update(_load_pyproject(root / PYPROJECT_FILENAME))
    data.update(_load_env(os.environ if env is None else env))
    data.update({key: value for key, value in (overrides or {}).items() if value is not None})
    try:
        return HookSetupConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_describe_validation_error(exc)) from exc


def _load_pyproject(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {key.replace("-", "_"): value for key, value in section.items()}


def _load_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(f"{ENV_PREFIX}{suffix}")
        if raw is None or raw == "":
            continue
        if field_name == "emoji":
            values[field_name] = _parse_bool(f"{ENV_PREFIX}{suffix}", raw)
        else:
            values[field_name] = raw
    return values


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid hooksetup configuration: " + "; ".join(problems)


__all__ = [
    "ConfigError",
    "ENV_PREFIX",
    "HookSetupConfig",
    "InstallerKind",
    "load_config",
]

"""CLI settings — flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``HR_ID_*`` prefix
  3. TOML file    — ``--config``, ``$HR_ID_CONFIG``, or the nearest ``hr-id.toml``
  4. Code defaults
"""

from __future__ import annotations

import hashlib
import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hr_id.hashing import DEFAULT_ALGORITHM

CONFIG_FILENAME = "hr-id.toml"
CONFIG_ENV_VAR = "HR_ID_CONFIG"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``hr-id.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class HrIdSettings(BaseSettings):
    """Unified, frozen settings for the hr-id CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        hash_algorithm: hashlib algorithm used by ``hr-id hash``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HR_ID_",
    }

    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    hash_algorithm: str = DEFAULT_ALGORITHM

    @field_validator("hash_algorithm")
    @classmethod
    def _known_algorithm(cls, v: str) -> str:
        if v not in hashlib.algorithms_available:
            msg = f"unknown hash algorithm {v!r}"
            raise ValueError(msg)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @staticmethod
    def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
        """Pick the TOML file to read, if any.

        An explicit ``--config`` path wins, then ``$HR_ID_CONFIG``, then the
        nearest ``hr-id.toml`` in *start* (default: cwd) or one of its parents.
        A named file that does not exist means no TOML source at all.
        """
        named = explicit or os.environ.get(CONFIG_ENV_VAR)
        if named:
            path = Path(named)
            return path if path.is_file() else None

        here = (start or Path.cwd()).resolve()
        for directory in (here, *here.parents):
            if (directory / CONFIG_FILENAME).is_file():
                return directory / CONFIG_FILENAME
        return None

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> HrIdSettings:
        """Construct settings from a CLI invocation.

        CLI flags that are None are left to lower-priority sources.
        """
        toml_path = cls.locate_config(config_path, start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

"""FleetSettings — every knob the CLI reads, in one frozen object.

Sources, highest priority first:

1. keyword arguments (the root command's flags)
2. ``FLEETCTL_*`` environment variables, ``__`` between nested keys
   (``FLEETCTL_DEFAULTS__COLOR=Blue``)
3. the ``fleetctl.toml`` picked by :func:`~fleetctl.config.discovery.find_config`
4. the defaults on the models themselves
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fleetctl.config.discovery import find_config, read_toml
from fleetctl.config.models import DefaultsConfig, PresetConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed ``fleetctl.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = read_toml(toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources() is a classmethod with a fixed signature, so
# from_cli() hands it the chosen file through this thread-local.
_pending = threading.local()


class FleetSettings(BaseSettings):
    """Resolved settings for one fleetctl invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
        defaults: Color and year used when ``add`` omits them.
        presets: Named presets from ``[presets.<name>]`` tables.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FLEETCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Output and logging flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # fleetctl.toml tables
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    presets: dict[str, PresetConfig] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Flags, then environment, then TOML; no dotenv or secrets dir."""
        toml_source = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> FleetSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored rather
        than searched around.  Otherwise the file is found by walking up
        from *search_from* (default: cwd).
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(search_from)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None

"""RoverSettings: CLI flags, env vars, and ``rovercli.toml`` merged into one object.

Highest priority first:

1. Keyword arguments (the global CLI flags)
2. ``ROVERCLI_*`` env vars, nested with ``__`` (``ROVERCLI_API__TIMEOUT=3``)
3. The TOML file named by ``config_path``
4. Defaults on the section models
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from rovercli.config.discovery import resolve_config
from rovercli.config.models import ApiConfig


class RoverSettings(BaseSettings):
    """Settings for one ``rovercli`` invocation.

    Built once at the CLI root and kept on
    :class:`~rovercli.commands._context.AppContext`. The API endpoint is
    read from here and handed to the client explicitly.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROVERCLI_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read the TOML file named by the ``config_path`` keyword, below env vars."""
        toml_path = None
        if isinstance(init_settings, InitSettingsSource):
            toml_path = init_settings.init_kwargs.get("config_path")
        try:
            toml_settings = TomlConfigSettingsSource(settings_cls, toml_file=toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        return init_settings, env_settings, toml_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        api_endpoint: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RoverSettings:
        """Build settings for a CLI invocation.

        ``--api-endpoint`` replaces only the endpoint; a timeout from TOML or
        the environment is kept.
        """
        settings = cls(config_path=resolve_config(config_path, start=start), **cli_flags)
        if api_endpoint:
            api = settings.api.model_copy(update={"endpoint": api_endpoint})
            settings = settings.model_copy(update={"api": api})
        return settings

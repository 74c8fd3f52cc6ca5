"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (APPLAUNCH__SEARCH__MAX_RESULTS=5)
  2. applaunch.yaml         (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults. It is a
separate file from launcher.conf, which holds the persisted style overrides
and launch counts (see applaunch.store).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_APP_NAME = "applaunch"
_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir(_APP_NAME)
_DEFAULT_STORE_PATH = str(Path(platformdirs.user_config_dir()) / "launcher.conf")
_DEFAULT_APP_DIRS = [
    "/usr/share/applications",
    "/usr/local/share/applications",
    str(Path(platformdirs.user_data_dir()) / "applications"),
]


def _find_config_file() -> str | None:
    """Return the path of the first applaunch.yaml found, or None."""
    candidates = [
        Path("applaunch.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "applaunch.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SearchSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_results: int = Field(default=10, ge=1)


class LoaderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app_dirs: list[str] = Field(default_factory=lambda: list(_DEFAULT_APP_DIRS))


class StoreSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    config_path: str = _DEFAULT_STORE_PATH


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: APPLAUNCH__STORE__CONFIG_PATH=/tmp/x.conf
        env_prefix="APPLAUNCH__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    search: SearchSettings = SearchSettings()
    loader: LoaderSettings = LoaderSettings()
    store: StoreSettings = StoreSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )

from __future__ import annotations

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    YamlConfigSettingsSource,
)

from sysinfo_cli.models.view import SortBy


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "sysinfo-cli"
    log_level: str = "WARNING"

    # --- collectors ---
    cpu_sample_interval: float = Field(default=0.2, ge=0)  # seconds between CPU samples
    default_sort: SortBy = SortBy.CPU

    # --- output ---
    color: bool = True
    clear_screen: bool = True
    label_width: int = Field(default=25, ge=1)
    name_max_width: int = Field(default=30, ge=4)

    model_config = {
        "env_file": ".env",
        "env_prefix": "SYSINFO_",
        "yaml_file": "sysinfo.yaml",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

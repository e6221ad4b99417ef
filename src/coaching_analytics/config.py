"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


def _find_project_root() -> Path:
    """Find project root by locating pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from config/settings.yaml."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        """Not used - we implement __call__ instead."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}

        with open(yaml_path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        # Flatten nested structure to match Settings field names
        flattened = {}
        if 'storage' in data:
            flattened['data_dir'] = data['storage'].get('data_dir')
            flattened['catalog_path'] = data['storage'].get('catalog_path')
        if 'certificates' in data:
            flattened['certificate_organization'] = data['certificates'].get('organization')
        if 'logging' in data:
            flattened['env'] = data['logging'].get('env')

        # Remove None values
        return {k: v for k, v in flattened.items() if v is not None}


class Settings(BaseSettings):
    """Engine settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(default="development")

    # Storage
    project_root: Path = Field(default_factory=_find_project_root)
    data_dir: Path | None = Field(default=None)
    catalog_path: Path | None = Field(default=None)

    # Certificates
    certificate_organization: str = Field(default="CoachyLearning")

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def resolved_data_dir(self) -> Path:
        d = self.data_dir or self.project_root / "data"
        if not d.is_absolute():
            d = self.project_root / d
        d.mkdir(parents=True, exist_ok=True)
        return d

    @property
    def progress_dir(self) -> Path:
        return self.resolved_data_dir / "progress"

    @property
    def sessions_dir(self) -> Path:
        return self.resolved_data_dir / "sessions"

    @property
    def resolved_catalog_path(self) -> Path:
        path = self.catalog_path or self.project_root / "config" / "catalog.yaml"
        if not path.is_absolute():
            path = self.project_root / path
        return path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include YAML file.

        Priority order (highest to lowest):
        1. init_settings (arguments passed to Settings())
        2. env_settings (environment variables)
        3. dotenv_settings (.env file)
        4. YamlSettingsSource (settings.yaml)
        5. file_secret_settings
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
            file_secret_settings,
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()

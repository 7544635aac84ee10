"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Optional

import structlog
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvdb_catalog import __version__

logger = structlog.get_logger()


class CatalogConfig(BaseModel):
    """Catalog connection settings."""

    base_url: str = "http://thetvdb.com"
    api_key: str = ""  # Needed for by-ID and full-record lookups
    language: str = "en"
    timeout: int = 30
    user_agent: str = f"tvdb-catalog/{__version__}"


class SearchConfig(BaseModel):
    """Web search settings."""

    max_results: int = 10  # 0 or less means no cap


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class Settings(BaseSettings):
    """Main settings container."""

    model_config = SettingsConfigDict(
        env_prefix="TVDB_",
        env_nested_delimiter="__",
    )

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls(**data) if data else cls()


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from file or defaults."""
    if config_path and config_path.exists():
        logger.info("loading_config", path=str(config_path))
        return Settings.from_yaml(config_path)

    default_paths = [
        Path("config.yaml"),
        Path.home() / ".tvdb-catalog" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            logger.info("loading_config", path=str(path))
            return Settings.from_yaml(path)

    logger.info("using_default_config")
    return Settings()

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict, Any
from pathlib import Path


class Settings(BaseSettings):
    # Models
    DEFAULT_LANG: str = "ja"  # Used when neither --lang nor --model is given
    MODELS_DIR: Optional[str] = None  # Directory of <lang>.json; None = budoux package data

    # Output
    SEPARATOR: str = "\u200b"  # Inserted into HTML at each boundary
    CHUNK_SEPARATOR: str = "|"  # Joins chunks printed by `parse`
    CLASS_NAME: Optional[str] = None  # Class added to annotated elements

    # HTML tree builder handed to BeautifulSoup
    HTML_PARSER: str = Field(
        default="html.parser",
        description="BeautifulSoup builder: html.parser or lxml",
    )

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "warning"

    model_config = SettingsConfigDict(
        env_prefix="PHRASELINE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Config-file values arrive as init kwargs and rank below the environment
        return (env_settings, dotenv_settings, init_settings, file_secret_settings)

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        if config_file:
            config_path = Path(config_file)
        else:
            # Auto-discover .phraseline.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".phraseline.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        # Load config file if found
        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Environment variables and CLI args will override these
        return cls(**config_data)


# Default settings - will be replaced by load_config() during CLI startup
SETTINGS = Settings()

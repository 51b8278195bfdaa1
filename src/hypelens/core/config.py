"""Configuration management for HypeLens."""

from pathlib import Path
from typing import Union

import yaml
from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import FileConstants
from .keywords import DEFAULT_BANKS


class Settings(BaseSettings):
    """Application settings."""

    # OpenAI API (OCR collaborator)
    openai_api_key: str = Field("", description="OpenAI API key")
    ocr_model: str = Field("gpt-4o-mini", description="Vision model used for OCR")
    ocr_timeout: float = Field(60.0, description="OCR request timeout in seconds")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis settings
    keyword_config: str = Field("", description="Optional YAML file overriding keyword banks")

    # Retries (OCR only; the analysis core does no I/O)
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def ensure_config_files(config_dir: Union[str, Path] = FileConstants.CONFIG_DIR) -> Path:
    """Ensure an editable keywords.yaml exists with the default banks."""
    config_dir = Path(config_dir)
    config_dir.mkdir(parents=True, exist_ok=True)

    keywords_file = config_dir / FileConstants.KEYWORD_CONFIG_FILE
    if not keywords_file.exists():
        with open(keywords_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(DEFAULT_BANKS, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return keywords_file


# Global settings instance
settings = Settings()

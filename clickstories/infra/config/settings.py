"""
Application configuration settings.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("console", alias="LOG_FORMAT")

    # Templates and assets
    template_dir: str = Field(
        str(PACKAGE_DIR / "templates"), alias="CLICKSTORIES_TEMPLATE_DIR"
    )
    images_dir: str = Field("images", alias="CLICKSTORIES_IMAGES_DIR")

    # Compilation
    normalize_embeds: bool = Field(True, alias="CLICKSTORIES_NORMALIZE_EMBEDS")
    chart_engine: str = Field("r", alias="CLICKSTORIES_CHART_ENGINE")
    document_engine: str = Field("knitr", alias="CLICKSTORIES_DOCUMENT_ENGINE")

    # External renderer
    quarto_binary: str = Field("quarto", alias="QUARTO_BINARY")
    quarto_timeout: int = Field(300, alias="QUARTO_TIMEOUT")


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

"""Configuration management using Pydantic settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Region map settings loaded from environment variables (REGIONMAP_*)."""

    model_config = SettingsConfigDict(
        env_prefix="REGIONMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target canvas the geographic extent is fitted into
    canvas_width: float = 1000.0
    canvas_height: float = 700.0
    canvas_padding: float = 0.0

    # Fallback directory for load_file() when the given path is not readable
    data_dir: Path = Path("data")

    # Colour every region starts with (see RegionCatalog.highlight_region)
    default_color: str = "#e0e0e0"

    # Status classification table: status -> list of hc-key ids.
    # Checked in declaration order; ids in no list get "default".
    # Example: REGIONMAP_STATUS_RULES='{"warning": ["10312"], "danger": ["10202"]}'
    status_rules: dict[str, list[str]] = {}

    log_level: str = "INFO"


settings = Settings()

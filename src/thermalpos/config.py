"""Configuration management for thermalpos."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from thermalpos.models.settings import (
    BarcodeSettings,
    MaxiCodeSettings,
    PDF417Settings,
    QRSettings,
    RasterSettings,
)

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Default encoder options loaded from a YAML profile."""

    raster: RasterSettings = Field(default_factory=RasterSettings)
    qr: QRSettings = Field(default_factory=QRSettings)
    pdf417: PDF417Settings = Field(default_factory=PDF417Settings)
    maxicode: MaxiCodeSettings = Field(default_factory=MaxiCodeSettings)
    barcode: BarcodeSettings = Field(default_factory=BarcodeSettings)


class Settings(BaseSettings):
    """Environment-based settings."""

    model_config = SettingsConfigDict(
        env_prefix="THERMALPOS_",
        env_file=".env",
        extra="ignore",
    )

    config_file: Path = Path("thermalpos.yaml")
    debug: bool = False
    # Printable area for images read from files (dots)
    max_image_width: int = 100
    max_image_height: int = 60


def load_config(config_path: Path) -> AppConfig:
    """Load encoder defaults from a YAML file."""
    if not config_path.exists():
        logger.debug(f"Config file {config_path} not found, using defaults")
        return AppConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # YAML returns None for empty sections
    data = {key: value for key, value in data.items() if value is not None}

    return AppConfig.model_validate(data)


# Global settings instance
settings = Settings()

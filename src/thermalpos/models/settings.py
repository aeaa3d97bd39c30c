"""Option models accepted by the encoders.

Every model ignores unknown keys and accepts both snake_case names and the
camelCase keys used by existing callers (``dotMatrix``, ``cellSize``...).
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from thermalpos.errors import MalformedInput
from thermalpos.protocol.commands import (
    MAXICODE_DEFAULT_MODE,
    QR_DEFAULT_CELL_SIZE,
    QR_DEFAULT_MODEL,
    QRErrorCorrection,
)

# Fraction of a dot added to barcode sizes so rounding never shrinks a module below one pixel
DOT_EPSILON = 1e-4

SettingsT = TypeVar("SettingsT", bound="EncoderSettings")


class EncoderSettings(BaseModel):
    """Base for encoder option models."""

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def coerce(cls: type[SettingsT], settings: "SettingsT | Mapping[str, Any] | None") -> SettingsT:
        """Build settings from a model, a plain mapping or None (all defaults)."""
        if settings is None:
            return cls()
        if isinstance(settings, cls):
            return settings
        # Drop explicit None values so they fall back to defaults
        values = {k: v for k, v in dict(settings).items() if v is not None}
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise MalformedInput(f"Invalid {cls.__name__}: {e}") from e


class RasterSettings(EncoderSettings):
    """Raster image options."""

    density: int = 1  # 1 = single, 2 = double
    dot_matrix: bool = False  # halftone thinning
    print_red: bool = False  # switch to red for bands containing red pixels


class QRSettings(EncoderSettings):
    """QR code options."""

    model: int = QR_DEFAULT_MODEL
    cell_size: str = QR_DEFAULT_CELL_SIZE
    correction: str = QRErrorCorrection.M.value

    @field_validator("cell_size", mode="before")
    @classmethod
    def _cell_size_as_key(cls, value: Any) -> Any:
        # Sizes are table keys; numbers from YAML or callers are accepted
        return str(value) if isinstance(value, int) else value


class PDF417Settings(EncoderSettings):
    """PDF417 options. Ranges are checked by the encoder."""

    correction: int = 1  # 1-40
    row_height: int = 3  # 2-8
    width: int = 3  # 2-8
    columns: int = 0  # 1-30, 0 = auto
    truncated: bool = False


class MaxiCodeSettings(EncoderSettings):
    """MaxiCode options."""

    mode: int = MAXICODE_DEFAULT_MODE


class BarcodeSettings(EncoderSettings):
    """Rendering options for 1-D barcodes, in printer dots."""

    module_width_dots: int = Field(default=1, gt=0)
    bar_height_dots: int = Field(default=32, gt=0)
    quiet_zone_dots: int = Field(default=10, ge=0)
    dpi: int = Field(default=254, gt=0)

    def dots_to_mm(self, dots: int) -> float:
        """Convert dots to the millimetres python-barcode works in."""
        return (dots + DOT_EPSILON) * 25.4 / self.dpi

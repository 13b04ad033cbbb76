"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. Every field is
explicit; runtime modules read attributes directly, never ``.get()``.
"""

from typing import Literal, Optional
from pydantic import ConfigDict
from fars.schemas.base import FarsBaseModel


class InternalDataConfig(FarsBaseModel):
    """Runtime data location and schema."""
    data_dir: Optional[str]
    filename_template: str
    required_columns: list[str]
    on_missing_columns: Literal["reject", "warn"]


class InternalSummaryConfig(FarsBaseModel):
    """Runtime summary settings."""
    fill_value: Optional[int]
    complete_months: bool


class InternalMappingConfig(FarsBaseModel):
    """Runtime coordinate sentinels."""
    longitude_sentinel: float
    latitude_sentinel: float


class InternalVisualizationConfig(FarsBaseModel):
    """Runtime visualization settings."""
    dpi: int
    figsize: tuple[float, float]
    output_format: Literal["png", "pdf", "jpeg", "svg"]
    marker: str
    marker_size: float
    point_color: str
    show: bool
    use_basemap: bool
    basemap_alpha: float
    boundary_path: Optional[str]
    boundary_state_field: str


class InternalLoggingConfig(FarsBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(FarsBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
        def load_records(path, config: InternalConfig):
            required = config.data.required_columns  # NOT .get()
    """

    data: InternalDataConfig
    summary: InternalSummaryConfig
    mapping: InternalMappingConfig
    visualization: InternalVisualizationConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,
    )

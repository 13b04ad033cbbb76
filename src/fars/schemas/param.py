"""ParamConfig: Expert defaults for FARS data access and plotting.

ALL tunable parameters have their default here. Runtime code never reads
ParamConfig directly - it only receives InternalConfig from resolve_config().
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from fars.schemas.base import FarsBaseModel


REQUIRED_COLUMNS = ["MONTH", "STATE", "LONGITUD", "LATITUDE"]

# Census cartographic boundary file (1:20M) with a two-digit STATEFP field.
STATE_BOUNDARY_URL = "https://www2.census.gov/geo/tiger/GENZ2018/shp/cb_2018_us_state_20m.zip"


# =============================================================================
# Nested Configuration Models
# =============================================================================

class DataConfig(FarsBaseModel):
    """Where the yearly accident files live and what they must contain."""
    data_dir: Optional[str] = Field(
        None, description="Directory holding accident files (None = bundled extdata)"
    )
    filename_template: str = "accident_{year}.csv.bz2"
    required_columns: list[str] = Field(default_factory=lambda: list(REQUIRED_COLUMNS))
    on_missing_columns: Literal["reject", "warn"] = "reject"

    @field_validator("filename_template")
    @classmethod
    def template_has_year(cls, v):
        """The template must place the year somewhere in the name."""
        if "{year}" not in v:
            raise ValueError("filename_template must contain '{year}'")
        return v

    @field_validator("required_columns", mode="before")
    @classmethod
    def upper_case_columns(cls, v):
        """FARS column names are upper case."""
        if isinstance(v, (list, tuple)):
            return [str(c).strip().upper() for c in v]
        return v


class SummaryConfig(FarsBaseModel):
    """Month-by-year summary table settings."""
    fill_value: Optional[int] = Field(
        None, ge=0, description="Count for unobserved (month, year); None keeps <NA>"
    )
    complete_months: bool = True


class MappingConfig(FarsBaseModel):
    """Coordinate sentinels used by the source data for 'not recorded'."""
    longitude_sentinel: float = Field(900.0, description="LONGITUD above this is missing")
    latitude_sentinel: float = Field(90.0, description="LATITUDE above this is missing")

    @field_validator("longitude_sentinel", "latitude_sentinel", mode="before")
    @classmethod
    def coerce_to_float(cls, v):
        """Allow int or float sentinels."""
        return float(v)


class VisualizationConfig(FarsBaseModel):
    """State map appearance and output."""
    dpi: int = Field(150, ge=50)
    figsize: tuple[float, float] = (8.0, 8.0)
    output_format: Literal["png", "pdf", "jpeg", "svg"] = "png"
    marker: str = "."
    marker_size: float = Field(2.0, gt=0)
    point_color: str = "black"
    show: bool = False
    use_basemap: bool = False
    basemap_alpha: float = Field(0.6, ge=0, le=1.0)
    boundary_path: Optional[str] = Field(
        STATE_BOUNDARY_URL, description="State outlines (file or URL); None draws no outline"
    )
    boundary_state_field: str = "STATEFP"


class LoggingConfig(FarsBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(FarsBaseModel):
    """Complete expert configuration with all defaults.

    Base layer of config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    data: DataConfig = Field(default_factory=DataConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    mapping: MappingConfig = Field(default_factory=MappingConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

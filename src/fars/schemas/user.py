"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat keys with upper-case aliases (``DATA_DIR`` -> ``data_dir``,
``FILL_VALUE`` -> ``fill_value``) as well as nested sections for advanced
users. Unknown keys are ignored so older config files keep working.
"""

from typing import Literal, Optional, Any
from pydantic import Field, field_validator
from fars.schemas.base import FarsBaseModel


class UserDataConfig(FarsBaseModel):
    """User-facing data config."""
    data_dir: Optional[str] = None
    filename_template: Optional[str] = None
    required_columns: Optional[list[str]] = None
    on_missing_columns: Optional[Literal["reject", "warn"]] = None

    @field_validator("on_missing_columns", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserSummaryConfig(FarsBaseModel):
    """User-facing summary config."""
    fill_value: Optional[int] = None
    complete_months: Optional[bool] = None


class UserMappingConfig(FarsBaseModel):
    """User-facing sentinel config."""
    longitude_sentinel: Optional[float] = None
    latitude_sentinel: Optional[float] = None


class UserConfig(FarsBaseModel):
    """User-facing configuration schema.

    Users only specify what they want to override from ParamConfig.

    Usage
    -----
        user_cfg = UserConfig(
            DATA_DIR="/data/fars",
            FILL_VALUE=0,
            BOUNDARY_PATH="/data/geo/cb_2018_us_state_20m.shp",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Data (flat aliases)
    data_dir: Optional[str] = Field(None, alias="DATA_DIR")
    filename_template: Optional[str] = Field(None, alias="FILENAME_TEMPLATE")

    # Summary (flat aliases)
    fill_value: Optional[int] = Field(None, alias="FILL_VALUE")
    complete_months: Optional[bool] = Field(None, alias="COMPLETE_MONTHS")

    # Map (flat aliases)
    boundary_path: Optional[str] = Field(None, alias="BOUNDARY_PATH")
    draw_boundary: Optional[bool] = Field(None, alias="DRAW_BOUNDARY")
    use_basemap: Optional[bool] = Field(None, alias="USE_BASEMAP")
    dpi: Optional[int] = Field(None, alias="DPI")

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    # Nested overrides (advanced users)
    data: Optional[UserDataConfig] = None
    summary: Optional[UserSummaryConfig] = None
    mapping: Optional[UserMappingConfig] = None
    visualization: Optional[dict[str, Any]] = None

    model_config = FarsBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to the nested InternalConfig structure.

        Nested sections win over the flat aliases when both are given.
        """
        overrides = {}

        data = {}
        if self.data_dir is not None:
            data["data_dir"] = str(self.data_dir)
        if self.filename_template is not None:
            data["filename_template"] = self.filename_template
        if self.data is not None:
            data.update(self.data.model_dump(exclude_none=True))
        if data:
            overrides["data"] = data

        summary = {}
        if self.fill_value is not None:
            summary["fill_value"] = self.fill_value
        if self.complete_months is not None:
            summary["complete_months"] = self.complete_months
        if self.summary is not None:
            summary.update(self.summary.model_dump(exclude_none=True))
        if summary:
            overrides["summary"] = summary

        if self.mapping is not None:
            mapping = self.mapping.model_dump(exclude_none=True)
            if mapping:
                overrides["mapping"] = mapping

        visualization = {}
        if self.boundary_path is not None:
            visualization["boundary_path"] = str(self.boundary_path)
        if self.draw_boundary is False:
            visualization["boundary_path"] = None
        if self.use_basemap is not None:
            visualization["use_basemap"] = self.use_basemap
        if self.dpi is not None:
            visualization["dpi"] = self.dpi
        if self.visualization:
            visualization.update(self.visualization)
        if visualization:
            overrides["visualization"] = visualization

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides

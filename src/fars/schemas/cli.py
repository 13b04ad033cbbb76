"""CLIConfig: Command-line operational overrides.

Settings that commonly change between runs: data directory, fill policy,
boundary layer (or none), verbosity. Highest priority in config resolution.
"""

from typing import Literal, Optional
from fars.schemas.base import FarsBaseModel


class CLIConfig(FarsBaseModel):
    """Command-line configuration overrides.

    Usage
    -----
        cli_cfg = CLIConfig(data_dir="/data/fars", log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    data_dir: Optional[str] = None
    fill_value: Optional[int] = None
    boundary_path: Optional[str] = None
    draw_boundary: Optional[bool] = None
    show: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure."""
        overrides = {}

        if self.data_dir is not None:
            overrides["data"] = {"data_dir": str(self.data_dir)}

        if self.fill_value is not None:
            overrides["summary"] = {"fill_value": self.fill_value}

        visualization = {}
        if self.boundary_path is not None:
            visualization["boundary_path"] = str(self.boundary_path)
        if self.draw_boundary is False:
            visualization["boundary_path"] = None
        if self.show is not None:
            visualization["show"] = self.show
        if visualization:
            overrides["visualization"] = visualization

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides

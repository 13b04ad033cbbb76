"""State map of fatal accident locations.

Draws one point per accident (longitude/latitude) inside the state's
bounds, over the state's boundary outline and optional map tiles.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np
import pandas as pd
import geopandas as gpd
import matplotlib.pyplot as plt
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

try:
    import contextily as ctx
    CONTEXTILY_AVAILABLE = True
except ImportError:
    CONTEXTILY_AVAILABLE = False

from fars.contracts import SchemaError
from fars.schemas import InternalConfig, default_config

__all__ = ['StateMapPlotter', 'read_state_boundaries']

logger = logging.getLogger(__name__)

# Errors raised by the geopandas I/O engines (pyogrio, fiona) for a missing
# file, an unreachable URL or an unknown format.
BOUNDARY_READ_ERRORS = (OSError, RuntimeError, ValueError)


@lru_cache(maxsize=8)
def read_state_boundaries(path: str) -> gpd.GeoDataFrame:
    """Read a state boundary layer in geographic (EPSG:4326) coordinates.

    Results are cached per path, so the default Census download happens
    once per process.
    """
    shapes = gpd.read_file(path)
    if shapes.crs is not None and not shapes.crs.is_geographic:
        shapes = shapes.to_crs(epsg=4326)
    logger.debug("Read %d boundary features from %s", len(shapes), path)
    return shapes


class StateMapPlotter:
    """Scatter map of accident locations for one state and year.

    **Points:**

    One marker per row with both ``LONGITUD`` and ``LATITUDE`` present.
    Rows with a missing coordinate (NaN) are not drawn.

    **Bounds:**

    Axis limits are the min/max of the non-missing longitudes and latitudes,
    so sentinel coordinates never stretch the map.

    **Boundary and tiles:**

    The outline of the feature whose ``boundary_state_field`` equals the
    two-digit state code is read with geopandas from
    ``visualization.boundary_path``, by default the Census
    ``cb_2018_us_state_20m`` layer. Set it to None to skip the outline.
    ``use_basemap`` adds OpenStreetMap tiles through contextily.

    **Output:**

    ``plot_state`` saves to ``output_path`` when given (returns the path),
    shows the window when ``visualization.show`` is set, and otherwise
    returns the ``Figure`` for the caller to handle. Unless ``show`` is set,
    figures are drawn on an Agg canvas outside pyplot, whatever backend the
    session uses.

    Example usage::

        plotter = StateMapPlotter(config)
        plotter.plot_state(points, state_code=22, year=2014,
                           output_path="plots/louisiana_2014.png")
    """

    def __init__(self, config: Optional[InternalConfig] = None):
        """Initialize plotter.

        Parameters
        ----------
        config : InternalConfig, optional
            Runtime configuration; its ``visualization`` section sets DPI,
            figure size, marker style and the boundary/basemap layers.
        """
        self.config = config or default_config()
        viz = self.config.visualization

        self.dpi = viz.dpi
        self.figsize = tuple(viz.figsize)
        self.output_format = viz.output_format
        self.show = viz.show

        self.marker = viz.marker
        self.marker_size = viz.marker_size
        self.point_color = viz.point_color

        self.boundary_path = viz.boundary_path
        self.boundary_state_field = viz.boundary_state_field
        self.use_basemap = viz.use_basemap
        self.basemap_alpha = viz.basemap_alpha

        if self.use_basemap and not CONTEXTILY_AVAILABLE:
            logger.warning("Basemap requested but contextily not installed")
            self.use_basemap = False

        logger.debug("StateMapPlotter initialized (format=%s, dpi=%d)", self.output_format, self.dpi)

    @staticmethod
    def _range(values: pd.Series) -> Tuple[float, float]:
        """Min/max of non-missing values, widened when they coincide."""
        lo, hi = float(np.nanmin(values)), float(np.nanmax(values))
        if lo == hi:
            lo, hi = lo - 0.5, hi + 0.5
        return lo, hi

    def _setup_figure(self) -> Tuple[Figure, plt.Axes]:
        if self.show:
            return plt.subplots(figsize=self.figsize, dpi=self.dpi)

        fig = Figure(figsize=self.figsize, dpi=self.dpi)
        FigureCanvasAgg(fig)
        ax = fig.add_subplot()
        return fig, ax

    def _draw_boundary(self, ax: plt.Axes, state_code: int) -> None:
        """Outline the state from the configured boundary layer.

        An unreadable source (offline, missing file) only costs the outline.
        A layer without ``boundary_state_field`` is a configuration error.
        """
        if not self.boundary_path:
            return

        try:
            shapes = read_state_boundaries(str(self.boundary_path))
        except BOUNDARY_READ_ERRORS as e:
            logger.warning("Could not read state boundaries from %s: %s", self.boundary_path, e)
            return

        if self.boundary_state_field not in shapes.columns:
            raise SchemaError(
                f"boundary layer '{self.boundary_path}' has no field "
                f"'{self.boundary_state_field}'"
            )

        codes = shapes[self.boundary_state_field].astype(str).str.zfill(2)
        state_shape = shapes[codes == f"{state_code:02d}"]
        if state_shape.empty:
            logger.warning("State %02d not found in boundary layer %s", state_code, self.boundary_path)
            return

        # Outline segments in lon/lat, added without pyplot.
        lines = state_shape.boundary.explode(index_parts=False)
        segments = [np.asarray(line.coords)[:, :2] for line in lines if not line.is_empty]
        ax.add_collection(LineCollection(segments, colors="black", linewidths=0.8, zorder=10))

    def _add_basemap(self, ax: plt.Axes) -> None:
        """Add OpenStreetMap tiles under the current axis limits."""
        if not self.use_basemap:
            return

        try:
            ctx.add_basemap(
                ax,
                crs="EPSG:4326",
                source=ctx.providers.OpenStreetMap.Mapnik,
                alpha=self.basemap_alpha,
                attribution=False,
            )
        except (OSError, ValueError) as e:
            logger.warning("Could not add basemap: %s", e)

    def _format_axis(self, ax: plt.Axes, state_code: int, year: int, n_points: int) -> None:
        ax.set_xlabel("Longitude", fontsize=11)
        ax.set_ylabel("Latitude", fontsize=11)
        ax.grid(True, alpha=0.2, linestyle=":", linewidth=0.5)
        ax.set_title(
            f"Fatal accidents - state {state_code:02d}, {year}\n{n_points} located crashes",
            fontsize=12,
            fontweight="bold",
        )

    def _save_figure(self, fig: Figure, output_path: Path) -> str:
        """Save figure in configured format."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_file = output_path.with_suffix(f".{self.output_format}")

        fig.savefig(
            output_file,
            dpi=self.dpi,
            bbox_inches="tight",
            format=self.output_format,
        )
        plt.close(fig)
        logger.info("Plot saved: %s", output_file)
        return str(output_file)

    def plot_state(
        self,
        points: pd.DataFrame,
        state_code: int,
        year: int,
        output_path: Optional[Union[Path, str]] = None,
    ) -> Union[str, Figure]:
        """Draw the accident points of one state and year.

        Parameters
        ----------
        points : pd.DataFrame
            The state's rows with ``LONGITUD``/``LATITUDE``; missing
            coordinates are NaN. At least one row must have both.
        state_code : int
            FARS (FIPS) state number, used for the boundary and title.
        year : int
            Data year, used for the title.
        output_path : Path or str, optional
            Where to save the figure. The suffix is replaced by the
            configured output format.

        Returns
        -------
        str or Figure
            Saved file path when ``output_path`` is given, else the Figure.
        """
        lon = points["LONGITUD"]
        lat = points["LATITUDE"]
        located = lon.notna() & lat.notna()

        fig, ax = self._setup_figure()

        self._draw_boundary(ax, state_code)
        ax.scatter(
            lon[located],
            lat[located],
            marker=self.marker,
            s=self.marker_size,
            c=self.point_color,
            linewidths=0,
            zorder=50,
        )

        ax.set_xlim(*self._range(lon))
        ax.set_ylim(*self._range(lat))
        self._add_basemap(ax)
        self._format_axis(ax, state_code, year, int(located.sum()))

        if output_path is not None:
            return self._save_figure(fig, Path(output_path))

        if self.show:
            plt.show()

        return fig

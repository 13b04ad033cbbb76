"""FARS user configuration.

User-facing settings for the ``fars`` command. Expert defaults live in
``fars.schemas.param``; anything not set here keeps its default.

Usage:
    fars --config scripts/user_config.py summarize 2013 2014 2015
    fars --config scripts/user_config.py map 22 2014 --output plots/la_2014.png
"""

CONFIG = {
    # ========================================================================
    # DATA
    # ========================================================================
    "DATA_DIR": None,                              # None = files bundled with the package
    "FILENAME_TEMPLATE": "accident_{year}.csv.bz2",

    # ========================================================================
    # SUMMARY
    # ========================================================================
    "FILL_VALUE": None,       # Count for months with no accidents (None keeps <NA>)
    "COMPLETE_MONTHS": True,  # Always report months 1..12

    # ========================================================================
    # STATE MAPS
    # ========================================================================
    "BOUNDARY_PATH": None,    # None = Census state layer (downloaded once); or a shapefile/GeoJSON path
    "DRAW_BOUNDARY": True,    # False skips the state outline
    "USE_BASEMAP": False,     # OpenStreetMap tiles (needs contextily and network)
    "DPI": 150,

    "LOG_LEVEL": "INFO",

    # Advanced: nested sections override the flat keys above
    # "mapping": {"longitude_sentinel": 900.0, "latitude_sentinel": 90.0},
    # "visualization": {"marker_size": 4.0, "point_color": "darkred"},
}

"""Visualization and plotting of FARS accident locations."""

from .plotter import StateMapPlotter
from .state_map import map_state, sanitize_coordinates, select_state

__all__ = ['StateMapPlotter', 'map_state', 'sanitize_coordinates', 'select_state']

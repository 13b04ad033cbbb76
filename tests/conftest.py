"""Root-level pytest fixtures for the FARS test suite.

Provides Pydantic-based configuration fixtures and a temporary data
directory holding synthetic accident files for 2013 and 2014.
"""

import shutil
import tempfile
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from fars.schemas import ParamConfig, UserConfig, resolve_config
from fars.schemas.param import STATE_BOUNDARY_URL
from fars.visualization import plotter as plotter_module
from tests.helpers.fake_fars import make_accidents, make_state_shapes, write_accident_file


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_fill(make_config):
    ...     config = make_config(FILL_VALUE=0)
    ...     assert config.summary.fill_value == 0
    """
    def _make(**user_overrides):
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def accident_frames():
    """The synthetic tables written to ``data_dir``, keyed by year."""
    return {
        2013: make_accidents(2013, sentinel_state=22),
        2014: make_accidents(2014),
    }


@pytest.fixture
def data_dir(temp_dir, accident_frames):
    """Directory with accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    for year, df in accident_frames.items():
        write_accident_file(temp_dir, year, df)
    return temp_dir


@pytest.fixture
def fars_config(make_config, data_dir):
    """Runtime config pointing at ``data_dir``."""
    return make_config(DATA_DIR=str(data_dir))


@pytest.fixture(autouse=True)
def offline_state_boundaries(monkeypatch):
    """Serve the default Census state layer from memory; tests never download."""
    read_file_layer = plotter_module.read_state_boundaries

    def _read(path):
        if path == STATE_BOUNDARY_URL:
            return make_state_shapes()
        return read_file_layer(path)

    monkeypatch.setattr(plotter_module, "read_state_boundaries", _read)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")

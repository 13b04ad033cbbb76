"""Command execution logic for the ``fars`` command line.

Argument parsing lives in ``fars.cli.main``; these functions take plain
values so they can be called from scripts and tests.
"""

import importlib.util
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fars.analysis import summarize_years
from fars.data import build_filename, load_records
from fars.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig
from fars.visualization import map_state

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from a Python file.

    The file must define a dict whose name starts with ``CONFIG``.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("fars_user_config", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def build_runtime_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
) -> InternalConfig:
    """Resolve config from expert defaults, an optional user file and CLI values.

    ``None`` values in ``cli_args`` are dropped before validation.
    """
    user_cfg = None
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_dict = {k: v for k, v in (cli_args or {}).items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    return resolve_config(ParamConfig(), user_cfg, cli_cfg)


def run_read(year, config: InternalConfig, rows: int = 5) -> None:
    """Print the size and first rows of one year's records."""
    path = build_filename(year, config)
    df = load_records(path, config)
    print(f"{path}: {len(df)} records, {len(df.columns)} columns")
    print(df.head(rows).to_string(index=False))


def run_summarize(years: List, config: InternalConfig, output: Optional[str] = None) -> None:
    """Print the month-by-year summary, or write it to a CSV file."""
    summary = summarize_years(years, config)
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path, index=False)
        logger.info("Summary written: %s", out_path)
    else:
        print(summary.to_string(index=False))


def run_map(state_code, year, config: InternalConfig, output: Optional[str] = None) -> None:
    """Draw the state map; saves to ``output`` when given."""
    result = map_state(state_code, year, config, output_path=output)
    if result is None:
        print("Nothing plotted.")
    elif output:
        print(f"Map saved: {result}")

"""Configuration resolution and merging logic.

resolve_config() merges ParamConfig, UserConfig and CLIConfig and returns a
validated, frozen InternalConfig.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. UserConfig (user file)
3. ParamConfig (expert defaults)
"""

from typing import Union, Optional
from fars.schemas.param import ParamConfig
from fars.schemas.user import UserConfig
from fars.schemas.cli import CLIConfig
from fars.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Merge override dicts into ``base``, later ones winning.

    Nested dicts are merged key by key; any other value is replaced.

    Examples
    --------
    >>> deep_merge({"data": {"data_dir": None, "x": 1}}, {"data": {"data_dir": "/d"}})
    {'data': {'data_dir': '/d', 'x': 1}}
    """
    merged = dict(base)

    for override in overrides:
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = deep_merge(current, value)
            else:
                merged[key] = value

    return merged


def _as_model(value, model_cls):
    if value is None or (isinstance(value, dict) and not value):
        return model_cls()
    if isinstance(value, model_cls):
        return value
    return model_cls.model_validate(value)


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Resolve the runtime configuration from param, user and CLI configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert defaults. ``None`` uses ``ParamConfig()``.
    user_cfg : dict or UserConfig, optional
        User overrides (flat aliases or nested sections).
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration.

    Raises
    ------
    ValidationError
        If any layer, or the merged result, fails Pydantic validation.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(FILL_VALUE=0))
    >>> config.summary.fill_value
    0
    """
    param = _as_model(param_cfg, ParamConfig)
    user = _as_model(user_cfg, UserConfig)
    cli = _as_model(cli_cfg, CLIConfig)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )

    return InternalConfig.model_validate(merged)


def default_config() -> InternalConfig:
    """Expert defaults resolved without any overrides."""
    return resolve_config(ParamConfig())

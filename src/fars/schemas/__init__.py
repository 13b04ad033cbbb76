"""Pydantic configuration schemas for FARS.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
default_config : function
    Expert defaults as an InternalConfig
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from fars.schemas.resolve import resolve_config, default_config
from fars.schemas.internal import InternalConfig
from fars.schemas.param import ParamConfig
from fars.schemas.user import UserConfig
from fars.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'default_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]

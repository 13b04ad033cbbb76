"""Base Pydantic model with strict defaults for FARS configs.

All FARS config schemas inherit from this base so parameter, user, CLI and
internal configs validate the same way.
"""

from pydantic import BaseModel, ConfigDict


class FarsBaseModel(BaseModel):
    """Base model for all FARS configuration schemas.

    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )

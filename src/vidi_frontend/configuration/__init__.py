"""Configuration – shipped table overrides."""
from vidi_frontend.configuration.overrides import (
    DEFAULT_OVERRIDES,
    FE_USERS_OVERRIDE,
    apply_default_overrides,
)

__all__ = ["DEFAULT_OVERRIDES", "FE_USERS_OVERRIDE", "apply_default_overrides"]

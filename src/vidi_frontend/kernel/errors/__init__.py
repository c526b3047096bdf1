"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── NotFoundError
    │   └── InvalidKeyError
    └── ApplicationError     (application.py)
        └── ConfigError      (config/validation)
"""

from vidi_frontend.kernel.errors.application import ApplicationError
from vidi_frontend.kernel.errors.base import BaseError
from vidi_frontend.kernel.errors.domain import (
    DomainError,
    InvalidKeyError,
    NotFoundError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidKeyError",
    "NotFoundError",
]

"""Kernel – framework-agnostic building blocks."""

from vidi_frontend.kernel.errors import (
    ApplicationError,
    BaseError,
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

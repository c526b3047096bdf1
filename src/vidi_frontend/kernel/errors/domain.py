"""Domain errors — lookups against records and table configuration."""

from __future__ import annotations

from typing import Any

from vidi_frontend.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain lookup or rule fails."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested record does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class InvalidKeyError(DomainError):
    """A key was looked up in a configuration mapping that does not hold it.

    Raised for unknown fields of a table and unknown facets of a grid.
    """

    default_code = "invalid_key"

    def __init__(self, key: str, container: str, **kwargs: Any) -> None:
        super().__init__(f"Key '{key}' does not exist in {container}", **kwargs)
        self.key = key
        self.container = container


__all__ = [
    "DomainError",
    "InvalidKeyError",
    "NotFoundError",
]

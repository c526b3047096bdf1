"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from vidi_frontend.config import ConfigError, MissingRequiredSettingError
from vidi_frontend.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidKeyError,
    NotFoundError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        assert err.__cause__ is cause
        assert "original" in err.to_dict()["cause"]

    def test_str_is_json(self) -> None:
        assert json.loads(str(BaseError("m")))["message"] == "m"

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    def test_not_found(self) -> None:
        err = NotFoundError("Selection", 4)
        assert isinstance(err, DomainError)
        assert err.message == "Selection '4' not found"
        assert err.code == "not_found"

    def test_not_found_without_identifier(self) -> None:
        assert NotFoundError("Selection").message == "Selection not found"

    def test_invalid_key(self) -> None:
        err = InvalidKeyError("email", "the facets of table 'fe_users'")
        assert isinstance(err, DomainError)
        assert err.key == "email"
        assert err.code == "invalid_key"

    def test_config_errors_are_application_errors(self) -> None:
        err = MissingRequiredSettingError("selection")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.setting_name == "selection"

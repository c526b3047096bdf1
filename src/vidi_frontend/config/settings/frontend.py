"""Config settings – FrontendSettings for the content element."""
from __future__ import annotations

import dataclasses
import logging

from vidi_frontend.config.settings.base import Settings
from vidi_frontend.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class FrontendSettings(Settings):
    """Settings of one front-end grid instance.

    ``additional_equals`` holds the static constraints, e.g.
    ``"status=active, title like foo"``. ``selection`` is the uid of a saved
    selection whose query is applied on every request (``0`` disables it).
    """

    _prefix: dataclasses.ClassVar[str] = "VIDI_FRONTEND"

    additional_equals: str = ""
    selection: int = 0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.selection < 0:
            raise InvalidSettingValueError("selection", self.selection, "must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["FrontendSettings"]

"""Mass action – result of an action run over the grid's records."""
from __future__ import annotations

from typing import Protocol


class ResultAction(Protocol):
    def get_output(self) -> str: ...
    def get_headers(self) -> dict[str, str]: ...


class GenericResultAction:
    """Plain output plus the HTTP headers to send with it."""

    def __init__(self) -> None:
        self._output = ""
        self._headers: dict[str, str] = {}

    def get_output(self) -> str:
        return self._output

    def get_headers(self) -> dict[str, str]:
        return dict(self._headers)

    def set_output(self, output: str) -> GenericResultAction:
        self._output = output
        return self

    def set_headers(self, headers: dict[str, str]) -> GenericResultAction:
        self._headers = dict(headers)
        return self


__all__ = ["GenericResultAction", "ResultAction"]

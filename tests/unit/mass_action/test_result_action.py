"""Unit tests for GenericResultAction."""

from __future__ import annotations

from vidi_frontend.mass_action import GenericResultAction


class TestGenericResultAction:
    def test_defaults(self) -> None:
        action = GenericResultAction()
        assert action.get_output() == ""
        assert action.get_headers() == {}

    def test_fluent_setters(self) -> None:
        action = GenericResultAction().set_output("a;b").set_headers({"Content-Type": "text/csv"})
        assert action.get_output() == "a;b"
        assert action.get_headers() == {"Content-Type": "text/csv"}

    def test_headers_are_copied(self) -> None:
        headers = {"X": "1"}
        action = GenericResultAction().set_headers(headers)
        headers["Y"] = "2"
        action.get_headers()["Z"] = "3"
        assert action.get_headers() == {"X": "1"}

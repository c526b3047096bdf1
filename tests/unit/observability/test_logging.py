"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from vidi_frontend.config.settings import FrontendSettings
from vidi_frontend.observability.logging import JsonLoggerFactory, configure_logging, get_logger
from vidi_frontend.persistence import MatcherFactory
from vidi_frontend.tca import TcaRegistry


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1


class TestConfigureLogging:
    def test_uses_settings_log_level(self, restore_logging: None) -> None:
        configure_logging(FrontendSettings(log_level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_info(self, restore_logging: None) -> None:
        configure_logging(FrontendSettings())
        assert logging.getLogger().level == logging.INFO


class TestGetLogger:
    def test_returns_usable_logger(self) -> None:
        log = get_logger("test.module")
        assert hasattr(log, "info")
        assert hasattr(log, "debug")

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test.module", data_type="fe_users").info("hello")
        assert logs == [{"data_type": "fe_users", "event": "hello", "log_level": "info"}]


class TestMatcherFactoryLogging:
    def test_build_emits_matcher_built(self) -> None:
        registry = TcaRegistry({"t": {"columns": {"a": {"config": {"type": "input"}}}}})
        factory = MatcherFactory(FrontendSettings(), registry)
        with capture_logs() as logs:
            factory.build('[{"a": "x"}, {"b": "y"}]', None, "junk", "t")
        events = [entry["event"] for entry in logs]
        assert events == ["static_constraint_skipped", "query_fragment_dropped", "matcher_built"]
        assert logs[-1]["constraints"] == 1

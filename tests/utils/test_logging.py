"""Tests for logging helpers."""

import logging

from fluent_validator.utils.logging import format_context, get_logger, setup_logging


class TestGetLogger:
    def test_root_logger_name(self):
        logger = get_logger()
        assert logger is not None

    def test_names_are_namespaced(self, monkeypatch):
        names = []
        monkeypatch.setattr(
            "fluent_validator.utils.logging.structlog.get_logger",
            lambda name: names.append(name),
        )

        get_logger("cli")
        get_logger("fluent_validator.validation")
        get_logger()

        assert names == [
            "fluent_validator.cli",
            "fluent_validator.validation",
            "fluent_validator",
        ]


class TestFormatContext:
    def test_context_appended_to_event(self):
        event_dict = {"event": "Validated value", "validator": "string", "level": "info"}

        result = format_context(None, "info", event_dict)
        assert result["event"] == "Validated value [validator=string]"

    def test_no_context_leaves_event_unchanged(self):
        result = format_context(None, "info", {"event": "plain", "level": "info"})
        assert result["event"] == "plain"


class TestSetupLogging:
    def test_namespace_level_follows_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        setup_logging()

        assert logging.getLogger("fluent_validator").level == logging.DEBUG

    def test_third_party_loggers_quieted(self, monkeypatch):
        monkeypatch.delenv("DEBUG_ALL", raising=False)
        logging.getLogger("some.library").setLevel(logging.DEBUG)

        setup_logging()

        assert logging.getLogger("some.library").level == logging.WARNING

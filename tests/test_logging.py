"""Tests for the Rich console logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from core.logging import ThirdPartyPrefixFilter, build_console_handler, configure_logging


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


class TestPrefixFilter:
    def test_project_loggers_have_no_prefix(self) -> None:
        record = _record("adapters.users_api")
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == ""

    def test_third_party_loggers_are_tagged(self) -> None:
        record = _record("httpx._client")
        ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == "[httpx] "

    def test_project_lines_have_no_leading_space(self) -> None:
        handler = build_console_handler(logging.INFO)
        record = _record("core.config")
        handler.filter(record)
        assert handler.formatter.format(record) == "msg"

    def test_third_party_lines_keep_one_separator(self) -> None:
        handler = build_console_handler(logging.INFO)
        record = _record("httpx")
        handler.filter(record)
        assert handler.formatter.format(record) == "[httpx] msg"


class TestConfigureLogging:
    def test_single_handler_after_repeated_calls(self, restore_root_logging) -> None:
        configure_logging("INFO")
        configure_logging("WARNING")
        rich_handlers = [h for h in restore_root_logging.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert rich_handlers[0].level == logging.WARNING

    def test_debug_mode(self, restore_root_logging) -> None:
        handler = configure_logging("INFO", debug=True)
        assert handler.level == logging.DEBUG
        assert restore_root_logging.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logging) -> None:
        handler = configure_logging("CHATTY")
        assert handler.level == logging.INFO

"""Tests for the message taxonomy, formatting and logging bridge."""

import io
import logging

import pytest
from rich.console import Console

from logshelf.message import (
    CategoryPrinter,
    LogCategory,
    LogInfo,
    LogLevel,
    StoreHandler,
    default_format,
    fetch_log_entries,
    format_message,
    install_entry_buffer,
    install_store_handler,
    log,
    set_formatter,
    set_output_hook,
)
from logshelf.message import bridge
from logshelf.message.category import subsystem
from logshelf.message.level import NOTICE


@pytest.fixture(autouse=True)
def reset_hooks():
    yield
    set_formatter(None)
    set_output_hook(None)


class TestLogLevel:
    def test_emoji(self):
        assert LogLevel.ERROR.emoji == "❌"
        assert LogLevel.DEBUG.emoji == "🛠️"

    def test_values(self):
        assert [level.value for level in LogLevel] == ["Debug", "Info", "Notice", "Error", "Fault"]

    def test_logging_levels(self):
        assert LogLevel.NOTICE.logging_level == NOTICE
        assert LogLevel.FAULT.logging_level == logging.CRITICAL

    @pytest.mark.parametrize(
        "levelno, expected",
        [
            (logging.DEBUG, LogLevel.DEBUG),
            (logging.INFO, LogLevel.INFO),
            (NOTICE, LogLevel.NOTICE),
            (logging.WARNING, LogLevel.NOTICE),
            (logging.ERROR, LogLevel.ERROR),
            (logging.CRITICAL, LogLevel.FAULT),
            (5, LogLevel.DEBUG),
        ],
    )
    def test_from_logging_level(self, levelno, expected):
        assert LogLevel.from_logging_level(levelno) == expected


class TestLogCategory:
    def test_builtins(self):
        assert LogCategory.NETWORK.name == "Network"
        assert LogCategory.UI == LogCategory("UI")

    def test_custom(self):
        assert LogCategory.custom("Billing").name == "Billing"

    def test_logger_name(self):
        assert LogCategory.IO.logger.name == "logshelf.IO"

    def test_printer(self):
        assert LogCategory.CORE.printer.category == LogCategory.CORE


class TestLogInfo:
    def test_capture_caller_location(self):
        info = LogInfo.capture(LogCategory.TEST, LogLevel.INFO, ["a", 1])
        assert info.function == "test_capture_caller_location"
        assert info.file_name == "test_message"
        assert info.message == "a, 1"
        assert info.line > 0

    def test_build(self):
        info = LogInfo.build(LogCategory.IO, LogLevel.ERROR, ["x"], file="/src/app/store.py", line=7)
        assert info.file_name == "store"
        assert info.timestamp


class TestFormat:
    def test_default_format(self):
        info = LogInfo.build(LogCategory.NETWORK, LogLevel.ERROR, ["[API] error"], file="client.py", line=42)
        assert default_format(info) == "❌ [Network] client・42 -- [API] error"

    def test_custom_formatter(self):
        set_formatter(lambda info: f"{info.level.value}: {info.message}")
        info = LogInfo.build(LogCategory.UI, LogLevel.NOTICE, ["saved"])
        assert format_message(info) == "Notice: saved"

    def test_reset_formatter(self):
        set_formatter(lambda info: "custom")
        set_formatter(None)
        info = LogInfo.build(LogCategory.UI, LogLevel.INFO, ["x"], file="a.py", line=1)
        assert format_message(info) == default_format(info)


class TestCategoryPrinter:
    def _printer(self):
        buf = io.StringIO()
        return CategoryPrinter(LogCategory.NETWORK, Console(file=buf, width=500)), buf

    def test_prints_formatted_line(self):
        printer, buf = self._printer()
        printer.error("timeout", 3)
        out = buf.getvalue()
        assert "[Network] test_message・" in out
        assert "-- timeout, 3" in out
        assert out.startswith("❌")

    def test_all_levels(self):
        printer, buf = self._printer()
        printer.info("i")
        printer.notice("n")
        printer.fault("f")
        assert buf.getvalue().count("\n") == 3


class TestBridge:
    def test_log_forwards_to_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="logshelf")
        line = log(LogCategory.NETWORK, LogLevel.ERROR, "[API] error")
        assert line.startswith("❌ [Network] test_message・")
        record = caplog.records[-1]
        assert record.name == "logshelf.Network"
        assert record.levelno == logging.ERROR
        assert record.getMessage() == line
        assert record.funcName == "test_log_forwards_to_logging"

    def test_output_hook(self):
        seen = []
        set_output_hook(seen.append)
        log(LogCategory.CORE, LogLevel.INFO, "state changed")
        assert len(seen) == 1
        assert seen[0].message == "state changed"
        assert seen[0].function == "test_output_hook"

    def test_store_handler_persists_records(self, make_store):
        store = make_store()
        logger = logging.getLogger("logshelf.tests.handler")
        logger.propagate = False
        handler = StoreHandler(store)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            logger.warning("disk %s", "full")
            store.flush(5)
        finally:
            logger.removeHandler(handler)

        text = store.read_tail(0)
        assert text.startswith("☑️ [tests.handler] test_message・")
        assert text.endswith("-- disk full\n")

    def test_store_handler_keeps_bridge_lines(self, make_store):
        store = make_store()
        handler = install_store_handler(store)
        try:
            line = log(LogCategory.IO, LogLevel.FAULT, "crash")
            store.flush(5)
        finally:
            logging.getLogger("logshelf").removeHandler(handler)
        assert store.read_tail(0) == line + "\n"

    def test_store_handler_includes_exception(self, make_store):
        store = make_store()
        logger = logging.getLogger("logshelf.tests.exc")
        logger.propagate = False
        handler = StoreHandler(store)
        logger.addHandler(handler)
        try:
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.exception("failed")
            store.flush(5)
        finally:
            logger.removeHandler(handler)

        lines = []
        store.read_stream(0, lines.append)
        assert lines[0].endswith("-- failed")
        assert "RuntimeError: boom" in lines[-1]


@pytest.fixture
def entry_buffer_reset():
    logger = logging.getLogger(subsystem())
    level = logger.level
    yield
    if bridge._entry_buffer is not None:
        logger.removeHandler(bridge._entry_buffer)
        bridge._entry_buffer = None
    logger.setLevel(level)


@pytest.mark.usefixtures("entry_buffer_reset")
class TestEntryBuffer:
    def test_empty_before_install(self):
        log(LogCategory.CORE, LogLevel.INFO, "not captured")
        assert fetch_log_entries() == []

    def test_reads_back_logged_entries(self):
        install_entry_buffer()
        log(LogCategory.CORE, LogLevel.INFO, "first")
        log(LogCategory.NETWORK, LogLevel.ERROR, "second")

        entries = fetch_log_entries()
        assert [e.message for e in entries] == ["first", "second"]
        assert entries[1].level == LogLevel.ERROR
        assert entries[0].function == "test_reads_back_logged_entries"

    def test_filters_by_category(self):
        install_entry_buffer()
        log(LogCategory.CORE, LogLevel.INFO, "core")
        log(LogCategory.NETWORK, LogLevel.DEBUG, "net")

        entries = fetch_log_entries(LogCategory.NETWORK)
        assert [e.message for e in entries] == ["net"]

    def test_captures_plain_logging_records(self):
        install_entry_buffer()
        logging.getLogger(f"{subsystem()}.Storage").warning("disk %s", "full")

        (entry,) = fetch_log_entries(LogCategory.custom("Storage"))
        assert entry.message == "disk full"
        assert entry.level == LogLevel.NOTICE

    def test_keeps_latest_entries(self):
        install_entry_buffer(capacity=3)
        for i in range(5):
            log(LogCategory.TEST, LogLevel.DEBUG, f"m{i}")
        assert [e.message for e in fetch_log_entries()] == ["m2", "m3", "m4"]

    def test_installs_once(self):
        first = install_entry_buffer()
        assert install_entry_buffer() is first
        log(LogCategory.UI, LogLevel.INFO, "once")
        assert len(fetch_log_entries()) == 1

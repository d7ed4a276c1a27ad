"""Tests for structlog configuration."""

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from pos_orders import logging as pos_logging
from pos_orders.config import settings


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    sql_logger = logging.getLogger("sqlalchemy.engine")
    sql_level = sql_logger.level
    monkeypatch.setattr(settings, "log_level", "info")
    monkeypatch.setattr(settings, "debug", False)
    yield
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    sql_logger.setLevel(sql_level)


def _root_formatter() -> structlog.stdlib.ProcessorFormatter:
    (handler,) = logging.getLogger().handlers
    formatter = handler.formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    return formatter


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_output_by_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "log_json", False)
        pos_logging.configure_logging()

        renderers = _root_formatter().processors
        assert any(isinstance(p, structlog.dev.ConsoleRenderer) for p in renderers)
        assert not any(isinstance(p, structlog.processors.JSONRenderer) for p in renderers)

    def test_json_output(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
        monkeypatch.setattr(settings, "log_json", True)
        pos_logging.configure_logging()

        structlog.get_logger("pos_orders.tests").info("Assigned order number", order_id=7, order_number=3)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Assigned order number"
        assert record["order_id"] == 7
        assert record["order_number"] == 3
        assert record["level"] == "info"
        assert record["logger"] == "pos_orders.tests"
        assert record["timestamp"].endswith("Z")

    def test_stdlib_records_share_the_format(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        monkeypatch.setattr(settings, "log_json", True)
        pos_logging.configure_logging()

        logging.getLogger("uvicorn.error").warning("Shutting down")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Shutting down"
        assert record["level"] == "warning"
        assert record["logger"] == "uvicorn.error"

    def test_sql_echo_follows_debug(self, monkeypatch: pytest.MonkeyPatch):
        pos_logging.configure_logging()
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

        monkeypatch.setattr(settings, "debug", True)
        pos_logging.configure_logging()
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

"""Tests for settings and logging setup."""

import json
import logging
import sys

import pytest

from components.core.config import Settings
from components.core.logging import JsonFormatter, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_mysql_urls_from_parts(self) -> None:
        config = Settings(
            DB_USER="shop",
            DB_PASSWORD="secret",
            DB_HOST="db",
            DB_PORT=3307,
            DB_NAME="ledger",
        )

        assert config.async_db_url == "mysql+aiomysql://shop:secret@db:3307/ledger"
        assert config.sync_db_url == "mysql+pymysql://shop:secret@db:3307/ledger"

    def test_full_url_wins(self) -> None:
        config = Settings(DB_URL="mysql+aiomysql://u:p@host:3306/db")

        assert config.async_db_url == "mysql+aiomysql://u:p@host:3306/db"
        assert config.sync_db_url == "mysql+pymysql://u:p@host:3306/db"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DB_PORT", "3310")

        config = Settings()

        assert config.LOG_LEVEL == "DEBUG"
        assert config.DB_PORT == 3310


class TestLogging:
    """Tests for setup_logging and JsonFormatter."""

    def setup_method(self) -> None:
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def teardown_method(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_setup_logging_installs_single_handler(self) -> None:
        setup_logging("DEBUG")
        setup_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("VERBOSE")

        assert logging.getLogger().level == logging.INFO

    def test_json_format_selected(self) -> None:
        setup_logging("INFO", format_type="json")

        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_json_formatter_output(self) -> None:
        record = logging.LogRecord(
            name="components.ledger",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Customer %s not found",
            args=(7,),
            exc_info=None,
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "components.ledger"
        assert data["message"] == "Customer 7 not found"
        assert "timestamp" in data

    def test_json_formatter_includes_exception(self) -> None:
        try:
            raise RuntimeError("disk full")
        except RuntimeError:
            record = logging.LogRecord(
                name="components.ledger.service",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="Failed to add transaction",
                args=(),
                exc_info=sys.exc_info(),
            )

        data = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: disk full" in data["exception"]

    def test_library_loggers_quieted(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

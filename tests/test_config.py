"""
Tests for settings and logging configuration.
"""
import json
import logging
from pathlib import Path

from tasklist.config.logging import (
    ColoredFormatter,
    JSONFormatter,
    get_logger,
    request_id_var,
    setup_logging,
)
from tasklist.config.settings import Settings


def make_record(msg="hello", level=logging.INFO, **attrs):
    record = logging.LogRecord("tasklist.test", level, __file__, 10, msg, (), None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("TASKS_STORE", "DATABASE_PATH", "APP_ENV", "API_PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.store.backend == "memory"
        assert settings.database.path == Path("data/tasks.sqlite3")
        assert settings.server.port == 8000
        assert settings.server.cors_origins == ["*"]
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TASKS_STORE", "SQLite")
        monkeypatch.setenv("DATABASE_PATH", "/tmp/t.sqlite3")
        monkeypatch.setenv("APP_ENV", "dev")
        monkeypatch.setenv("API_PORT", "9001")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        settings = Settings()

        assert settings.store.backend == "sqlite"
        assert settings.database.path == Path("/tmp/t.sqlite3")
        assert settings.server.port == 9001
        assert settings.server.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.debug is True


class TestJSONFormatter:
    """Structured log output."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record("Task created: id=%d" % 3)))

        assert data["level"] == "INFO"
        assert data["logger"] == "tasklist.test"
        assert data["message"] == "Task created: id=3"
        assert "request_id" not in data

    def test_includes_request_id(self):
        token = request_id_var.set("abcd1234")
        try:
            data = json.loads(JSONFormatter().format(make_record()))
        finally:
            request_id_var.reset(token)

        assert data["request_id"] == "abcd1234"

    def test_includes_extra_data(self):
        record = make_record(extra_data={"status_code": 404})

        data = json.loads(JSONFormatter().format(record))

        assert data["data"] == {"status_code": 404}


class TestColoredFormatter:

    def test_does_not_mutate_record(self):
        record = make_record(level=logging.WARNING)

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "WARNING" in output
        assert record.levelname == "WARNING"


class TestSetupLogging:

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "tasklist.log"
        logger = setup_logging(log_level="DEBUG", json_logs=True, log_file=str(log_file))
        try:
            get_logger("test").info("written to file")
            for handler in logger.handlers:
                handler.flush()

            line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
            assert json.loads(line)["message"] == "written to file"
        finally:
            for handler in logger.handlers:
                handler.close()
            setup_logging()

    def test_get_logger_namespace(self):
        adapter = get_logger("api.tasks", component="router")

        assert adapter.logger.name == "tasklist.api.tasks"
        assert adapter.extra == {"component": "router"}

import logging
from pathlib import Path

import pytest

from samvada.log_setup import DEFAULT_LOG_FILE, log_path_for, setup_logging


@pytest.fixture
def restore_root_logger():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


class TestLogPath:
    def test_next_to_chat_file(self) -> None:
        assert log_path_for("notes/chat.md") == Path("notes/chat.log")

    def test_default_without_file(self) -> None:
        assert log_path_for(None) == Path(DEFAULT_LOG_FILE)


class TestSetupLogging:
    def test_writes_records_to_file(self, tmp_path: Path, restore_root_logger) -> None:
        chat = tmp_path / "chat.md"

        log_path = setup_logging(chat)
        logging.getLogger("samvada.test").info("hello %s", "log")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_path == tmp_path / "chat.log"
        content = log_path.read_text(encoding="utf-8")
        assert "INFO     samvada.test: hello log" in content

    def test_log_file_truncated_per_run(self, tmp_path: Path, restore_root_logger) -> None:
        chat = tmp_path / "chat.md"
        (tmp_path / "chat.log").write_text("old run\n", encoding="utf-8")

        log_path = setup_logging(chat)

        assert "old run" not in log_path.read_text(encoding="utf-8")

    def test_transport_loggers_quietened(self, tmp_path: Path, restore_root_logger) -> None:
        setup_logging(tmp_path / "chat.md")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("openai").level == logging.WARNING

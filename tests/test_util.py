import logging

import pytest

from util import setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def no_log_level(monkeypatch):
    """Start without LOG_LEVEL and drop whatever .env loading sets."""
    monkeypatch.setenv("LOG_LEVEL", "")
    monkeypatch.delenv("LOG_LEVEL")


def test_log_level_from_dotenv(tmp_path, monkeypatch, no_log_level, restore_root_logger):
    (tmp_path / ".env").write_text("LOG_LEVEL=WARNING\n")
    monkeypatch.chdir(tmp_path)

    setup_logging("test", log_file=str(tmp_path / "war_game.log"))

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("loggers.game_logger").level == logging.WARNING


def test_environment_wins_over_dotenv(tmp_path, monkeypatch, restore_root_logger):
    (tmp_path / ".env").write_text("LOG_LEVEL=WARNING\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    setup_logging("test", log_file=str(tmp_path / "war_game.log"))

    assert logging.getLogger().level == logging.DEBUG


def test_default_level_without_dotenv(tmp_path, monkeypatch, no_log_level, restore_root_logger):
    monkeypatch.chdir(tmp_path)

    setup_logging("test", log_file=str(tmp_path / "war_game.log"))

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("urllib3").level == logging.WARNING

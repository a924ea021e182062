import logging

import pytest

from live_scoreboard import Scoreboard, ScoreboardConfig

CONFIG_ENV_VARS = ("BOARD_NAME", "SHOW_HEADER", "SUMMARY_MAX_ENTRIES", "LOG_LEVEL", "CONFIG_PATH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Keep the developer's shell settings out of config-dependent tests
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_package_log_level():
    # main() and setup_logging() change the package logger level
    package_logger = logging.getLogger("live_scoreboard")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture()
def scoreboard():
    return Scoreboard()


@pytest.fixture()
def config():
    return ScoreboardConfig()

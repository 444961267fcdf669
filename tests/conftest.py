import logging

import pytest

from paginator.core.logging import shutdown_logging

CONFIG_ENV_VARS = (
    "CONFIG",
    "DEFAULT_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "LOG_FILE_PATH",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch, tmp_path):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Settings read .env from the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reset_logging():
    yield
    shutdown_logging()
    logging.getLogger("paginator").setLevel(logging.NOTSET)

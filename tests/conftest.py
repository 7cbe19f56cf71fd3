import logging
from typing import Iterator

import pytest
from loguru import logger

from errorx.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ERRORX_* variables of the outer environment."""
    for name in (
        "ERRORX_CALLER_SENTINEL",
        "ERRORX_RENDER_INDENT",
        "ERRORX_LOG_LEVEL",
        "ERRORX_TRACEBACK_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route errorx loguru records into *caplog*."""
    caplog.set_level(logging.DEBUG)
    logger.enable("errorx")
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)
    logger.disable("errorx")

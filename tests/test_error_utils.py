import asyncio
import inspect

import pytest
from loguru import logger

from errorx.error_utils import log_and_wrap, wrap_exceptions
from errorx.generic import GenericError


def test_log_and_wrap_raises_wrapped(loguru_caplog: pytest.LogCaptureFixture) -> None:
    cause = RuntimeError("disk boom")
    with pytest.raises(GenericError) as info:
        log_and_wrap(cause, GenericError, 500, attrs={"path": "/var/x"})
    line = inspect.currentframe().f_lineno - 1
    err = info.value
    assert err.code == 500
    assert err.internal_error is cause
    assert err.__cause__ is cause
    assert err.attr_string("path") == "/var/x"
    assert err.method == "test_log_and_wrap_raises_wrapped"
    assert err.line == line
    assert "disk boom" in loguru_caplog.text


def test_log_and_wrap_binds_code(loguru_caplog: pytest.LogCaptureFixture) -> None:
    extras: list[dict] = []
    sink_id = logger.add(lambda msg: extras.append(msg.record["extra"]), level="DEBUG")
    try:
        with pytest.raises(GenericError):
            log_and_wrap(
                ValueError("x"), GenericError, 42, attrs={"code": "ignored", "path": "/x"}
            )
    finally:
        logger.remove(sink_id)
    assert loguru_caplog.records[-1].levelname == "ERROR"
    assert extras[-1]["code"] == 42
    assert extras[-1]["path"] == "/x"


def test_log_level_from_settings(
    loguru_caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ERRORX_LOG_LEVEL", "warning")
    with pytest.raises(GenericError):
        log_and_wrap(ValueError("soft"), GenericError, 1)
    assert loguru_caplog.records[-1].levelname == "WARNING"


def test_wrap_exceptions_sync(loguru_caplog: pytest.LogCaptureFixture) -> None:
    @wrap_exceptions(GenericError, 300)
    def explode() -> None:
        raise KeyError("missing")

    with pytest.raises(GenericError) as info:
        explode()
    assert info.value.code == 300
    assert isinstance(info.value.internal_error, KeyError)
    assert info.value.method == "test_wrap_exceptions_sync"
    assert "missing" in loguru_caplog.text


def test_wrap_exceptions_passes_results_and_own_errors() -> None:
    own = GenericError.new(7)

    @wrap_exceptions(GenericError, 300)
    def ok(value: int) -> int:
        return value * 2

    @wrap_exceptions(GenericError, 300)
    def already_wrapped() -> None:
        raise own

    assert ok(4) == 8
    assert ok.__name__ == "ok"
    with pytest.raises(GenericError) as info:
        already_wrapped()
    assert info.value is own


@pytest.mark.asyncio
async def test_wrap_exceptions_async(loguru_caplog: pytest.LogCaptureFixture) -> None:
    @wrap_exceptions(GenericError, 400)
    async def explode() -> None:
        await asyncio.sleep(0)
        raise ValueError("async boom")

    with pytest.raises(GenericError) as info:
        await explode()
    assert info.value.code == 400
    assert str(info.value.internal_error) == "async boom"
    assert "async boom" in loguru_caplog.text


@pytest.mark.asyncio
async def test_wrap_exceptions_async_cancel_passes() -> None:
    @wrap_exceptions(GenericError, 400)
    async def cancelled() -> None:
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await cancelled()

from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable, Mapping
from typing import Any, NoReturn, ParamSpec, TypeVar

from loguru import logger

from errorx.base import BaseError
from errorx.config import get_settings

P = ParamSpec("P")
R = TypeVar("R")


def _format_tail(exc: BaseException, *, limit: int) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def _log(exc: BaseException, code: int, attrs: Mapping[str, Any] | None) -> None:
    settings = get_settings()
    formatted_tb = _format_tail(exc, limit=settings.traceback_limit)
    logger.bind(**{**(attrs or {}), "code": code}).opt(exception=exc).log(
        settings.log_level, "{}", formatted_tb
    )


def log_and_wrap(
    exc: BaseException,
    error_cls: type[BaseError],
    code: int,
    attrs: Mapping[str, Any] | None = None,
) -> NoReturn:
    """Log *exc* with a short traceback and raise it wrapped in *error_cls*.

    The raised error records the caller of this function and carries *attrs*.
    """
    _log(exc, code, attrs)
    wrapped = error_cls.new_with_caller(code, exc, skip=1)
    if attrs:
        wrapped.with_attrs(attrs)
    raise wrapped from exc


def wrap_exceptions(
    error_cls: type[BaseError], code: int
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log short traceback and wrap errors into *error_cls*.

    Errors that already are *error_cls* instances propagate untouched.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except (asyncio.CancelledError, error_cls):
                    raise
                except Exception as exc:
                    _log(exc, code, None)
                    raise error_cls.new_with_caller(code, exc, skip=1) from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except error_cls:
                raise
            except Exception as exc:
                _log(exc, code, None)
                raise error_cls.new_with_caller(code, exc, skip=1) from exc

        return sync_wrapper  # type: ignore[return-value]

    return decorator

"""Call-stack introspection used to record where an error was created."""

from __future__ import annotations

import inspect
from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict

from errorx.config import get_settings


class CallerStatus(str, Enum):
    NOT_REQUESTED = "not_requested"
    UNAVAILABLE = "unavailable"
    CAPTURED = "captured"


class Caller(BaseModel):
    """Location of the code that constructed an error."""

    file: str = ""
    line: int = 0
    method: str = ""
    status: CallerStatus = CallerStatus.NOT_REQUESTED

    model_config = ConfigDict(frozen=True)

    @classmethod
    def unavailable(cls) -> Caller:
        sentinel = get_settings().caller_sentinel
        return cls(
            file=sentinel, line=0, method=sentinel, status=CallerStatus.UNAVAILABLE
        )


NO_CALLER = Caller()


def capture_caller(skip: int = 0) -> Caller:
    """Return the location *skip* frames above the function calling this one.

    With ``skip=0`` the result describes the caller of the function that
    invoked :func:`capture_caller`. A missing frame yields
    :meth:`Caller.unavailable` instead of raising.
    """

    frame = inspect.currentframe()
    try:
        # this function + the function asking for its caller
        for _ in range(max(skip, 0) + 2):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            logger.debug("Caller lookup failed: no frame at depth {}", skip)
            return Caller.unavailable()
        code = frame.f_code
        return Caller(
            file=code.co_filename,
            line=frame.f_lineno,
            method=code.co_qualname,
            status=CallerStatus.CAPTURED,
        )
    finally:
        del frame

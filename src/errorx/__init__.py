"""Composable errors with codes, attributes, nested errors and caller info."""

from __future__ import annotations

from loguru import logger

from .base import BaseError, new_base_error, new_base_error_with_caller
from .caller import Caller, CallerStatus
from .config import Settings, get_settings
from .error_utils import log_and_wrap, wrap_exceptions
from .errors import (
    AttrError,
    AttrNotFoundError,
    AttrTypeMismatchError,
    ErrorxError,
    UnknownCauseError,
)
from .generic import GenericError, new_generic_error, new_generic_error_with_caller
from .protocols import Error
from .render import render_error

logger.disable("errorx")

__all__ = [
    "AttrError",
    "AttrNotFoundError",
    "AttrTypeMismatchError",
    "BaseError",
    "Caller",
    "CallerStatus",
    "Error",
    "ErrorxError",
    "GenericError",
    "Settings",
    "UnknownCauseError",
    "get_settings",
    "log_and_wrap",
    "new_base_error",
    "new_base_error_with_caller",
    "new_generic_error",
    "new_generic_error_with_caller",
    "render_error",
    "wrap_exceptions",
]

from __future__ import annotations

from typing_extensions import override

from errorx.base import BaseError
from errorx.render import render_error


class GenericError(BaseError):
    """General-purpose composable error with a full rendering."""

    @override
    def __str__(self) -> str:
        return render_error(self, "a generic error has occurred")


def new_generic_error(code: int, err: BaseException | None = None) -> GenericError:
    return GenericError.new(code, err)


def new_generic_error_with_caller(
    code: int, err: BaseException | None = None, skip: int = 0
) -> GenericError:
    return GenericError.new_with_caller(code, err, skip + 1)

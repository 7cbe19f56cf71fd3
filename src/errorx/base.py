from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any, Self

from errorx import attrs as kinds
from errorx.caller import NO_CALLER, Caller, CallerStatus, capture_caller
from errorx.errors import AttrNotFoundError, UnknownCauseError
from errorx.protocols import Error


class BaseError(Exception):
    """Base composable error carrying a code, attributes and nested errors.

    Domain errors subclass it and override ``__str__`` to render the code,
    attributes and nested errors in their own way; everything else comes
    from here.

    Instances are mutated in place by :meth:`with_attr`, :meth:`with_attrs`
    and :meth:`append` without any locking. Share an instance between
    threads only if nobody mutates it any more.
    """

    def __init__(
        self,
        code: int,
        err: BaseException | None = None,
        *,
        caller: Caller = NO_CALLER,
    ) -> None:
        if err is None:
            err = UnknownCauseError(code)
        else:
            self.__cause__ = err
        super().__init__(code, err)
        self._code = code
        self._err = err
        self._caller = caller
        self._attrs: dict[str, Any] = {}
        self._nested: list[Error] = []

    # -------- factories --------

    @classmethod
    def new(cls, code: int, err: BaseException | None = None) -> Self:
        """Return a new error without caller information."""
        return cls(code, err)

    @classmethod
    def new_with_caller(
        cls, code: int, err: BaseException | None = None, skip: int = 0
    ) -> Self:
        """Return a new error recording where it was created.

        With ``skip=0`` the location is the code calling this method. Helpers
        that build errors on behalf of their own caller pass ``skip=1``.
        """
        return cls(code, err, caller=capture_caller(skip))

    # -------- identity / caller --------

    @property
    def code(self) -> int:
        return self._code

    @property
    def internal_error(self) -> BaseException:
        """The wrapped cause; guaranteed never to be ``None``."""
        return self._err

    @property
    def file(self) -> str:
        return self._caller.file

    @property
    def line(self) -> int:
        return self._caller.line

    @property
    def method(self) -> str:
        return self._caller.method

    @property
    def caller_status(self) -> CallerStatus:
        return self._caller.status

    # -------- attributes --------

    @property
    def attrs(self) -> Mapping[str, Any]:
        """Read-only view of all attributes; empty if none were set."""
        return MappingProxyType(self._attrs)

    def attr(self, key: str) -> Any:
        try:
            return self._attrs[key]
        except KeyError:
            raise AttrNotFoundError(key) from None

    def attr_int(self, key: str) -> int:
        return kinds.INT.narrow(key, self.attr(key))

    def attr_int64(self, key: str) -> int:
        return kinds.INT64.narrow(key, self.attr(key))

    def attr_uint(self, key: str) -> int:
        return kinds.UINT.narrow(key, self.attr(key))

    def attr_uint64(self, key: str) -> int:
        return kinds.UINT64.narrow(key, self.attr(key))

    def attr_string(self, key: str) -> str:
        return kinds.STRING.narrow(key, self.attr(key))

    def attr_time(self, key: str) -> datetime:
        return kinds.TIME.narrow(key, self.attr(key))

    def attr_duration(self, key: str) -> timedelta:
        return kinds.DURATION.narrow(key, self.attr(key))

    def with_attr(self, key: str, value: Any) -> Self:
        self._attrs[key] = value
        return self

    def with_attrs(self, attrs: Mapping[str, Any]) -> Self:
        self._attrs.update(attrs)
        return self

    # -------- nested errors --------

    @property
    def nested_errors(self) -> tuple[Error, ...]:
        return tuple(self._nested)

    def append(self, *errs: Error | None) -> Self:
        """Append errors to the nested errors, skipping ``None`` entries."""
        for err in errs:
            if err is None:
                continue
            if not isinstance(err, Error):
                raise TypeError(
                    f"cannot nest {type(err).__name__!r}: not a composable error"
                )
            self._nested.append(err)
        return self

    def __str__(self) -> str:
        return f"error: {self._err}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, err={self._err!r})"


def new_base_error(code: int, err: BaseException | None = None) -> BaseError:
    return BaseError.new(code, err)


def new_base_error_with_caller(
    code: int, err: BaseException | None = None, skip: int = 0
) -> BaseError:
    return BaseError.new_with_caller(code, err, skip + 1)

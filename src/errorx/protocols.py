"""Capability interface shared by composable errors."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Error(Protocol):
    """An error carrying a code, attributes, nested errors and caller info."""

    @property
    def attrs(self) -> Mapping[str, Any]:
        """Additional attributes which may be used when logging the error."""
        ...  # pragma: no cover

    @property
    def code(self) -> int: ...  # pragma: no cover

    @property
    def file(self) -> str:
        """File where the error occurred if caller information is included."""
        ...  # pragma: no cover

    @property
    def internal_error(self) -> BaseException:
        """The wrapped cause; never ``None``."""
        ...  # pragma: no cover

    @property
    def line(self) -> int: ...  # pragma: no cover

    @property
    def method(self) -> str: ...  # pragma: no cover

    @property
    def nested_errors(self) -> Sequence[Error]: ...  # pragma: no cover

    def __str__(self) -> str: ...  # pragma: no cover

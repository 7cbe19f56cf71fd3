from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True, eq=False)
class ErrorxError(Exception):
    """Base error for failures raised by the library itself.

    Attributes:
        message: Human-readable message describing the error.
        code: Machine-readable code for monitoring/alerts.
        context: Structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(frozen=True, slots=True, eq=False)
class UnknownCauseError(ErrorxError):
    """Stands in for the cause of an error constructed without one."""

    error_code: int
    message: str = field(init=False)
    code: str = field(init=False, default="ERRORX_UNKNOWN_CAUSE")
    context: dict[str, int] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"an unknown error occurred (code={self.error_code})",
        )
        object.__setattr__(self, "context", {"code": self.error_code})


@dataclass(frozen=True, slots=True, eq=False)
class AttrError(ErrorxError):
    """Base error for attribute lookups."""


@dataclass(frozen=True, slots=True, eq=False)
class AttrNotFoundError(AttrError):
    key: str
    message: str = field(init=False)
    code: str = field(init=False, default="ERRORX_ATTR_NOT_FOUND")
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"{self.key}: attribute not found")
        object.__setattr__(self, "context", {"key": self.key})


@dataclass(frozen=True, slots=True, eq=False)
class AttrTypeMismatchError(AttrError):
    """Raised when a stored attribute cannot be narrowed to the requested type."""

    key: str
    target: str
    value: Any
    message: str = field(init=False)
    code: str = field(init=False, default="ERRORX_ATTR_TYPE_MISMATCH")
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"{self.key}: cannot convert attribute value to {self.target}",
        )
        object.__setattr__(
            self,
            "context",
            {
                "key": self.key,
                "target": self.target,
                "actual": type(self.value).__name__,
            },
        )

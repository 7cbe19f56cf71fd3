from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Annotated, Any, Final, Generic, TypeVar

from pydantic import Field, TypeAdapter, ValidationError

from errorx.errors import AttrTypeMismatchError

T = TypeVar("T")

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1


@dataclass(frozen=True, slots=True)
class AttrKind(Generic[T]):
    """Strict narrowing of an attribute value to one target type.

    Validation runs in pydantic strict mode, so no coercion happens:
    ``"1"`` is not an int, ``True`` is not an int, a ``date`` is not a
    ``datetime``. The adapter only checks the value; the stored object
    itself is returned, subclasses such as ``IntEnum`` members included.
    """

    target: str
    adapter: TypeAdapter[T]

    def narrow(self, key: str, value: Any) -> T:
        try:
            self.adapter.validate_python(value, strict=True)
        except ValidationError as exc:
            raise AttrTypeMismatchError(
                key=key, target=self.target, value=value
            ) from exc
        return value


INT: Final = AttrKind("an int", TypeAdapter(int))
INT64: Final = AttrKind(
    "an int64",
    TypeAdapter(Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]),
)
UINT: Final = AttrKind("an uint", TypeAdapter(Annotated[int, Field(ge=0)]))
UINT64: Final = AttrKind(
    "an uint64", TypeAdapter(Annotated[int, Field(ge=0, le=UINT64_MAX)])
)
STRING: Final = AttrKind("a string", TypeAdapter(str))
TIME: Final = AttrKind("datetime.datetime", TypeAdapter(datetime))
DURATION: Final = AttrKind("datetime.timedelta", TypeAdapter(timedelta))

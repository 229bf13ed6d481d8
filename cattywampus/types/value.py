"""Runtime values and their types.

Values are the distinct elements that can sit on the calculator stack. The set
of variants is closed: Int32, Float32 and Float64. Each variant has exactly one
Type tag, and the tags are only ever used to match values against function
signatures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Union

import numpy as np

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Type(Enum):
    """Zero-payload tag for one family of values."""

    ANY_INT32 = "i32"
    ANY_FLOAT32 = "f32"
    ANY_FLOAT64 = "f64"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self):
        return self.value


@dataclass(frozen=True, order=True)
class Int32:
    """A 32-bit signed integer."""

    payload: int

    type: ClassVar[Type] = Type.ANY_INT32
    dtype: ClassVar[Callable[..., np.generic]] = np.int32

    def __post_init__(self):
        if isinstance(self.payload, bool) or not isinstance(self.payload, (int, np.integer)):
            raise ValueError(f"Int32 payload must be an integer, got {self.payload!r}")
        if not INT32_MIN <= self.payload <= INT32_MAX:
            raise ValueError(f"{self.payload} does not fit in 32 bits")
        object.__setattr__(self, "payload", int(self.payload))

    def __str__(self):
        return str(self.payload)


@dataclass(frozen=True, order=True)
class Float32:
    """A single precision floating point number."""

    payload: float

    type: ClassVar[Type] = Type.ANY_FLOAT32
    dtype: ClassVar[Callable[..., np.generic]] = np.float32

    def __post_init__(self):
        # Round to the nearest representable single precision value.
        with np.errstate(over="ignore"):
            object.__setattr__(self, "payload", float(np.float32(self.payload)))

    def __str__(self):
        return str(np.float32(self.payload))


@dataclass(frozen=True, order=True)
class Float64:
    """A 64-bit floating point number."""

    payload: float

    type: ClassVar[Type] = Type.ANY_FLOAT64
    dtype: ClassVar[Callable[..., np.generic]] = np.float64

    def __post_init__(self):
        object.__setattr__(self, "payload", float(self.payload))

    def __str__(self):
        return repr(self.payload)


Value = Union[Int32, Float32, Float64]

VALUE_VARIANTS: tuple[type, ...] = (Int32, Float32, Float64)


def type_of(value: Value) -> Type:
    match value:
        case Int32():
            return Type.ANY_INT32
        case Float32():
            return Type.ANY_FLOAT32
        case Float64():
            return Type.ANY_FLOAT64
    raise TypeError(f"Not a calculator value: {value!r}")


def matches(value: Value, typ: Type) -> bool:
    """Return True iff `value` is of the variant tagged by `typ`."""
    match value:
        case Int32():
            return typ is Type.ANY_INT32
        case Float32():
            return typ is Type.ANY_FLOAT32
        case Float64():
            return typ is Type.ANY_FLOAT64
    return False


def type_label(value: Value) -> str:
    return type_of(value).label

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from cattywampus.types.function import Function
    from cattywampus.types.value import Type, Value


class CattywampusError(Exception):
    """ Base class for all cattywampus errors"""
    pass


class CattywampusSyntaxError(CattywampusError):
    """ Raised when a line of input cannot be read"""


class UnrecognizedToken(CattywampusSyntaxError):
    """ Raised when tokens are neither literals nor registered function names"""

    def __init__(self, tokens: Iterable[str]):
        self.tokens = list(tokens)
        super().__init__(f"Invalid token: {', '.join(self.tokens)}")


class MalformedSignature(CattywampusError):
    """ Raised when a registry entry declares an unsupported signature"""


class ApplyError(CattywampusError):
    """ Base class for errors raised while applying a function to the stack"""

    kind = "ApplyError"

    def __init__(self, function: Function, message: str | None = None):
        self.function = function
        super().__init__(message or f"{self.kind}: {function}")


class WrongArity(ApplyError):
    """ Raised when the stack holds fewer values than the function consumes"""

    kind = "WrongArity"

    def __init__(self, function: Function, height: int):
        self.height = height
        super().__init__(
            function,
            f"WrongArity: {function} needs {function.signature.arity} "
            f"argument(s), stack has {height}",
        )


class TypeMismatch(ApplyError):
    """ Raised when a value on the stack is not of the declared input type"""

    kind = "TypeMismatch"

    def __init__(self, function: Function, position: int, expected: Type, actual: Value):
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            function,
            f"TypeMismatch: {function} argument {position} expects "
            f"{expected.label}, got {actual!s} ({actual.type.label})",
        )


class BrokenCallee(ApplyError):
    """ Raised when an implementation does not honour its declared output type"""

    kind = "BrokenCallee"

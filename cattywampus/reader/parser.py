"""
  Line reader for the calculator.

- One line of input at a time, split on whitespace.
- Each token is classified on its own:

    - integer literal        -> Int32      e.g. 42, -7
    - float literal          -> Float64    e.g. 1.5, .5, 2e10, -3.
    - float literal + 'f'    -> Float32    e.g. 1.5f, 2e3f
    - registered name        -> Function   e.g. sin, inc
    - anything else          -> BadToken
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from cattywampus.registry import FunctionRegistry, intrinsic_registry
from cattywampus.types.function import Function
from cattywampus.types.value import Float32, Float64, Int32, Value

LITERAL_RE = re.compile(
    r"(?P<int>[+-]?\d+)"
    r"|(?P<float>[+-]?(?:(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+))"
    r"(?P<narrow>f)?"
)


@dataclass(frozen=True)
class LiteralToken:
    value: Value


@dataclass(frozen=True)
class FunctionToken:
    function: Function


@dataclass(frozen=True)
class BadToken:
    text: str


ParsedToken = Union[LiteralToken, FunctionToken, BadToken]


def find_tokens(line: str) -> list[str]:
    return line.split()


def parse_literal(token: str) -> Value | None:
    """Return the Value spelled by `token`, or None if it is not a literal."""
    match = LITERAL_RE.fullmatch(token)
    if not match:
        return None
    if match.group("int") is not None:
        try:
            return Int32(int(match.group("int")))
        except ValueError:
            # Out of the 32-bit range.
            return None
    number = float(match.group("float"))
    if match.group("narrow"):
        return Float32(number)
    return Float64(number)


def parse_token(token: str, registry: FunctionRegistry) -> ParsedToken:
    value = parse_literal(token)
    if value is not None:
        return LiteralToken(value)
    fn = registry.lookup(token)
    if fn is not None:
        return FunctionToken(fn)
    return BadToken(token)


def parse_line(line: str, registry: FunctionRegistry | None = None) -> list[tuple[str, ParsedToken]]:
    """Classify every token of `line`, returning (token, parsed) pairs in order."""
    if registry is None:
        registry = intrinsic_registry()
    return [(tok, parse_token(tok, registry)) for tok in find_tokens(line)]

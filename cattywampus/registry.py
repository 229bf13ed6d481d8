from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from cattywampus.errors import MalformedSignature
from cattywampus.types.function import Function

logger = logging.getLogger(__name__)


class FunctionRegistry:
    """Read-only mapping from function name to Function.

    The entries are copied at construction; nothing can be added, removed or
    overridden afterwards, so one registry can be shared by any number of
    sessions.
    """

    __slots__ = ("_functions",)

    def __init__(self, entries: Mapping[str, Function]):
        functions: dict[str, Function] = {}
        for key, fn in entries.items():
            if not isinstance(fn, Function):
                raise MalformedSignature(f"Registry entry {key!r} is not a Function: {fn!r}")
            functions[key] = fn
        self._functions: Mapping[str, Function] = MappingProxyType(functions)

    def lookup(self, name: str) -> Optional[Function]:
        return self._functions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._functions))

    def items(self) -> list[tuple[str, Function]]:
        return [(key, self._functions[key]) for key in self]


# Module-level singleton, built on first use and never mutated.
_intrinsics: Optional[FunctionRegistry] = None


def intrinsic_registry() -> FunctionRegistry:
    global _intrinsics
    if _intrinsics is None:
        # Lazy import to avoid circular dependency at module load time
        from cattywampus.builtin.intrinsics import intrinsic_functions
        _intrinsics = FunctionRegistry(intrinsic_functions())
        logger.debug("Registered %d intrinsic functions", len(_intrinsics))
    return _intrinsics


def lookup_function(name: str, registry: FunctionRegistry | None = None) -> Optional[Function]:
    """Look up `name` in `registry` (the intrinsic registry by default)."""
    if registry is None:
        registry = intrinsic_registry()
    return registry.lookup(name)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, Union

from cattywampus.types.value import Type, Value


@dataclass(frozen=True)
class Signature:
    """Input and output types of a function.

    Inputs are listed in consumption order: the first input is the deepest
    argument on the stack and the last input is the top of the stack.
    """

    inputs: tuple[Type, ...]
    outputs: tuple[Type, ...]

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    @property
    def arity(self) -> int:
        return len(self.inputs)

    def __str__(self):
        ins = " ".join(t.label for t in self.inputs)
        outs = " ".join(t.label for t in self.outputs)
        return f"{ins} -> {outs}" if ins else f"-> {outs}"


@dataclass(frozen=True)
class Scalar:
    """A function result holding exactly one value."""

    value: Value


# Only Scalar for now; a List(values) variant is reserved.
FunctionResult = Union[Scalar]

Implementation = Callable[[Sequence[Value]], FunctionResult]


@dataclass(frozen=True)
class Function:
    """A named, typed operation backed by a native implementation.

    Two functions with the same name and signature compare equal; the
    implementation handle is not compared, since distinct callables may compute
    the same thing.
    """

    name: str
    signature: Signature
    implementation: Implementation = field(compare=False, repr=False)

    def __str__(self):
        return f"{self.name} :: {self.signature}"

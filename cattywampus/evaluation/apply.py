"""Checked application of functions to the stack.

cattywampus is dynamically but strongly typed. Before a function runs, the
stack must hold enough values and each argument must match the declared input
type; after it runs, its result must match the declared output type. The stack
is only mutated once all of these checks have passed, so a failed application
leaves it exactly as it was.
"""

from __future__ import annotations

import logging

from cattywampus.errors import BrokenCallee, MalformedSignature, TypeMismatch, WrongArity
from cattywampus.types.function import Function, Scalar
from cattywampus.types.stack import Stack
from cattywampus.types.value import matches

logger = logging.getLogger(__name__)


def checked_apply(fn: Function, stack: Stack) -> None:
    """Apply `fn` to the top of `stack`, replacing its arguments with the result.

    Raises:
    - MalformedSignature if `fn` does not declare exactly one output. This is a
      registry defect and is not meant to be recovered from.
    - WrongArity if the stack is shorter than the number of inputs.
    - TypeMismatch at the first argument whose type differs from the signature.
    - BrokenCallee if the implementation fails or returns something other than a
      Scalar of the declared output type.

    On every error the stack is left unchanged.
    """
    # Functions return exactly one scalar for now.
    if len(fn.signature.outputs) != 1:
        raise MalformedSignature(
            f"{fn} declares {len(fn.signature.outputs)} outputs, exactly one is supported"
        )

    arity = fn.signature.arity
    if arity > stack.height():
        logger.debug("Rejected %s: stack height %d", fn, stack.height())
        raise WrongArity(fn, stack.height())

    # Input 0 is the deepest argument, input arity - 1 is the top of the stack.
    for idx, arg_type in enumerate(fn.signature.inputs):
        value = stack.peek_n(arity - idx - 1)
        if not matches(value, arg_type):
            logger.debug("Rejected %s: argument %d is %s", fn, idx, value.type)
            raise TypeMismatch(fn, idx, arg_type, value)

    args = stack.slice_n(arity - 1) if arity else ()

    try:
        result = fn.implementation(args)
    except (ArithmeticError, ValueError) as ex:
        raise BrokenCallee(fn, f"BrokenCallee: {fn} failed: {ex}") from ex

    (out_type,) = fn.signature.outputs
    match result:
        case Scalar(value) if matches(value, out_type):
            pass
        case _:
            raise BrokenCallee(fn, f"BrokenCallee: {fn} returned {result!r}")

    stack.chop_n(arity)
    stack.push(value)

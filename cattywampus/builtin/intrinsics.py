"""Intrinsic functions of the calculator.

Each implementation receives the already type-checked arguments, oldest first,
and evaluates a numpy ufunc on the variant's fixed-width scalar type. Numpy
warnings are silenced so that integers wrap at 32 bits and floats follow
IEEE-754 (division by zero gives inf, the square root of a negative is nan).
"""
from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from cattywampus.types.function import Function, FunctionResult, Implementation, Scalar, Signature
from cattywampus.types.value import Float32, Float64, Int32, Type, Value

I32 = Type.ANY_INT32
F32 = Type.ANY_FLOAT32
F64 = Type.ANY_FLOAT64

VARIANT_FOR_TYPE: dict[Type, type] = {I32: Int32, F32: Float32, F64: Float64}


def _wrap(result_type: Type, raw) -> Value:
    cls = VARIANT_FOR_TYPE[result_type]
    if cls is Int32:
        return Int32(int(raw))
    return cls(float(raw))


def ufunc_impl(ufunc: Callable, signature: Signature) -> Implementation:
    """Build an implementation that applies `ufunc` to the argument payloads.

    Each argument is converted to the numpy scalar type of its variant, and the
    result is cast to the numpy scalar type of the single declared output.
    """
    (out,) = signature.outputs
    out_dtype = VARIANT_FOR_TYPE[out].dtype

    def implementation(args: Sequence[Value]) -> FunctionResult:
        operands = [arg.dtype(arg.payload) for arg in args]
        with np.errstate(all="ignore"):
            raw = out_dtype(ufunc(*operands))
        return Scalar(_wrap(out, raw))

    implementation.__name__ = f"{getattr(ufunc, '__name__', 'ufunc')}_impl"
    return implementation


def _increment(x):
    return np.add(x, x.dtype.type(1))


def _decrement(x):
    return np.subtract(x, x.dtype.type(1))


def _identity(x):
    return x


# key -> (descriptive name, inputs, output, ufunc)
INTRINSICS: dict[str, tuple[str, tuple[Type, ...], Type, Callable]] = {
    # -------------------------------
    # Integer arithmetic
    # -------------------------------
    "inc": ("increment", (I32,), I32, _increment),
    "dec": ("decrement", (I32,), I32, _decrement),
    "neg": ("negate", (I32,), I32, np.negative),
    "abs": ("absolute value", (I32,), I32, np.absolute),
    "add": ("add", (I32, I32), I32, np.add),
    "sub": ("subtract", (I32, I32), I32, np.subtract),
    "mul": ("multiply", (I32, I32), I32, np.multiply),
    # -------------------------------
    # Double precision
    # -------------------------------
    "sin": ("sine", (F64,), F64, np.sin),
    "cos": ("cosine", (F64,), F64, np.cos),
    "tan": ("tangent", (F64,), F64, np.tan),
    "exp": ("exponential", (F64,), F64, np.exp),
    "ln": ("natural logarithm", (F64,), F64, np.log),
    "sqrt": ("square root", (F64,), F64, np.sqrt),
    "recip": ("reciprocal", (F64,), F64, np.reciprocal),
    "fneg": ("float negate", (F64,), F64, np.negative),
    "fabs": ("float absolute value", (F64,), F64, np.absolute),
    "fadd": ("float add", (F64, F64), F64, np.add),
    "fsub": ("float subtract", (F64, F64), F64, np.subtract),
    "fmul": ("float multiply", (F64, F64), F64, np.multiply),
    "fdiv": ("float divide", (F64, F64), F64, np.divide),
    "pow": ("power", (F64, F64), F64, np.power),
    # -------------------------------
    # Single precision
    # -------------------------------
    "sqrtf": ("single square root", (F32,), F32, np.sqrt),
    "recipf": ("single reciprocal", (F32,), F32, np.reciprocal),
    # -------------------------------
    # Conversions
    # -------------------------------
    "itof": ("int to float", (I32,), F64, _identity),
    "narrow": ("narrow to single", (F64,), F32, _identity),
    "widen": ("widen to double", (F32,), F64, _identity),
}


def intrinsic_functions() -> dict[str, Function]:
    """Return a fresh mapping of every intrinsic key to its Function."""
    functions: dict[str, Function] = {}
    for key, (name, inputs, output, ufunc) in INTRINSICS.items():
        signature = Signature(inputs, (output,))
        functions[key] = Function(name, signature, ufunc_impl(ufunc, signature))
    return functions

# Core type aliases for the cattywampus data model.
# Runtime values are the closed set of frozen dataclasses in cattywampus.types.value
# (Int32, Float32, Float64). Type tags live beside them and are only used for
# signature matching.
#
# Naming guidance:
# - Value:          a concrete datum that can sit on the stack.
# - Implementation: the native callable behind a registered Function.

from cattywampus.types.value import Value, Type, Int32, Float32, Float64, matches, type_label
from cattywampus.types.function import Function, Signature, Scalar, FunctionResult, Implementation
from cattywampus.types.stack import Stack

__version__ = "0.1.0"

import pytest
from hypothesis import strategies as st

from cattywampus.interpreter import Session
from cattywampus.registry import intrinsic_registry
from cattywampus.types.stack import Stack
from cattywampus.types.value import INT32_MAX, INT32_MIN, Float32, Float64, Int32


@pytest.fixture
def registry():
    """The shared registry of intrinsic functions."""
    return intrinsic_registry()


@pytest.fixture
def stack():
    """Fresh, empty stack."""
    return Stack()


@pytest.fixture
def session(registry):
    return Session(registry)


# Hypothesis strategies for calculator values
int32s = st.integers(min_value=INT32_MIN, max_value=INT32_MAX).map(Int32)
float32s = st.floats(width=32, allow_nan=False).map(Float32)
float64s = st.floats(allow_nan=False).map(Float64)
values = st.one_of(int32s, float32s, float64s)

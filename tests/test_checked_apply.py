import math

import pytest
from hypothesis import given, strategies as st

from cattywampus.errors import ApplyError, BrokenCallee, MalformedSignature, TypeMismatch, WrongArity
from cattywampus.evaluation.apply import checked_apply
from cattywampus.registry import intrinsic_registry
from cattywampus.types.function import Function, Scalar, Signature
from cattywampus.types.stack import Stack
from cattywampus.types.value import Float64, Int32, Type, matches

from conftest import values

I32 = Type.ANY_INT32
F64 = Type.ANY_FLOAT64


def make_fn(inputs, outputs, impl, name="test"):
    return Function(name, Signature(tuple(inputs), tuple(outputs)), impl)


# -----------------------------
# Scenarios
# -----------------------------

def test_inc(registry):
    stack = Stack([Int32(2)])
    checked_apply(registry.lookup("inc"), stack)
    assert list(stack) == [Int32(3)]


def test_sin_on_empty_stack(registry, stack):
    with pytest.raises(WrongArity) as info:
        checked_apply(registry.lookup("sin"), stack)
    assert info.value.function == registry.lookup("sin")
    assert list(stack) == []


def test_sin_on_int(registry):
    stack = Stack([Int32(2)])
    with pytest.raises(TypeMismatch) as info:
        checked_apply(registry.lookup("sin"), stack)
    assert info.value.position == 0
    assert info.value.expected is F64
    assert info.value.actual == Int32(2)
    assert list(stack) == [Int32(2)]


def test_recip(registry):
    recip = registry.lookup("recip")
    stack = Stack([Float64(1.0)])
    checked_apply(recip, stack)
    assert list(stack) == [Float64(1.0)]
    stack = Stack([Float64(2.0)])
    checked_apply(recip, stack)
    assert list(stack) == [Float64(0.5)]


def test_first_input_is_deepest_argument(registry):
    # 3 4 sub => 3 - 4
    stack = Stack([Int32(3), Int32(4)])
    checked_apply(registry.lookup("sub"), stack)
    assert list(stack) == [Int32(-1)]


def test_input_positions_map_to_stack_depths():
    seen = []

    def impl(args):
        seen.append(args)
        return Scalar(args[0])

    fn = make_fn([I32, F64], [I32], impl)
    stack = Stack([Int32(3), Float64(4.0)])
    checked_apply(fn, stack)
    assert seen == [(Int32(3), Float64(4.0))]
    assert list(stack) == [Int32(3)]

    swapped = Stack([Float64(4.0), Int32(3)])
    with pytest.raises(TypeMismatch) as info:
        checked_apply(fn, swapped)
    assert info.value.position == 0
    assert list(swapped) == [Float64(4.0), Int32(3)]


def test_type_check_short_circuits():
    fn = make_fn([I32, I32], [I32], lambda args: Scalar(Int32(0)))
    stack = Stack([Float64(1.0), Float64(2.0)])
    with pytest.raises(TypeMismatch) as info:
        checked_apply(fn, stack)
    assert info.value.position == 0


def test_second_position_mismatch():
    fn = make_fn([I32, I32], [I32], lambda args: Scalar(Int32(0)))
    stack = Stack([Int32(1), Float64(2.0)])
    with pytest.raises(TypeMismatch) as info:
        checked_apply(fn, stack)
    assert info.value.position == 1
    assert list(stack) == [Int32(1), Float64(2.0)]


def test_untouched_elements_survive(registry):
    stack = Stack([Int32(9), Float64(1.5), Int32(3), Int32(4)])
    checked_apply(registry.lookup("add"), stack)
    assert list(stack) == [Int32(9), Float64(1.5), Int32(7)]


def test_zero_arity_function_pushes_result(stack):
    calls = []

    def answer(args):
        calls.append(args)
        return Scalar(Int32(42))

    checked_apply(make_fn([], [I32], answer), stack)
    assert calls == [()]
    assert list(stack) == [Int32(42)]


# -----------------------------
# Broken callees
# -----------------------------

def test_wrong_output_type_is_broken_callee():
    fn = make_fn([I32], [I32], lambda args: Scalar(Float64(1.0)))
    stack = Stack([Int32(5)])
    with pytest.raises(BrokenCallee):
        checked_apply(fn, stack)
    assert list(stack) == [Int32(5)]


def test_bare_value_is_broken_callee():
    fn = make_fn([I32], [I32], lambda args: args[0])
    stack = Stack([Int32(5)])
    with pytest.raises(BrokenCallee):
        checked_apply(fn, stack)
    assert list(stack) == [Int32(5)]


def test_failing_callee_is_broken_callee():
    fn = make_fn([I32, I32], [I32], lambda args: Scalar(Int32(args[0].payload // args[1].payload)))
    stack = Stack([Int32(1), Int32(0)])
    with pytest.raises(BrokenCallee) as info:
        checked_apply(fn, stack)
    assert isinstance(info.value.__cause__, ZeroDivisionError)
    assert list(stack) == [Int32(1), Int32(0)]


@pytest.mark.parametrize("outputs", [[], [I32, I32]])
def test_output_arity_must_be_one(outputs):
    fn = make_fn([I32], outputs, lambda args: Scalar(Int32(0)))
    stack = Stack([Int32(1)])
    with pytest.raises(MalformedSignature):
        checked_apply(fn, stack)
    assert list(stack) == [Int32(1)]


def test_malformed_signature_is_not_an_apply_error():
    assert not issubclass(MalformedSignature, ApplyError)


# -----------------------------
# Properties
# -----------------------------

functions = st.sampled_from(sorted(intrinsic_registry())).map(intrinsic_registry().lookup)


@given(functions, st.lists(values, max_size=4))
def test_apply_is_all_or_nothing(fn, seed):
    stack = Stack(seed)
    before = list(stack)
    arity = fn.signature.arity
    try:
        checked_apply(fn, stack)
    except WrongArity:
        assert len(before) < arity
        assert list(stack) == before
    except TypeMismatch:
        assert list(stack) == before
    else:
        after = list(stack)
        assert len(after) == len(before) - arity + 1
        assert after[:-1] == before[:len(before) - arity]
        assert matches(after[-1], fn.signature.outputs[0])


@given(functions, st.integers(min_value=0, max_value=1))
def test_short_stacks_raise_wrong_arity(fn, height):
    if height >= fn.signature.arity:
        return
    stack = Stack([Float64(1.0)] * height)
    with pytest.raises(WrongArity):
        checked_apply(fn, stack)
    assert list(stack) == [Float64(1.0)] * height


@given(st.lists(values, min_size=1, max_size=3))
def test_intrinsics_never_break_their_signature(args):
    for _, fn in intrinsic_registry().items():
        if fn.signature.arity != len(args):
            continue
        if not all(matches(a, t) for a, t in zip(args, fn.signature.inputs)):
            continue
        stack = Stack(args)
        checked_apply(fn, stack)
        assert stack.height() == 1


def test_nan_result_is_committed(registry):
    stack = Stack([Float64(-1.0)])
    checked_apply(registry.lookup("sqrt"), stack)
    assert math.isnan(stack.peek_n(0).payload)

from timeit import timeit

from cattywampus.evaluation.apply import checked_apply
from cattywampus.interpreter import Session
from cattywampus.reader.parser import parse_line
from cattywampus.registry import intrinsic_registry
from cattywampus.types.stack import Stack
from cattywampus.types.value import Float64, Int32


def time_checked_apply(key: str, args: list, rounds: int) -> float:
    """Time checked application only: the stack is reseeded outside the timed call."""
    fn = intrinsic_registry().lookup(key)
    stack = Stack()

    def step():
        stack.extend(args)
        checked_apply(fn, stack)
        stack.pop()

    # Warmup
    step()
    return timeit(step, number=rounds)


def time_raw_call(key: str, args: list, rounds: int) -> float:
    """Time the bare implementation call, without any type checks."""
    fn = intrinsic_registry().lookup(key)
    args = tuple(args)
    fn.implementation(args)
    return timeit(lambda: fn.implementation(args), number=rounds)


def time_parse(line: str, rounds: int) -> float:
    registry = intrinsic_registry()
    parse_line(line, registry)
    return timeit(lambda: parse_line(line, registry), number=rounds)


def time_session(line: str, rounds: int) -> float:
    session = Session()

    def step():
        session.eval(line)
        session.clear()

    step()
    return timeit(step, number=rounds)


LINE = "3 4 add inc itof 2.0 fmul sqrt recip"


def _print_pair(name: str, key: str, args: list, rounds: int) -> None:
    tchk = time_checked_apply(key, args, rounds)
    traw = time_raw_call(key, args, rounds)
    print(f"Benchmark: {name}")
    print(f"  checked_apply: {tchk:.6f}s  |  raw call: {traw:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    rounds = 10000
    _print_pair("inc", "inc", [Int32(2)], rounds)
    _print_pair("add", "add", [Int32(3), Int32(4)], rounds)
    _print_pair("sin", "sin", [Float64(0.5)], rounds)
    print(f"Benchmark: parse_line  {time_parse(LINE, rounds):.6f}s  [rounds={rounds}]")
    print(f"Benchmark: session     {time_session(LINE, rounds):.6f}s  [rounds={rounds}]")

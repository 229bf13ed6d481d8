from typing import Iterable, Optional

from cattywampus.registry import FunctionRegistry
from cattywampus.types.function import Function
from cattywampus.types.value import Type, Value, type_of

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_INT32 = "\033[94m"
COLOR_FLOAT32 = "\033[96m"
COLOR_FLOAT64 = "\033[92m"
COLOR_FUNCTION = "\033[95m"
COLOR_DEPTH = "\033[90m"

TYPE_COLORS = {
    Type.ANY_INT32: COLOR_INT32,
    Type.ANY_FLOAT32: COLOR_FLOAT32,
    Type.ANY_FLOAT64: COLOR_FLOAT64,
}


# ----------------- Colorize utility -----------------
def colorize(value: Value, color: bool = True) -> str:
    text = str(value)
    if not color:
        return text
    return f"{TYPE_COLORS[type_of(value)]}{text}{RESET}"


def legend(color: bool = True) -> str:
    items = [
        f"{TYPE_COLORS[t]}{t.label}{RESET}" if color else t.label
        for t in Type
    ]
    return "Color Key: " + " | ".join(items)


# ----------------- Stack printers -----------------
def format_stack(stack: Iterable[Value], color: bool = True) -> str:
    """Render the stack on one line, oldest value first."""
    return " ".join(colorize(v, color) for v in stack)


def format_stack_detail(stack: Iterable[Value], color: bool = True, show_legend: Optional[bool] = None) -> str:
    """Render one row per value, top of the stack first, with depth and type."""
    values = list(stack)
    if not values:
        return "(empty stack)"
    rows = []
    width = len(str(len(values) - 1))
    for depth, value in enumerate(reversed(values)):
        label = f"{depth:>{width}}"
        if color:
            label = f"{COLOR_DEPTH}{label}{RESET}"
        rows.append(f"{label}  {type_of(value).label}  {colorize(value, color)}")
    if show_legend is None:
        show_legend = color
    if show_legend:
        rows.insert(0, legend(color))
    return "\n".join(rows)


def format_function(key: str, fn: Function, color: bool = True) -> str:
    name = f"{key:<8}"
    if color:
        name = f"{COLOR_FUNCTION}{name}{RESET}"
    return f"{name} {fn}"


def format_registry(registry: FunctionRegistry, color: bool = True) -> str:
    return "\n".join(format_function(key, fn, color) for key, fn in registry.items())

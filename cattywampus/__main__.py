"""Interactive read loop for the cattywampus calculator.

Meta-commands:
  :p   print the stack in detail
  :r   clear the stack
  :f   list the registered functions
  :q   quit (as does end of input)
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from cattywampus import config
from cattywampus.debug_utils.pprint import format_registry, format_stack, format_stack_detail
from cattywampus.errors import UnrecognizedToken
from cattywampus.interpreter import Session
from cattywampus.reader.parser import BadToken, FunctionToken, LiteralToken, parse_line

try:
    import readline
except ImportError:  # e.g. Windows without pyreadline
    readline = None

logger = logging.getLogger(__name__)


def describe_token(parsed) -> str:
    match parsed:
        case LiteralToken(value):
            return f"Literal({value.type.label} {value})"
        case FunctionToken(fn):
            return f"Intrinsic({fn})"
        case BadToken(text):
            return f"BadToken({text!r})"
    return repr(parsed)


class Repl:
    """Drives a Session from lines of text, writing results to `out`."""

    def __init__(self, session: Session | None = None, out: TextIO | None = None,
                 color: bool | None = None, echo: bool | None = None):
        self.session = session if session is not None else Session()
        self.out = out if out is not None else sys.stdout
        self.color = config.color_enabled() if color is None else color
        self.echo = config.echo_tokens() if echo is None else echo

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def handle(self, line: str) -> bool:
        """Process one line of input. Returns False when the loop should stop."""
        text = line.strip()
        if text == ":q":
            return False
        if text == ":p":
            self._print(format_stack_detail(self.session.stack, self.color))
            return True
        if text == ":r":
            self.session.clear()
            self._print("Stack cleared.")
            return True
        if text == ":f":
            self._print(format_registry(self.session.registry, self.color))
            return True

        if self.echo:
            parsed = parse_line(text, self.session.registry)
            self._print(repr([describe_token(p) for _, p in parsed]))

        try:
            errors = self.session.eval(text)
        except UnrecognizedToken as ex:
            for tok in ex.tokens:
                self._print(f"Error - Invalid token: {tok}")
            return True

        for err in errors:
            self._print(f"Error - {err.kind}: {err.function}")
        self._print(format_stack(self.session.stack, self.color))
        return True


def _load_history(path) -> None:
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(path)
    except OSError:
        logger.debug("No history at %s", path)


def _save_history(path) -> None:
    if readline is None or path is None:
        return
    try:
        readline.write_history_file(path)
    except OSError as ex:
        logger.warning("Could not save history to %s: %s", path, ex)


def repl(read: Callable[[str], str] = input) -> None:
    history = config.get_history_path()
    prompt = config.get_prompt()
    _load_history(history)
    loop = Repl()
    try:
        while True:
            try:
                line = read(prompt)
            except EOFError:
                print()
                break
            if not loop.handle(line):
                break
    finally:
        _save_history(history)


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    try:
        repl()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging

from cattywampus.errors import ApplyError, UnrecognizedToken
from cattywampus.evaluation.apply import checked_apply
from cattywampus.reader.parser import BadToken, FunctionToken, LiteralToken, ParsedToken, parse_line
from cattywampus.registry import FunctionRegistry, intrinsic_registry
from cattywampus.types.stack import Stack

logger = logging.getLogger(__name__)


class Session:
    """
    One calculator session: a Stack of its own plus a shared, read-only
    FunctionRegistry. Lines are evaluated one at a time, left to right.
    """

    def __init__(self, registry: FunctionRegistry | None = None):
        self.registry: FunctionRegistry = registry if registry is not None else intrinsic_registry()
        self.stack: Stack = Stack()

    def parse(self, line: str) -> list[tuple[str, ParsedToken]]:
        """Classify the tokens of `line`, raising UnrecognizedToken if any are bad."""
        parsed = parse_line(line, self.registry)
        bad = [tok for tok, parsed_tok in parsed if isinstance(parsed_tok, BadToken)]
        if bad:
            raise UnrecognizedToken(bad)
        return parsed

    def eval(self, line: str) -> list[ApplyError]:
        """Evaluate one line of input against the stack.

        The whole line is validated first: if any token is unrecognized nothing
        is applied and UnrecognizedToken is raised. Otherwise literals are pushed
        and functions applied in order. A failed application is a no-op on the
        stack; its error is collected and evaluation continues with the next
        token. The collected errors are returned.
        """
        errors: list[ApplyError] = []
        for _, parsed_tok in self.parse(line):
            match parsed_tok:
                case LiteralToken(value):
                    self.stack.push(value)
                case FunctionToken(fn):
                    try:
                        checked_apply(fn, self.stack)
                    except ApplyError as ex:
                        errors.append(ex)
        if errors:
            logger.debug("%d application error(s) in %r", len(errors), line)
        return errors

    def clear(self) -> None:
        self.stack.clear()

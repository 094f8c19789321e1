"""Error taxonomy for mal.

Every error carries the offending values as attributes so callers can match on
the error kind; the human-readable message is only built by ``__str__``.
"""

from __future__ import annotations

from typing import Any, Sequence


ELIDED = "..."


def _render(values: Sequence[Any]) -> str:
    # Imported lazily: the printer depends on mal.types, which depends on us.
    from mal.printer import to_text

    def render_one(value: Any) -> str:
        try:
            return to_text(value)
        except RecursionError:
            return ELIDED

    return " ".join(render_one(v) for v in values)


class MalError(Exception):
    """Base class for all mal errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class ParseError(MalError):
    """Raised when source text cannot be read into an expression"""
    pass


class UnexpectedToken(ParseError):
    """Raised when a token appears where it cannot start or continue a form"""

    def __init__(self, token: str, expected: str | None = None):
        super().__init__(token, expected)
        self.token = token
        self.expected = expected

    def __str__(self) -> str:
        if self.expected is None:
            return f"unexpected token '{self.token}'"
        return f"unexpected token '{self.token}', expected '{self.expected}'"


class UnexpectedEndOfInput(ParseError):
    """Raised when the token stream runs out in the middle of a form"""

    def __init__(self, expected: str | None = None):
        super().__init__(expected)
        self.expected = expected

    def __str__(self) -> str:
        if self.expected is None:
            return "unexpected end of input"
        return f"unexpected end of input, expected '{self.expected}'"


class MalformedQuoteOrMeta(ParseError):
    """Raised when a quote or meta prefix is missing its operand(s)"""

    def __init__(self, prefix: str):
        super().__init__(prefix)
        self.prefix = prefix

    def __str__(self) -> str:
        return f"'{self.prefix}' is missing the form it applies to"


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(MalError):
    """Raised when a well-formed expression cannot be evaluated"""
    pass


class UnknownSymbol(EvalError):
    """Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown symbol '{self.name}'"


class MalformedSpecialForm(EvalError):
    """Raised when a special form does not have the shape it requires"""

    def __init__(self, form: Any, reason: str):
        super().__init__(form, reason)
        self.form = form
        self.reason = reason

    def __str__(self) -> str:
        return f"malformed {_render([self.form])}: {self.reason}"


class NotAFunction(EvalError):
    """Raised when the head of an application does not evaluate to a function"""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"{_render([self.value])} is not a function"


class FunctionCallError(EvalError):
    """Base for errors raised by a function on the arguments it received"""

    def __init__(self, function_name: str, received_args: Sequence[Any]):
        super().__init__(function_name, list(received_args))
        self.function_name = function_name
        self.received_args = list(received_args)

    def __str__(self) -> str:
        return f"{self.function_name} failed on: [{_render(self.received_args)}]"


class ArityOrTypeMismatch(FunctionCallError):
    """Raised when a function receives the wrong number or kind of arguments"""

    def __str__(self) -> str:
        return f"{self.function_name} received unexpected inputs: [{_render(self.received_args)}]"


class DivisionByZero(FunctionCallError):
    """Raised when an integer is divided by zero"""

    def __str__(self) -> str:
        return f"{self.function_name} division by zero: [{_render(self.received_args)}]"


class IntegerOverflow(FunctionCallError):
    """Raised when an integer result does not fit in 64 signed bits"""

    def __str__(self) -> str:
        return f"{self.function_name} integer overflow: [{_render(self.received_args)}]"


class NestingTooDeep(MalError):
    """Raised when reading or evaluating exceeds the interpreter's recursion depth"""

    def __str__(self) -> str:
        return "maximum nesting depth exceeded"

"""Constrained arithmetic evaluator used by the calculation query rule.

Grammar::

    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := ("+" | "-") factor | NUMBER | "(" expression ")"

Only numeric literals, the four operators and parentheses are accepted, so
user text can never reach anything but arithmetic.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Union

from .errors import ExpressionError

MAX_EXPRESSION_LENGTH = 256

Number = Union[int, float]

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)|(?P<op>[-+*/()]))"
)


@dataclass(frozen=True)
class Token:
    kind: str  # "number", "op" or "end"
    text: str
    position: int


def tokenize(expression: str) -> List[Token]:
    """Split an expression into tokens.

    Raises:
        ExpressionError: On any character outside the grammar
    """
    tokens = []
    position = 0
    stripped_length = len(expression.rstrip())
    while position < stripped_length:
        match = _TOKEN_RE.match(expression, position)
        if not match:
            rest = expression[position:]
            position += len(rest) - len(rest.lstrip())
            raise ExpressionError(
                f"Unexpected character {expression[position]!r} at position {position}"
            )
        kind = match.lastgroup
        tokens.append(Token(kind, match.group(kind), match.start(kind)))
        position = match.end()
    tokens.append(Token("end", "", len(expression)))
    return tokens


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._index = 0

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _accept(self, *ops: str) -> bool:
        return self._current.kind == "op" and self._current.text in ops

    def parse(self) -> Number:
        value = self._expression()
        if self._current.kind != "end":
            raise ExpressionError(
                f"Unexpected {self._current.text!r} at position {self._current.position}"
            )
        return value

    def _expression(self) -> Number:
        value = self._term()
        while self._accept("+", "-"):
            op = self._advance().text
            right = self._term()
            value = value + right if op == "+" else value - right
        return value

    def _term(self) -> Number:
        value = self._factor()
        while self._accept("*", "/"):
            op = self._advance().text
            right = self._factor()
            if op == "*":
                value = value * right
            else:
                if right == 0:
                    raise ExpressionError("Division by zero")
                value = value / right
        return value

    def _factor(self) -> Number:
        token = self._current
        if self._accept("+", "-"):
            self._advance()
            operand = self._factor()
            return operand if token.text == "+" else -operand
        if token.kind == "number":
            self._advance()
            return _to_number(token.text)
        if self._accept("("):
            self._advance()
            value = self._expression()
            if not self._accept(")"):
                raise ExpressionError(
                    f"Missing closing parenthesis at position {self._current.position}"
                )
            self._advance()
            return value
        if token.kind == "end":
            raise ExpressionError("Unexpected end of expression")
        raise ExpressionError(f"Unexpected {token.text!r} at position {token.position}")


def _to_number(text: str) -> Number:
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


def evaluate(expression: str) -> Number:
    """Evaluate an arithmetic expression.

    Args:
        expression: Text such as ``"2 + 2"`` or ``"(1.5 - 3) * -2"``

    Returns:
        The numeric result

    Raises:
        ExpressionError: If the expression is empty, too long, malformed,
            divides by zero or overflows
    """
    if not expression or not expression.strip():
        raise ExpressionError("Empty expression")
    if len(expression) > MAX_EXPRESSION_LENGTH:
        raise ExpressionError(
            f"Expression longer than {MAX_EXPRESSION_LENGTH} characters"
        )

    try:
        value = _Parser(tokenize(expression)).parse()
    except OverflowError as e:
        raise ExpressionError(f"Result out of range: {e}") from e

    if isinstance(value, float) and not math.isfinite(value):
        raise ExpressionError("Result is not a finite number")
    return value


def format_number(value: Number) -> str:
    """Render a result, dropping the decimal part of whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

"""Expression evaluation for pocketcalc.

Two strategies share one operator table:

- evaluate(): shunting-yard over two list stacks (values, operators).
  Honors precedence and parentheses: '2+3x4' → 14.
- evaluate_flat(): splits around operator characters and folds strictly
  left to right, no precedence: '2+3x4' → 20.

Calculator.parse_and_calculate picks between them with select_strategy():
parentheses anywhere in the input select the precedence-aware path. The
two paths disagree on purpose and must stay separate.
"""

from __future__ import annotations

import re
from typing import Union

from pocketcalc.models import OPERATOR_SYMBOLS, BinaryOperation, Paren, Strategy, Token


class CalculatorError(ValueError):
    """Base class for errors raised while evaluating a text expression."""


class ParseError(CalculatorError):
    """Malformed expression: bad literal, operand/operator mismatch, unbalanced parentheses."""


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """A literal zero divisor was hit during text evaluation."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_NUMBER_CHARS = frozenset("0123456789.")
_NUMBER_RUN_RE = re.compile(r"[0-9.]+")
# Capturing group keeps the operators in the split result.
_FLAT_SPLIT_RE = re.compile("([" + re.escape("".join(sorted(OPERATOR_SYMBOLS))) + "])")


def _strip_whitespace(expression: str) -> str:
    return "".join(expression.split())


def _parse_number(text: str) -> float:
    if not _NUMBER_RE.fullmatch(text):
        raise ParseError(f"Invalid number: {text!r}")
    return float(text)


def apply_operation(left: float, right: float, operation: BinaryOperation) -> float:
    """Apply a binary operation. Division by zero raises DivideByZeroError.

    Overflow is not an error here: IEEE arithmetic saturates to ±inf and the
    display layer turns that into the Error sentinel.
    """
    if operation == BinaryOperation.ADD:
        return left + right
    if operation == BinaryOperation.SUBTRACT:
        return left - right
    if operation == BinaryOperation.MULTIPLY:
        return left * right
    if operation == BinaryOperation.DIVIDE:
        if right == 0:
            raise DivideByZeroError()
        return left / right
    raise ParseError(f"Unknown operation: {operation!r}")


def tokenize(expression: str) -> list[Token]:
    """Split an expression into number, operator and parenthesis tokens.

    Whitespace is removed first, so positions refer to the stripped text.
    Numbers are maximal runs of digits and '.'.

    Raises:
        ParseError: on a malformed number or an unexpected character.
    """
    text = _strip_whitespace(expression)
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _NUMBER_CHARS:
            run = _NUMBER_RUN_RE.match(text, i).group(0)
            tokens.append(Token(_parse_number(run), i))
            i += len(run)
            continue
        if ch == "(":
            tokens.append(Token(Paren.OPEN, i))
        elif ch == ")":
            tokens.append(Token(Paren.CLOSE, i))
        else:
            op = BinaryOperation.from_symbol(ch)
            if op is None:
                raise ParseError(f"Unexpected character {ch!r} at position {i}")
            tokens.append(Token(op, i))
        i += 1
    return tokens


def _reduce(values: list[float], operators: list[Union[BinaryOperation, Paren]]) -> None:
    """Pop one operator and two values, push the result."""
    op = operators.pop()
    if op is Paren.OPEN:
        raise ParseError("Unbalanced parentheses: missing ')'")
    if len(values) < 2:
        raise ParseError(f"Missing operand for '{op.value}'")
    right = values.pop()
    left = values.pop()
    values.append(apply_operation(left, right, op))


def evaluate(expression: str) -> float:
    """Evaluate an expression with precedence and parentheses.

    '+' and '-' bind looser than 'x' and '/'; equal precedence associates
    to the left.

    Raises:
        ParseError: malformed input or unbalanced parentheses.
        DivideByZeroError: division by zero anywhere in the expression.
    """
    tokens = tokenize(expression)
    if not tokens:
        raise ParseError("Expression is empty")

    values: list[float] = []
    operators: list[Union[BinaryOperation, Paren]] = []

    for tok in tokens:
        if tok.is_number:
            values.append(tok.value)
        elif tok.value is Paren.OPEN:
            operators.append(Paren.OPEN)
        elif tok.value is Paren.CLOSE:
            while operators and operators[-1] is not Paren.OPEN:
                _reduce(values, operators)
            if not operators:
                raise ParseError(f"Unbalanced parentheses: unexpected ')' at position {tok.position}")
            operators.pop()
        elif tok.is_operator:
            incoming = tok.value
            while (
                operators
                and operators[-1] is not Paren.OPEN
                and operators[-1].precedence >= incoming.precedence
            ):
                _reduce(values, operators)
            operators.append(incoming)

    while operators:
        _reduce(values, operators)

    if len(values) != 1:
        raise ParseError("Invalid expression: operands and operators do not match")
    return values[0]


def evaluate_flat(expression: str) -> float:
    """Fold an expression strictly left to right, ignoring precedence.

    '2+3x4' → (2+3)x4 = 20. Needs at least two operands and one operator,
    alternating. Parentheses and leading signs are not understood here.

    Raises:
        ParseError: wrong token count or a malformed operand.
        DivideByZeroError: a zero divisor.
    """
    text = _strip_whitespace(expression)
    pieces = [p for p in _FLAT_SPLIT_RE.split(text) if p]
    if len(pieces) < 3 or len(pieces) % 2 == 0:
        raise ParseError("Invalid expression: two operands and an operator are required")

    result = _parse_number(pieces[0])
    for i in range(1, len(pieces), 2):
        op = BinaryOperation.from_symbol(pieces[i])
        if op is None:
            raise ParseError(f"Expected an operator, got {pieces[i]!r}")
        result = apply_operation(result, _parse_number(pieces[i + 1]), op)
    return result


def select_strategy(expression: str) -> Strategy:
    """Parentheses anywhere in the input select the precedence-aware path."""
    if "(" in expression or ")" in expression:
        return Strategy.PRECEDENCE_AWARE
    return Strategy.FLAT_LEFT_TO_RIGHT


def evaluate_with(expression: str, strategy: Strategy) -> float:
    """Evaluate using an explicitly chosen strategy."""
    if strategy == Strategy.PRECEDENCE_AWARE:
        return evaluate(expression)
    return evaluate_flat(expression)

"""Data models for the pocketcalc engine.

Operator enums, the evaluation Strategy, lexer Tokens and the Evaluation
record: the typed structures that flow through evaluator → calculator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class BinaryOperation(str, Enum):
    """Binary operator keys. Values are the canonical display spellings."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def precedence(self) -> int:
        if self in (BinaryOperation.MULTIPLY, BinaryOperation.DIVIDE):
            return 2
        return 1

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional[BinaryOperation]:
        """Map any accepted spelling ('x', '*', '×', '÷', ...) to an operation."""
        return _OPERATOR_SYMBOLS.get(symbol)


_OPERATOR_SYMBOLS: dict[str, BinaryOperation] = {
    "+": BinaryOperation.ADD,
    "-": BinaryOperation.SUBTRACT,
    "x": BinaryOperation.MULTIPLY,
    "X": BinaryOperation.MULTIPLY,
    "*": BinaryOperation.MULTIPLY,
    "×": BinaryOperation.MULTIPLY,
    "/": BinaryOperation.DIVIDE,
    "÷": BinaryOperation.DIVIDE,
}

OPERATOR_SYMBOLS = frozenset(_OPERATOR_SYMBOLS)


class UnaryOperation(str, Enum):
    """Unary operator keys, applied directly to the displayed value."""

    SQUARE_ROOT = "√"
    PERCENT = "%"
    RECIPROCAL = "1/x"

    @classmethod
    def from_label(cls, label: str) -> Optional[UnaryOperation]:
        if label.lower() == "sqrt":
            return cls.SQUARE_ROOT
        try:
            return cls(label)
        except ValueError:
            return None


class Strategy(str, Enum):
    """How a text expression is reduced.

    FLAT_LEFT_TO_RIGHT ignores precedence: '2+3x4' is (2+3)x4.
    PRECEDENCE_AWARE is the shunting-yard path used once parentheses appear.
    """

    FLAT_LEFT_TO_RIGHT = "flat"
    PRECEDENCE_AWARE = "precedence"


class Paren(str, Enum):
    OPEN = "("
    CLOSE = ")"


@dataclass(frozen=True)
class Token:
    """One lexed piece of an expression: a number, an operator or a parenthesis."""

    value: Union[float, BinaryOperation, Paren]
    position: int = 0

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, float)

    @property
    def is_operator(self) -> bool:
        return isinstance(self.value, BinaryOperation)

    def __str__(self) -> str:
        if isinstance(self.value, Enum):
            return self.value.value
        return repr(self.value)


@dataclass
class Evaluation:
    """Result of one text evaluation through Calculator.parse_and_calculate."""

    expression: str
    strategy: Strategy
    display: str

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_DISPLAY

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "strategy": self.strategy.value,
            "display": self.display,
        }


# Shown in place of a number when a result is NaN or infinite.
ERROR_DISPLAY = "Error"

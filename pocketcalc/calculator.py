"""The pocket calculator state machine.

Holds the display, the pending binary operation with its left operand, and
the session history. Key-press methods never raise: domain failures (square
root of a negative, division by zero on '=') show the "Error" sentinel until
the next clear or digit. Text evaluation through parse_and_calculate raises
ParseError / DivideByZeroError instead and leaves the display untouched.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from pocketcalc.config import Settings
from pocketcalc.display import format_number, parse_display, render_result, truncate
from pocketcalc.evaluator import DivideByZeroError, apply_operation, evaluate_with, select_strategy
from pocketcalc.models import ERROR_DISPLAY, BinaryOperation, Evaluation, UnaryOperation

_CLEAR_LABELS = ("C", "CE", "c", "ce")
_NEGATE_LABELS = ("+/-", "±", "neg")


class Calculator:
    """One calculator session. Not thread-safe; owned by its caller."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._screen = "0"
        self.latest_value = 0.0
        self.latest_operation: Optional[BinaryOperation] = None
        self._history: list[str] = []

    @property
    def display(self) -> str:
        return self._screen

    @property
    def history(self) -> tuple[str, ...]:
        """Display strings of completed calculations, most recent last."""
        return tuple(self._history)

    def read_screen(self) -> str:
        return self._screen

    def _record(self) -> None:
        if self._screen != ERROR_DISPLAY:
            self._history.append(self._screen)

    # --- Key presses ---

    def press_clear_key(self) -> None:
        """C / CE: reset the display and forget the pending operation."""
        self._screen = "0"
        self.latest_operation = None
        self.latest_value = 0.0

    def press_digit_key(self, digit: Union[int, float]) -> None:
        """Show the digit. Replaces the whole display rather than appending."""
        # latest_value is only set by an operator key, so "6 + 3 =" is 9.
        self._screen = format_number(float(digit))

    def press_dot_key(self) -> None:
        if self._screen == ERROR_DISPLAY:
            return
        if "." not in self._screen:
            self._screen += "."

    def press_negative_key(self) -> None:
        """+/-: toggle a leading minus sign."""
        if self._screen == ERROR_DISPLAY:
            return
        if self._screen.startswith("-"):
            self._screen = self._screen[1:]
        else:
            self._screen = "-" + self._screen

    def press_binary_operation_key(self, operation: Union[str, BinaryOperation]) -> None:
        """Remember the displayed value as the left operand of operation."""
        op = operation if isinstance(operation, BinaryOperation) else BinaryOperation.from_symbol(operation)
        if op is None:
            raise ValueError(f"Unknown binary operation: {operation!r}")
        value = parse_display(self._screen)
        if value is None:
            return
        self.latest_value = value
        self.latest_operation = op

    def press_unary_operation_key(self, operation: Union[str, UnaryOperation]) -> None:
        """Apply √, % or 1/x to the displayed value in place.

        NaN or infinite results show "Error". Long decimals are cut, not rounded.
        """
        op = operation if isinstance(operation, UnaryOperation) else UnaryOperation.from_label(operation)
        if op is None:
            raise ValueError(f"Unknown unary operation: {operation!r}")
        value = parse_display(self._screen)
        if value is None:
            return
        # The unary key ends any pending binary operation; a following "=" is an identity.
        self.latest_value = value
        self.latest_operation = None

        if op == UnaryOperation.SQUARE_ROOT:
            result = math.sqrt(value) if value >= 0 else math.nan
        elif op == UnaryOperation.PERCENT:
            result = value / 100
        else:
            result = 1 / value if value != 0 else math.inf

        self._screen = truncate(render_result(result), self.settings)

    def press_equals_key(self) -> None:
        """Apply the pending operation to (latest value, display).

        The pending operation is kept, so pressing '=' again repeats it
        against the new display. Division by zero shows "Error".
        """
        second = parse_display(self._screen)
        if second is None:
            return

        if self.latest_operation is None:
            result = second
        else:
            try:
                result = apply_operation(self.latest_value, second, self.latest_operation)
            except DivideByZeroError:
                result = math.inf

        self._screen = render_result(result)
        self._record()

    def press_key(self, label: str) -> None:
        """Dispatch a key label: '0'-'9', '.', '+/-', '+', '-', 'x', '/', '√', '%', '1/x', '=', 'C'."""
        label = label.strip()
        if len(label) == 1 and label in "0123456789":
            self.press_digit_key(int(label))
        elif label == ".":
            self.press_dot_key()
        elif label == "=":
            self.press_equals_key()
        elif label in _CLEAR_LABELS:
            self.press_clear_key()
        elif label in _NEGATE_LABELS:
            self.press_negative_key()
        elif BinaryOperation.from_symbol(label) is not None:
            self.press_binary_operation_key(label)
        elif UnaryOperation.from_label(label) is not None:
            self.press_unary_operation_key(label)
        else:
            raise ValueError(f"Unknown key: {label!r}")

    # --- Text expressions ---

    def parse_and_calculate(self, expression: str) -> Evaluation:
        """Evaluate a whole text expression and show the result.

        Input without parentheses is folded left to right with no precedence
        ('2+3x4' → 20); with parentheses, precedence applies.

        Raises:
            ParseError: malformed expression. The display is left as it was.
            DivideByZeroError: zero divisor. The display is left as it was.
        """
        text = expression.replace(" ", "")
        strategy = select_strategy(text)
        result = evaluate_with(text, strategy)

        self._screen = render_result(result)
        self._record()
        return Evaluation(expression=text, strategy=strategy, display=self._screen)

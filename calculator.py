"""
Calculator Engine for SciCalc
Handles button operations, display parsing and result formatting
"""
import math
import re
from decimal import Decimal, ROUND_HALF_EVEN, localcontext

import config


class CalculatorError(Exception):
    """Base class for errors that end up as ERROR on the display"""


class DivisionByZero(CalculatorError):
    pass


class DomainError(CalculatorError):
    pass


class ResultOverflow(CalculatorError):
    pass


class InvalidDisplay(ValueError):
    """Display text that is not a number"""


_NUMBER_RE = re.compile(r'^-?(\d+\.?\d*|\.\d+)$')


def parse_display(text):
    """Parse the display string into a float"""
    if not isinstance(text, str) or not _NUMBER_RE.match(text):
        raise InvalidDisplay(f"not a number: {text!r}")
    return float(text)


def format_number(value):
    """Format a result for the display.

    Whole numbers are shown without a decimal point. Everything else goes
    through Decimal so the output never switches to scientific notation,
    rounded to config.DISPLAY_PRECISION fractional digits with trailing
    zeros removed.
    """
    if not math.isfinite(value):
        raise ResultOverflow(f"result out of range: {value}")

    if value.is_integer():
        return str(int(value))

    number = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = 400
        if number.as_tuple().exponent < -config.DISPLAY_PRECISION:
            number = number.quantize(Decimal(1).scaleb(-config.DISPLAY_PRECISION),
                                     rounding=ROUND_HALF_EVEN)
    text = format(number, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('', '-', '-0'):
        text = '0'
    return text


# Pure operations: raise CalculatorError subclasses, never touch a display

def add(a, b):
    return a + b


def subtract(a, b):
    return a - b


def multiply(a, b):
    return a * b


def divide(a, b):
    if b == 0:
        raise DivisionByZero("cannot divide by zero")
    return a / b


def power(base, exponent):
    # Negative base with a fractional exponent has no real result
    if base < 0 and not float(exponent).is_integer():
        raise DomainError("negative base with fractional exponent")
    try:
        return base ** exponent
    except ZeroDivisionError:
        raise DivisionByZero("zero raised to a negative power") from None
    except OverflowError:
        raise ResultOverflow("power result out of range") from None


def factorial(value):
    """n! for whole numbers 0..config.FACTORIAL_LIMIT"""
    if not float(value).is_integer():
        raise DomainError("factorial needs a whole number")
    n = int(value)
    if n < 0 or n > config.FACTORIAL_LIMIT:
        raise DomainError(f"factorial only defined for 0..{config.FACTORIAL_LIMIT}")
    return float(math.factorial(n))


def natural_log(value):
    if value <= 0:
        raise DomainError("log undefined for zero or negative numbers")
    return math.log(value)


def reciprocal(value):
    if value == 0:
        raise DivisionByZero("1/0 is undefined")
    return 1 / value


def square_root(value):
    if value < 0:
        raise DomainError("cannot take the square root of a negative number")
    return math.sqrt(value)


OPERATORS = {
    '+': add,
    '-': subtract,
    '*': multiply,
    '/': divide,
    '**': power,
}

OPERATOR_ALIASES = {
    'x^y': '**',
    '^': '**',
}

DIGITS = '0123456789'


class Calculator:
    def __init__(self):
        self.display = "0"
        self.pending_operand = 0.0
        self.pending_operator = None
        self.memory = 0.0

    def snapshot(self):
        """Return the current state as a plain dict"""
        return {
            'display': self.display,
            'pending_operand': self.pending_operand,
            'pending_operator': self.pending_operator,
            'memory': self.memory,
        }

    def current_value(self):
        return parse_display(self.display)

    def _show(self, compute):
        """Run compute() and put its formatted result on the display"""
        try:
            self.display = format_number(compute())
        except CalculatorError:
            self.display = config.ERROR_TEXT
        return self.display

    # Entry

    def enter_digit(self, digit):
        """Replace a lone 0 (or ERROR) with the digit, otherwise append it"""
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"not a digit: {digit!r}")
        if self.display in ("0", config.ERROR_TEXT):
            self.display = digit
        else:
            self.display += digit
        return self.display

    def enter_decimal_point(self):
        if self.display in ("", config.ERROR_TEXT):
            self.display = "0."
        elif "." not in self.display:
            self.display += "."
        return self.display

    def toggle_sign(self):
        value = self.current_value()
        return self._show(lambda: -value)

    # Binary operations

    def set_operator(self, op):
        """Store the display as the first operand and wait for the second"""
        op = OPERATOR_ALIASES.get(op, op)
        if op not in OPERATORS:
            raise ValueError(f"unknown operator: {op!r}")

        # Operator pressed twice in a row: the last one wins
        if self.display == "" and self.pending_operator is not None:
            self.pending_operator = op
            return self.display

        self.pending_operand = self.current_value()
        self.pending_operator = op
        self.display = ""
        return self.display

    def evaluate_equals(self):
        """Apply the pending operator to the stored operand and the display.

        With no operator pending the display value is just reformatted; the
        Swing calculator this replaces showed 0 in that case.
        """
        second = self.current_value()
        if self.pending_operator is None:
            return self._show(lambda: second)

        operation = OPERATORS[self.pending_operator]
        first = self.pending_operand
        # pending operator stays set so a repeated '=' applies it again
        return self._show(lambda: operation(first, second))

    # Scientific operations

    def factorial(self):
        value = self.current_value()
        return self._show(lambda: factorial(value))

    def natural_log(self):
        value = self.current_value()
        return self._show(lambda: natural_log(value))

    def reciprocal(self):
        value = self.current_value()
        return self._show(lambda: reciprocal(value))

    def square_root(self):
        value = self.current_value()
        return self._show(lambda: square_root(value))

    # Memory

    def memory_clear(self):
        """Clear memory (MC)"""
        self.memory = 0.0
        return self.display

    def memory_add(self):
        """Add display value to memory (M+)"""
        self.memory += self.current_value()
        return self.display

    def memory_subtract(self):
        """Subtract display value from memory (M-)"""
        self.memory -= self.current_value()
        return self.display

    def memory_recall(self):
        """Recall memory value (MR)"""
        memory = self.memory
        return self._show(lambda: memory)

    def all_clear(self):
        """Reset the display (AC). Memory and the pending operation are kept"""
        self.display = "0"
        return self.display

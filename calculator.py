"""
Calculator Engine for SimpleCalc
Event-driven state machine behind the entry and formula displays
"""
import math
from enum import Enum

import config
from number_format import format_number, parse_number, standardize


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def from_symbol(cls, symbol):
        """Accept display glyphs as well as the ASCII keyboard aliases"""
        symbol = {"*": "×", "/": "÷"}.get(symbol, symbol)
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operator: {symbol!r}") from None


class SpecialOperation(Enum):
    SQUARE = "square"
    SQUARE_ROOT = "sqrt"
    RECIPROCAL = "reciprocal"
    PERCENT = "percent"

    @property
    def glyph(self):
        """Prefix used when the operation is written into the formula"""
        return _SPECIAL_GLYPHS[self]


_SPECIAL_GLYPHS = {
    SpecialOperation.SQUARE: "sqr",
    SpecialOperation.SQUARE_ROOT: "√",
    SpecialOperation.RECIPROCAL: "1/",
    SpecialOperation.PERCENT: "%",
}


class ErrorCode(Enum):
    DIVIDE_BY_ZERO = "divide_by_zero"
    INVALID_DOMAIN = "invalid_domain"


class CalculatorEngine:
    """Holds operands, pending operations and error state for one session.

    Every public ``on_*`` method handles exactly one input event and returns
    the snapshot the host should render. Calculation errors never raise; they
    are reported through the snapshot's ``error`` field and a translated
    message in place of the entry.
    """

    def __init__(self, tr=None):
        self.tr = tr or (lambda text: text)
        self.entry = "0"
        self.formula = ""
        self.first = None
        self.second = None
        self.result = None
        self.pending_operator = None
        self.pending_special = None
        self.error = None
        self.operations_enabled = True
        self.clear_on_next_digit = False

    # ── Rendering ──────────────────────────────────────────────────────────
    @property
    def entry_display(self):
        if self.error is not None:
            return self.tr(config.ERROR_MESSAGES[self.error.value])
        return self.entry

    def snapshot(self):
        """Current display state for the host"""
        return {
            'entry': self.entry_display,
            'formula': self.formula,
            'operations_enabled': self.operations_enabled,
            'error': self.error.value if self.error else None,
        }

    def _result_text(self):
        if self.result is None:
            return None
        return format_number(self.result)

    def _entry_is_final(self):
        """Infinity/NaN entries can only be replaced, never edited"""
        return not math.isfinite(parse_number(self.entry))

    # ── Dispatch ───────────────────────────────────────────────────────────
    def handle(self, action, value=None):
        """Route a named input event; unknown actions raise ValueError"""
        if action == "digit":
            return self.on_digit(value)
        if action == "operator":
            return self.on_binary_operator(value)
        if action == "special":
            return self.on_special_operation(value)

        handlers = {
            'dot': self.on_dot,
            'toggle_sign': self.on_toggle_sign,
            'clear': self.on_clear,
            'clear_entry': self.on_clear_entry,
            'backspace': self.on_backspace,
            'equals': self.on_equals,
        }
        if action not in handlers:
            raise ValueError(f"Unknown action: {action}")
        return handlers[action]()

    # ── Entry editing ──────────────────────────────────────────────────────
    def on_digit(self, digit):
        digit = str(digit)
        if len(digit) != 1 or not digit.isdigit():
            raise ValueError(f"Invalid digit: {digit!r}")

        self._enable_operations()

        # Start a new number once after a finalized result instead of appending to it
        if self.entry == self._result_text() and not self.clear_on_next_digit:
            self.on_clear_entry()
            self.clear_on_next_digit = True

        if self._entry_is_final():
            self.entry = "0"

        limit = (config.MAX_ENTRY_DIGITS
                 + int("." in self.entry)
                 + int("-" in self.entry))
        if len(self.entry) < limit:
            if self.entry == "0":
                self.entry = digit
            else:
                self.entry += digit
        return self.snapshot()

    def on_dot(self):
        if (self.operations_enabled and "." not in self.entry
                and not self._entry_is_final()):
            self.entry += "."
        return self.snapshot()

    def on_toggle_sign(self):
        if not self.operations_enabled:
            return self.snapshot()
        self.clear_on_next_digit = False
        value = parse_number(self.entry)
        if value != 0.0:
            self.entry = format_number(-value)
        return self.snapshot()

    def on_clear(self):
        """C: reset the displays but keep operands and the last result"""
        self._enable_operations()
        self.entry = "0"
        self._clear_formula()
        return self.snapshot()

    def on_clear_entry(self):
        """CE: reset the entry, and the formula too once it is finalized"""
        self._enable_operations()
        if "=" in self.formula:
            self._clear_formula()
        self.entry = "0"
        return self.snapshot()

    def on_backspace(self):
        self._enable_operations()
        if len(self.entry) == 1:
            self.entry = "0"
        else:
            self.entry = standardize(self.entry[:-1])
        return self.snapshot()

    # ── Operations ─────────────────────────────────────────────────────────
    def on_binary_operator(self, operator):
        if not isinstance(operator, BinaryOperator):
            operator = BinaryOperator.from_symbol(operator)
        if not self.operations_enabled:
            return self.snapshot()

        self.clear_on_next_digit = False
        value = parse_number(self.entry)

        if value == self.result:
            # Operator pressed right after a result: chain from it
            self.first = self.result
        elif self.formula:
            self.second = value
            error = self._apply_pending_operator()
            if error is not None:
                return self._handle_error(error)
        else:
            self.first = value

        self.formula = f"{format_number(self.first)} {operator.value}"
        self.pending_operator = operator
        self.entry = "0"
        return self.snapshot()

    def on_special_operation(self, kind):
        if not isinstance(kind, SpecialOperation):
            try:
                kind = SpecialOperation(kind)
            except ValueError:
                raise ValueError(f"Unknown special operation: {kind!r}") from None
        if not self.operations_enabled:
            return self.snapshot()

        self.clear_on_next_digit = False
        value = parse_number(self.entry)

        if kind is SpecialOperation.SQUARE:
            self.entry = format_number(value * value)
        elif kind is SpecialOperation.SQUARE_ROOT:
            if value < 0:
                return self._handle_error(ErrorCode.INVALID_DOMAIN)
            self.entry = format_number(math.sqrt(value))
        elif kind is SpecialOperation.RECIPROCAL:
            if value == 0:
                return self._handle_error(ErrorCode.DIVIDE_BY_ZERO)
            self.entry = format_number(1.0 / value)
        elif kind is SpecialOperation.PERCENT:
            if self.first is not None:
                self.entry = format_number(self.first * value / 100.0)
            else:
                self.entry = "0"

        self.pending_special = kind
        # Pre-operation value, rendered into the formula by on_equals
        self.result = value
        return self.on_equals()

    def on_equals(self):
        self._enable_operations()

        if self.entry == self._result_text() and self.entry != "0":
            return self.snapshot()

        self.second = parse_number(self.entry)

        if self.formula and "=" not in self.formula:
            error = self._apply_pending_operator()
            if error is not None:
                return self._handle_error(error)

            if self.pending_special is not None:
                self.formula += " " + self._special_formula()
            else:
                self.formula += f" {format_number(self.second)} ="

            self.result = self.first
            self.entry = format_number(self.result)
            self.pending_special = None
        elif self.pending_special is not None:
            # Special key pressed again after a completed expression
            self.formula = self._special_formula()
            self.pending_operator = None
            self.pending_special = None
            self.result = self.second
        return self.snapshot()

    # ── Internals ──────────────────────────────────────────────────────────
    def _special_formula(self):
        if self.pending_special is SpecialOperation.PERCENT:
            base = self.first if self.first is not None else 0.0
            return f"({format_number(base)}) × {format_number(self.result)}% ="
        return f"{self.pending_special.glyph}({format_number(self.result)}) ="

    def _apply_pending_operator(self):
        """Fold second into first; returns an ErrorCode or None"""
        operator = self.pending_operator
        if operator is None:
            self.first = self.second
        elif operator is BinaryOperator.ADD:
            self.first += self.second
        elif operator is BinaryOperator.SUBTRACT:
            self.first -= self.second
        elif operator is BinaryOperator.MULTIPLY:
            self.first *= self.second
        elif operator is BinaryOperator.DIVIDE:
            if self.second == 0:
                return ErrorCode.DIVIDE_BY_ZERO
            self.first /= self.second
        return None

    def _clear_formula(self):
        self.formula = ""
        self.pending_operator = None

    def _reset_calculation_values(self):
        self.first = self.second = self.result = None
        self.pending_special = None

    def _handle_error(self, error):
        self._reset_calculation_values()
        self.operations_enabled = False
        self.error = error
        self.entry = "0"
        self._clear_formula()
        return self.snapshot()

    def _enable_operations(self):
        """Leave the error state; resets the entry the first time it fires"""
        if self.operations_enabled:
            return
        self.operations_enabled = True
        self.error = None
        self.entry = "0"

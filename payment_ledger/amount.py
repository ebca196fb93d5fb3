"""Exact money amounts with four fractional digits.

Amounts are kept as a scaled integer (ten-thousandths), so repeated
additions and subtractions never drift the way binary floats do.
"""
import functools
import re
from decimal import Decimal, InvalidOperation


class AmountError(ValueError):

    """Text could not be read as an amount."""


@functools.total_ordering
class Amount:

    """Signed fixed-point amount."""

    PRECISION = 4
    SCALE = 10 ** PRECISION
    QUANTUM = Decimal(1).scaleb(-PRECISION)
    PATTERN = re.compile(r'[+-]?[0-9]+(\.[0-9]+)?')

    __slots__ = ('_units',)

    def __init__(self, units=0):
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f'Amount units must be int, got {type(units).__name__}')
        self._units = units

    @classmethod
    def zero(cls):
        """Get a zero amount."""
        return cls(0)

    @classmethod
    def parse(cls, text):
        """Read an amount from decimal text.

        Digits past the fourth fractional place are only allowed when they
        are zeros; anything else would need rounding and is refused.
        """
        if not isinstance(text, str):
            raise AmountError(f'Amount must be text, got {text!r}')
        text = text.strip()
        if not cls.PATTERN.fullmatch(text):
            raise AmountError(f'Not a decimal number: {text!r}')
        value = Decimal(text)
        try:
            quantized = value.quantize(cls.QUANTUM)
        except InvalidOperation:
            raise AmountError(f'Amount out of range: {text!r}') from None
        if quantized != value:
            raise AmountError(f'More than {cls.PRECISION} fractional digits: {text!r}')
        sign, digits, _ = quantized.as_tuple()
        units = int(''.join(map(str, digits)))
        return cls(-units if sign else units)

    @property
    def units(self):
        """Get the scaled integer value."""
        return self._units

    def add(self, other):
        """Get the exact sum."""
        return Amount(self._units + other.units)

    def subtract(self, other):
        """Get the exact difference."""
        return Amount(self._units - other.units)

    def is_negative(self):
        """Check whether the amount is below zero."""
        return self._units < 0

    def is_positive(self):
        """Check whether the amount is above zero."""
        return self._units > 0

    def __add__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return Amount(-self._units)

    def __eq__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self._units == other.units

    def __lt__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self._units < other.units

    def __hash__(self):
        return hash(self._units)

    def __str__(self):
        whole, fraction = divmod(abs(self._units), self.SCALE)
        sign = '-' if self._units < 0 else ''
        return f'{sign}{whole}.{fraction:0{self.PRECISION}d}'

    def __repr__(self):
        return f"Amount('{self}')"

from math import gcd
from numbers import Integral

from models.errors import InvalidDenominatorError, DivisionByZeroError


class ExactFraction:
    """
    Normalized rational number.

    Invariants (hold for every instance):
      - denominator > 0
      - gcd(|numerator|, denominator) == 1
      - zero is always stored as 0/1

    Instances are immutable; every arithmetic operation returns a new,
    normalized ExactFraction. Python integers are unbounded, so the
    cross-multiplications below never overflow.
    """

    __slots__ = ("_numerator", "_denominator")

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, numerator, denominator=1):
        if not isinstance(numerator, Integral) or not isinstance(denominator, Integral):
            raise TypeError(
                f"ExactFraction needs integer terms, got "
                f"{type(numerator).__name__} and {type(denominator).__name__}"
            )
        if denominator == 0:
            raise InvalidDenominatorError("Denominator cannot be zero")

        numerator = int(numerator)
        denominator = int(denominator)

        # gcd(0, d) == |d|, so 0/d collapses to 0/1
        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    # ------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------
    def add(self, other):
        other = as_fraction(other)
        return ExactFraction(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other):
        other = as_fraction(other)
        return ExactFraction(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other):
        other = as_fraction(other)
        return ExactFraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other):
        """
        Raises DivisionByZeroError when `other` is zero; the check happens
        before the reciprocal is built, so InvalidDenominatorError is never
        seen by callers of divide().
        """
        other = as_fraction(other)
        if other._numerator == 0:
            raise DivisionByZeroError("Division by zero")
        return ExactFraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def negate(self):
        return ExactFraction(-self._numerator, self._denominator)

    # ------------------------------------------------------------
    # Comparison & conversion
    # ------------------------------------------------------------
    def equals(self, other):
        """Structural equality; valid because the representation is canonical."""
        other = as_fraction(other)
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def is_zero(self):
        return self._numerator == 0

    def to_display_string(self):
        return f"{self._numerator}/{self._denominator}"

    # ------------------------------------------------------------
    # Python operator protocol
    # ------------------------------------------------------------
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_fraction(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_fraction(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_fraction(other).multiply(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_fraction(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.equals(as_fraction(other))

    def __hash__(self):
        # whole values hash like the int they compare equal to
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # Denominators are positive, so cross-multiplying keeps the order.
    def _cross(self, other):
        other = as_fraction(other)
        return self._numerator * other._denominator, other._numerator * self._denominator

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left < right

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left <= right

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left > right

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left >= right

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"ExactFraction({self._numerator}, {self._denominator})"


ZERO = ExactFraction(0, 1)
ONE = ExactFraction(1, 1)
MINUS_ONE = ExactFraction(-1, 1)


def _is_operand(value):
    return isinstance(value, (ExactFraction, Integral))


def as_fraction(value):
    """
    Coerce an int (or an existing ExactFraction) into an ExactFraction.

    Example:
        as_fraction(3) -> ExactFraction(3, 1)
    """
    if isinstance(value, ExactFraction):
        return value
    if isinstance(value, Integral):
        return ExactFraction(value, 1)
    raise TypeError(f"Cannot use {type(value).__name__} as an exact fraction")

"""
Exceptions raised by the exact-arithmetic core.

Both errors are raised at the point of violation and propagate unchanged
through every fraction and line operation that triggered them.
"""


class LineAnalysisError(ArithmeticError):
    """Base class for every error raised by the models package."""


class InvalidDenominatorError(LineAnalysisError, ValueError):
    """Raised when a fraction is constructed with a zero denominator."""


class DivisionByZeroError(LineAnalysisError, ZeroDivisionError):
    """Raised when dividing by a fraction whose value is zero."""

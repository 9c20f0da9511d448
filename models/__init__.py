"""
Data Models

Defines the exact-arithmetic core:
- ExactFraction
- LineEquation
- error taxonomy
"""

from .errors import LineAnalysisError, InvalidDenominatorError, DivisionByZeroError
from .fraction import ExactFraction, as_fraction
from .line_equation import LineEquation

__all__ = [
    "LineAnalysisError",
    "InvalidDenominatorError",
    "DivisionByZeroError",
    "ExactFraction",
    "as_fraction",
    "LineEquation",
]

from models.fraction import ZERO, MINUS_ONE, as_fraction


class LineEquation:
    """
    Line in implicit form  a*x + b*y + c = 0  with exact coefficients.

    Supports:
      - intersection with the x and y axes
      - intersection with another line (Cramer's rule)
      - parallelism test
      - exact point membership

    No validation is done on the coefficients: a line with a == b == 0 is
    accepted and yields meaningless query results.
    """

    __slots__ = ("_a", "_b", "_c")

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, a, b, c):
        object.__setattr__(self, "_a", as_fraction(a))
        object.__setattr__(self, "_b", as_fraction(b))
        object.__setattr__(self, "_c", as_fraction(c))

    @classmethod
    def from_integers(cls, a: int, b: int, c: int):
        return cls(a, b, c)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def c(self):
        return self._c

    @property
    def coefficients(self):
        return self._a, self._b, self._c

    # ------------------------------------------------------------
    # Axis intersections
    # ------------------------------------------------------------
    def intersection_with_x_axis(self):
        """
        Returns (x, 0) with x = -(c / a), or None when b is zero.

        The guard looks at b, not at the divisor a: for a == 0 (and b != 0)
        the division raises DivisionByZeroError.
        """
        if self._b.equals(ZERO):
            return None
        x = self._c.divide(self._a).multiply(MINUS_ONE)
        return x, ZERO

    def intersection_with_y_axis(self):
        """
        Returns (0, y) with y = -(c / b), or None when a is zero.

        Mirrors intersection_with_x_axis: b == 0 (and a != 0) raises
        DivisionByZeroError.
        """
        if self._a.equals(ZERO):
            return None
        y = self._c.divide(self._b).multiply(MINUS_ONE)
        return ZERO, y

    # ------------------------------------------------------------
    # Line / line queries
    # ------------------------------------------------------------
    def determinant(self, other):
        """a1*b2 - b1*a2"""
        return self._a.multiply(other._b).subtract(self._b.multiply(other._a))

    def intersection_with(self, other):
        """
        Solves
            a1 x + b1 y + c1 = 0
            a2 x + b2 y + c2 = 0
        by Cramer's rule. Returns (x, y), or None when the determinant is
        zero (parallel or identical lines).
        """
        det = self.determinant(other)
        if det.equals(ZERO):
            return None

        x = (
            self._c.multiply(other._b)
            .subtract(self._b.multiply(other._c))
            .divide(det)
            .multiply(MINUS_ONE)
        )
        y = (
            self._a.multiply(other._c)
            .subtract(self._c.multiply(other._a))
            .divide(det)
            .multiply(MINUS_ONE)
        )
        return x, y

    def is_parallel(self, other):
        return self._a.multiply(other._b).equals(self._b.multiply(other._a))

    def contains(self, point):
        """Exact check of a*x + b*y + c == 0 for an (x, y) pair."""
        x, y = (as_fraction(v) for v in point)
        value = self._a.multiply(x).add(self._b.multiply(y)).add(self._c)
        return value.is_zero()

    # ------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------
    def to_display_string(self):
        return f"{self._a}*x + {self._b}*y + {self._c} = 0"

    # ------------------------------------------------------------
    # Equality / repr
    # ------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, LineEquation):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self):
        return hash(self.coefficients)

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"LineEquation(a={self._a}, b={self._b}, c={self._c})"

"""Group law on elliptic curves in short Weierstrass form y^2 = x^3 + a*x + b."""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Self

from ecarith.errors import CurveMismatchError, GroupLawError, NotOnCurveError, SingularCurveError
from ecarith.fields.prime_field import FieldElement, PrimeField

logger = logging.getLogger(__name__)

Coordinate = FieldElement | int | Fraction


def _is_zero(element: Coordinate) -> bool:
    return element.is_zero() if isinstance(element, FieldElement) else element == 0


def _normalise(element: Coordinate) -> Coordinate:
    # Rational coordinates with denominator 1 are stored as integers
    if isinstance(element, Fraction) and element.denominator == 1:
        return element.numerator
    return element


def _divide(numerator: Coordinate, denominator: Coordinate) -> Coordinate:
    """Exact division in the coordinate ring.

    Field elements are divided with field division, integers and rationals with rational division.
    """
    if isinstance(numerator, FieldElement) or isinstance(denominator, FieldElement):
        return numerator / denominator
    return _normalise(Fraction(numerator) / Fraction(denominator))


def _to_list(element: Coordinate) -> list:
    return element.to_list() if isinstance(element, FieldElement) else [element]


def evaluate_curve_equation(x: Coordinate, y: Coordinate, a: Coordinate, b: Coordinate) -> Coordinate:
    """Evaluate `y^2 - (x^3 + a*x + b)`, which vanishes exactly on the points of the curve."""
    return y * y - (x * x * x + a * x + b)


def is_on_curve(x: Coordinate, y: Coordinate, a: Coordinate, b: Coordinate) -> bool:
    """Check whether `(x, y)` satisfies `y^2 = x^3 + a*x + b`."""
    return _is_zero(evaluate_curve_equation(x, y, a, b))


@dataclass(frozen=True)
class CurvePoint:
    """Point on the elliptic curve E: y^2 = x^3 + a*x + b.

    The coordinates are either both elements of a prime field F_q, or both integers/rationals. The
    point at infinity, the identity of the group E, has `x = y = None`. Points are immutable: the group
    operations return new points.

    Two points are equal if they are both the point at infinity, or both finite with the same
    coordinates, and they lie on the same curve.

    Attributes:
        x (FieldElement | int | Fraction | None): The x coordinate, `None` for the point at infinity.
        y (FieldElement | int | Fraction | None): The y coordinate, `None` for the point at infinity.
        a (FieldElement | int | Fraction): The `a` coefficient in the equation of the curve.
        b (FieldElement | int | Fraction): The `b` coefficient in the equation of the curve.
    """

    x: Coordinate | None
    y: Coordinate | None
    a: Coordinate
    b: Coordinate

    def __post_init__(self):
        """Validate the point.

        Raises:
            ValueError: If exactly one of the coordinates is `None`.
            NotOnCurveError: If the point is finite and does not satisfy the equation of the curve.
        """
        if (self.x is None) != (self.y is None):
            msg = f"({self.x}, {self.y}) is not valid: "
            msg += "the coordinates must be both present or both absent"
            raise ValueError(msg)
        if self.x is not None and not is_on_curve(self.x, self.y, self.a, self.b):
            msg = f"({self.x}, {self.y}) is not on the curve y^2 = x^3 + {self.a}*x + {self.b}"
            raise NotOnCurveError(msg)

    @classmethod
    def new_point(cls, x: Coordinate, y: Coordinate, a: Coordinate, b: Coordinate) -> Self:
        """Construct the finite point `(x, y)` of the curve y^2 = x^3 + a*x + b.

        Raises:
            NotOnCurveError: If `(x, y)` is not on the curve.
        """
        return cls(x, y, a, b)

    @classmethod
    def infinity(cls, a: Coordinate, b: Coordinate) -> Self:
        """Construct the point at infinity of the curve y^2 = x^3 + a*x + b."""
        return cls(None, None, a, b)

    def is_infinity(self) -> bool:
        return self.x is None

    def _check_same_curve(self, other, operation: str) -> None:
        if not isinstance(other, CurvePoint):
            msg = f"Cannot {operation} a point and {type(other).__name__}"
            raise TypeError(msg)
        if self.a != other.a or self.b != other.b:
            msg = f"Points {self}, {other} are not on the same curve: "
            msg += f"self.a: {self.a}, self.b: {self.b}, other.a: {other.a}, other.b: {other.b}"
            raise CurveMismatchError(msg)

    def gradient(self, other: Self) -> Coordinate:
        """Compute the gradient of the line through `self` and `other`.

        The line is the chord through the points if `self.x != other.x`, and the tangent to the curve at
        `self` if `self == other`.

        Args:
            other (CurvePoint): A point on the same curve as `self`.

        Returns:
            The gradient `(y2 - y1) / (x2 - x1)` of the chord, or `(3*x1^2 + a) / (2*y1)` of the tangent.

        Raises:
            CurveMismatchError: If `other` is on a different curve.
            ValueError: If one of the points is the point at infinity, or the line is vertical.
        """
        self._check_same_curve(other, "compute the gradient of")
        if self.is_infinity() or other.is_infinity():
            msg = "The gradient is not defined for the point at infinity"
            raise ValueError(msg)
        if self.x != other.x:
            return _divide(other.y - self.y, other.x - self.x)
        if self.y == other.y and not _is_zero(self.y):
            return _divide(3 * self.x * self.x + self.a, 2 * self.y)
        msg = f"The line through {self} and {other} is vertical"
        raise ValueError(msg)

    def _third_intersection(self, other: Self, gradient: Coordinate) -> Self:
        """Return the reflection of the third point in which the line through `self` and `other` meets E."""
        x = gradient * gradient - self.x - other.x
        y = gradient * (self.x - x) - self.y
        return CurvePoint(_normalise(x), _normalise(y), self.a, self.b)

    def add(self, other: Self) -> Self:
        """Compute `self + other` with the group law of E.

        The cases are evaluated in order:
            - one of the points is the point at infinity: return the other point
            - `x1 == x2` and `y1 == -y2` (this includes doubling a point with `y == 0`): return the point
            at infinity
            - `self == other`: double along the tangent
            - `x1 != x2`: add along the chord

        Args:
            other (CurvePoint): A point on the same curve as `self`.

        Returns:
            The point `self + other`.

        Raises:
            CurveMismatchError: If `other` is on a different curve.
            GroupLawError: If none of the cases above applies, which no pair of points on E can cause.

        Example:
            >>> CurvePoint(2, 5, 5, 7).add(CurvePoint(-1, -1, 5, 7))
            CurvePoint(x=3, y=-7, a=5, b=7)
        """
        self._check_same_curve(other, "add")

        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        if self.x == other.x and self.y == -other.y:
            return CurvePoint.infinity(self.a, self.b)
        if self.x == other.x and self.y == other.y:
            return self._third_intersection(self, _divide(3 * self.x * self.x + self.a, 2 * self.y))
        if self.x != other.x:
            return self._third_intersection(other, _divide(other.y - self.y, other.x - self.x))

        logger.error("Group law reached no case for %s and %s", self, other)
        msg = f"Cannot add {self} and {other}: the points do not fall in any case of the group law"
        raise GroupLawError(msg)

    def double(self) -> Self:
        """Compute `2 * self`."""
        return self.add(self)

    def negate(self) -> Self:
        """Compute `-self`, the reflection of `self` in the x-axis."""
        if self.is_infinity():
            return self
        return CurvePoint(self.x, -self.y, self.a, self.b)

    def sub(self, other: Self) -> Self:
        """Compute `self - other`."""
        self._check_same_curve(other, "subtract")
        return self.add(other.negate())

    def multiply(self, n: int) -> Self:
        """Compute `n * self` by double-and-add.

        The bits of `|n|` are processed from the most significant one: at each step the accumulator is
        doubled, and `self` is added to it if the bit is set. Negative multipliers act on `-self`.

        Args:
            n (int): The multiplier, of any sign.

        Returns:
            The point `n * self`; the point at infinity if `n == 0`.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            msg = f"The multiplier must be an integer: n: {n!r}"
            raise TypeError(msg)
        if n < 0:
            return self.negate().multiply(-n)

        logger.debug("Multiplying %s by a %d-bit scalar", self, n.bit_length())
        out = CurvePoint.infinity(self.a, self.b)
        for i in reversed(range(n.bit_length())):
            out = out.double()
            if (n >> i) & 1:
                out = out.add(self)
        return out

    def to_list(self) -> list:
        """Return the list of coordinates of `self`: `[]` for the point at infinity."""
        if self.is_infinity():
            return []
        return [*_to_list(self.x), *_to_list(self.y)]

    def __add__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.multiply(n)

    __rmul__ = __mul__

    def __str__(self):
        if self.is_infinity():
            return f"Point(infinity)_{self.a}_{self.b}"
        return f"Point({self.x},{self.y})_{self.a}_{self.b}"


@dataclass(frozen=True)
class ShortWeierstrassEllipticCurve:
    """Elliptic curve y^2 = x^3 + a*x + b, used to build its points.

    If `field` is given, integer coefficients are mapped to their residues in `field`, and integer
    coordinates passed to `__call__` are taken as elements of `field`.

    Example:
        >>> E = ShortWeierstrassEllipticCurve(a=0, b=7, field=PrimeField(223))
        >>> P = E(192, 105)
        >>> P + P == E(49, 71)
        True

    Attributes:
        a (FieldElement | int | Fraction): The `a` coefficient in the equation of the curve.
        b (FieldElement | int | Fraction): The `b` coefficient in the equation of the curve.
        field (PrimeField | None): The field over which the curve is defined, `None` for curves over the
            rationals.
    """

    a: Coordinate
    b: Coordinate
    field: PrimeField | None = None

    def __post_init__(self):
        """Lift the coefficients to `field` and validate the curve.

        Raises:
            SingularCurveError: If `4a^3 + 27b^2 == 0`.
        """
        if self.field is not None:
            object.__setattr__(self, "a", self._lift_coefficient(self.a))
            object.__setattr__(self, "b", self._lift_coefficient(self.b))
        if _is_zero(4 * self.a * self.a * self.a + 27 * self.b * self.b):
            msg = f"The curve y^2 = x^3 + {self.a}*x + {self.b} is singular"
            raise SingularCurveError(msg)

    def _lift_coefficient(self, coefficient: Coordinate) -> Coordinate:
        if isinstance(coefficient, int) and not isinstance(coefficient, bool):
            return self.field.reduce(coefficient)
        return coefficient

    def _lift_coordinate(self, coordinate: Coordinate) -> Coordinate:
        if self.field is not None and isinstance(coordinate, int) and not isinstance(coordinate, bool):
            return self.field(coordinate)
        return coordinate

    def __call__(self, x: Coordinate, y: Coordinate) -> CurvePoint:
        """Construct the finite point `(x, y)` of the curve.

        Raises:
            OutOfRangeError: If the curve is defined over a field and an integer coordinate is not in
                `[0, q)`.
            NotOnCurveError: If `(x, y)` is not on the curve.
        """
        return CurvePoint(self._lift_coordinate(x), self._lift_coordinate(y), self.a, self.b)

    def infinity(self) -> CurvePoint:
        """Construct the point at infinity of the curve."""
        return CurvePoint.infinity(self.a, self.b)

    def is_on_curve(self, x: Coordinate, y: Coordinate) -> bool:
        return is_on_curve(self._lift_coordinate(x), self._lift_coordinate(y), self.a, self.b)

    def __contains__(self, point) -> bool:
        return isinstance(point, CurvePoint) and point.a == self.a and point.b == self.b

"""Errors raised by finite field and elliptic curve arithmetic."""


class OutOfRangeError(ValueError):
    """The value of a field element is not in `[0, modulus)`."""


class NotPrimeError(ValueError):
    """The modulus of a field is not a prime number."""


class FieldMismatchError(ValueError):
    """The operands of a field operation belong to fields with different moduli."""


class DivisionByZeroError(ZeroDivisionError):
    """Division by (or inversion of) the zero element of a field."""


class NotOnCurveError(ValueError):
    """The coordinates of a point do not satisfy the curve equation."""


class CurveMismatchError(ValueError):
    """The operands of a group operation belong to curves with different coefficients."""


class SingularCurveError(ValueError):
    """The discriminant `4a^3 + 27b^2` of the curve vanishes."""


class GroupLawError(RuntimeError):
    """The group law reached a configuration that no pair of valid points can produce."""

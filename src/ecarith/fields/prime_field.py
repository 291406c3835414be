"""Arithmetic operations in the prime field F_q."""

from dataclasses import dataclass
from typing import Self

from ecarith.errors import DivisionByZeroError, FieldMismatchError, NotPrimeError, OutOfRangeError
from ecarith.util.utility_functions import is_prime


def _check_modulus(modulus: int) -> None:
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        msg = f"The modulus must be an integer: modulus: {modulus!r}"
        raise TypeError(msg)
    if not is_prime(modulus):
        msg = f"The order of the field must be a prime number: modulus: {modulus}"
        raise NotPrimeError(msg)


@dataclass(frozen=True)
class FieldElement:
    """Element of the prime field F_q.

    Elements are immutable: every operation returns a new element. Operands of binary operations must
    belong to the same field. Plain integers are accepted as operands and are mapped to their residue
    modulo `q`.

    Attributes:
        value (int): The representative of the element in `[0, q)`.
        modulus (int): The characteristic `q` of the field.
    """

    value: int
    modulus: int

    def __post_init__(self):
        """Validate the element.

        Raises:
            TypeError: If `value` or `modulus` is not an integer.
            NotPrimeError: If `modulus` is not a prime number.
            OutOfRangeError: If `value` is not in `[0, modulus)`.
        """
        _check_modulus(self.modulus)
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"The value of a field element must be an integer: value: {self.value!r}"
            raise TypeError(msg)
        if not 0 <= self.value < self.modulus:
            msg = f"Num {self.value} not in field range 0 to {self.modulus - 1}"
            raise OutOfRangeError(msg)

    @property
    def field(self) -> "PrimeField":
        """The field F_q the element belongs to."""
        return PrimeField(self.modulus)

    def _coerce(self, other: Self | int, operation: str) -> Self:
        """Return `other` as an element of the same field as `self`.

        Raises:
            FieldMismatchError: If `other` is a field element with a different modulus.
            TypeError: If `other` is neither a field element nor an integer.
        """
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                msg = f"Cannot {operation} two numbers in different fields: "
                msg += f"self.modulus: {self.modulus}, other.modulus: {other.modulus}"
                raise FieldMismatchError(msg)
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return FieldElement(other % self.modulus, self.modulus)
        msg = f"Cannot {operation} a field element and {type(other).__name__}"
        raise TypeError(msg)

    def add(self, other: Self | int) -> Self:
        """Compute `self + other` in F_q."""
        other = self._coerce(other, "add")
        return FieldElement((self.value + other.value) % self.modulus, self.modulus)

    def sub(self, other: Self | int) -> Self:
        """Compute `self - other` in F_q."""
        other = self._coerce(other, "subtract")
        return FieldElement((self.value - other.value) % self.modulus, self.modulus)

    def mul(self, other: Self | int) -> Self:
        """Compute `self * other` in F_q."""
        other = self._coerce(other, "multiply")
        return FieldElement((self.value * other.value) % self.modulus, self.modulus)

    def negate(self) -> Self:
        """Compute `-self` in F_q."""
        return FieldElement(-self.value % self.modulus, self.modulus)

    def pow(self, exponent: int) -> Self:
        """Compute `self^exponent` in F_q.

        The exponent is first reduced modulo `q - 1`, the order of the multiplicative group of F_q. By
        Fermat's little theorem this does not change the result, and it maps a negative exponent `-n` to
        the positive exponent of `self^-n`. The power is then computed by square-and-multiply.

        Args:
            exponent (int): The exponent, of any sign.

        Returns:
            The element `self^exponent`. The reduction applies to every base, so `0^k == 0^(k mod (q-1))`
            and in particular `0^(q-1) == 1`.

        Example:
            >>> FieldElement(7, 13).pow(-3)
            FieldElement(value=8, modulus=13)
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            msg = f"The exponent must be an integer: exponent: {exponent!r}"
            raise TypeError(msg)
        reduced_exponent = exponent % (self.modulus - 1)
        return FieldElement(pow(self.value, reduced_exponent, self.modulus), self.modulus)

    def inverse(self) -> Self:
        """Compute `self^-1` in F_q as `self^(q-2)`.

        Raises:
            DivisionByZeroError: If `self` is zero.
        """
        if self.value == 0:
            msg = f"The zero element of F_{self.modulus} has no inverse"
            raise DivisionByZeroError(msg)
        return self.pow(self.modulus - 2)

    def div(self, other: Self | int) -> Self:
        """Compute `self / other` in F_q as `self * other^(q-2)`.

        Args:
            other (FieldElement | int): The divisor.

        Returns:
            The element `self * other^-1`.

        Raises:
            FieldMismatchError: If `other` belongs to a different field.
            DivisionByZeroError: If `other` is zero.
        """
        other = self._coerce(other, "divide")
        if other.value == 0:
            msg = f"Cannot divide {self} by zero"
            raise DivisionByZeroError(msg)
        return self.mul(other.pow(self.modulus - 2))

    def is_zero(self) -> bool:
        return self.value == 0

    def to_int(self) -> int:
        return self.value

    def to_list(self) -> list[int]:
        """Return the list of coordinates of `self` over F_q."""
        return [self.value]

    def __add__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._coerce(other, "subtract").sub(self)

    def __mul__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._coerce(other, "divide").div(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __str__(self):
        return f"FieldElement_{self.modulus}({self.value})"


@dataclass(frozen=True)
class PrimeField:
    """The prime field F_q, used to build its elements.

    Example:
        >>> Fq = PrimeField(19)
        >>> Fq(2) / Fq(7)
        FieldElement(value=3, modulus=19)
        >>> Fq.reduce(-1)
        FieldElement(value=18, modulus=19)

    Attributes:
        modulus (int): The characteristic `q` of the field.
    """

    modulus: int

    def __post_init__(self):
        _check_modulus(self.modulus)

    def __call__(self, value: int) -> FieldElement:
        """Return the element of F_q with representative `value`, which must be in `[0, q)`."""
        return FieldElement(value, self.modulus)

    def reduce(self, value: int) -> FieldElement:
        """Return the residue class of the integer `value` modulo `q`."""
        return FieldElement(value % self.modulus, self.modulus)

    def zero(self) -> FieldElement:
        return FieldElement(0, self.modulus)

    def one(self) -> FieldElement:
        return FieldElement(1, self.modulus)

    def __contains__(self, element) -> bool:
        return isinstance(element, FieldElement) and element.modulus == self.modulus

    def __str__(self):
        return f"F_{self.modulus}"

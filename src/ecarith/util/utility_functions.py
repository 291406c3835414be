"""Utility functions."""

from functools import lru_cache

from sympy import isprime


@lru_cache(maxsize=128)
def is_prime(n: int) -> bool:
    """Check whether `n` is a prime number.

    The check is delegated to `sympy.isprime`, which is exact below 2^64 and runs the Baillie-PSW test
    above. The result is cached per modulus, as every field element checks its modulus on construction.

    Args:
        n (int): The integer to test.

    Returns:
        `True` if `n` is prime, `False` otherwise.

    Example:
        >>> is_prime(13)
        True
        >>> is_prime(1)
        False
        >>> is_prime(561)
        False
    """
    return bool(isprime(n))

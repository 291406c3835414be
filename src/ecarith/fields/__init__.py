"""fields package.

This package provides modules for arithmetic operations in finite fields.

Modules:
    - prime_field: Contains the FieldElement class for arithmetic operations in the prime field F_q, and the
    PrimeField class used to build the elements of F_q.

Usage example:
    >>> from ecarith.fields.prime_field import PrimeField
    >>> Fq = PrimeField(13)
    >>> Fq(7) + Fq(12)
    FieldElement(value=6, modulus=13)
"""

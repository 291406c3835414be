"""ecarith: A Python package for prime field and elliptic curve arithmetic.

The `ecarith` package provides the two arithmetic primitives underlying elliptic curve cryptography: elements
of a prime field F_q, and points on an elliptic curve y^2 = x^3 + a*x + b in short Weierstrass form, defined
over F_q or over the rationals, together with the group law.

Usage example:
    Add two points of the curve y^2 = x^3 + 7 over F_223:

    >>> from ecarith.elliptic_curves.short_weierstrass import ShortWeierstrassEllipticCurve
    >>> from ecarith.fields.prime_field import PrimeField
    >>>
    >>> F223 = PrimeField(223)
    >>> E = ShortWeierstrassEllipticCurve(a=0, b=7, field=F223)
    >>> P = E(170, 142)
    >>> Q = E(60, 139)
    >>> P + Q == E(220, 181)
    True

Errors raised by the package are collected in `ecarith.errors`.
"""

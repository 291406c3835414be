"""elliptic_curves package.

This package provides modules for arithmetic on elliptic curves in short Weierstrass form.

Modules:
    - short_weierstrass: Contains the CurvePoint class implementing the group law on y^2 = x^3 + a*x + b,
    and the ShortWeierstrassEllipticCurve class used to build the points of a given curve.
    - secp256k1: The curve secp256k1.

Usage example:
    >>> from ecarith.elliptic_curves.short_weierstrass import CurvePoint
    >>>
    >>> P = CurvePoint(x=-1, y=-1, a=5, b=7)
    >>> P + P
    CurvePoint(x=18, y=77, a=5, b=7)
"""

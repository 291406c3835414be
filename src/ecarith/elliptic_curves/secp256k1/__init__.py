"""secp256k1 package.

This package provides the curve secp256k1: y^2 = x^3 + 7 over F_q, q = 2^256 - 2^32 - 977.

Modules:
    - parameters: The modulus, group order, coefficients and generator of secp256k1.
    - secp256k1: The base and scalar fields, the curve, its generator and its point at infinity.

Usage example:
    >>> from ecarith.elliptic_curves.secp256k1.secp256k1 import generator, point_at_infinity
    >>> from ecarith.elliptic_curves.secp256k1.parameters import GROUP_ORDER
    >>> generator.multiply(GROUP_ORDER) == point_at_infinity
    True
"""

"""The curve secp256k1 over its base field."""

from ecarith.elliptic_curves.secp256k1.parameters import GROUP_ORDER, GX, GY, MODULUS, A, B
from ecarith.elliptic_curves.short_weierstrass import ShortWeierstrassEllipticCurve
from ecarith.fields.prime_field import PrimeField

# Base field and scalar field
Fq_k1 = PrimeField(MODULUS)
Fr_k1 = PrimeField(GROUP_ORDER)

secp256k1 = ShortWeierstrassEllipticCurve(a=A, b=B, field=Fq_k1)
generator = secp256k1(GX, GY)
point_at_infinity = secp256k1.infinity()

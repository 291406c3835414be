import pytest

from ecarith.elliptic_curves.secp256k1.parameters import GROUP_ORDER, GX, GY, MODULUS
from ecarith.elliptic_curves.secp256k1.secp256k1 import Fq_k1, Fr_k1, generator, point_at_infinity, secp256k1

P = generator.multiply(0xDEADBEEF)
Q = generator.multiply(64046112301879843941239178948101222343000413030798872646069227448863068996094)

# Published multiples of the generator
multiples_of_generator = [
    (1, (GX, GY)),
    (
        2,
        (
            0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
            0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
        ),
    ),
    (
        3,
        (
            0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
            0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
        ),
    ),
]


def test_parameters():
    assert Fq_k1.modulus == MODULUS
    assert Fr_k1.modulus == GROUP_ORDER
    assert secp256k1.a == Fq_k1(0)
    assert secp256k1.b == Fq_k1(7)
    assert generator.to_list() == [GX, GY]
    assert generator in secp256k1
    assert point_at_infinity.is_infinity()


@pytest.mark.parametrize(("n", "expected"), multiples_of_generator)
def test_multiples_of_generator(n, expected):
    assert generator.multiply(n) == secp256k1(*expected)


def test_addition():
    assert P + Q == Q + P
    assert P + (-P) == point_at_infinity
    assert P + point_at_infinity == P
    assert generator + generator == generator.double()
    assert generator.double() + generator == generator.multiply(3)


def test_order_of_generator():
    assert generator.multiply(GROUP_ORDER) == point_at_infinity
    assert generator.multiply(GROUP_ORDER - 1) == -generator
    assert generator.multiply(GROUP_ORDER + 1) == generator


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (2, 3),
        (0xDEADBEEF, 0xC0FFEE),
        (GROUP_ORDER // 3, GROUP_ORDER - 12345),
        (53458750141241331933368176931386592061784348704092867077248862953896423193426, -7),
    ],
)
def test_scalar_multiplication_slow(a, b, run_slow):
    if not run_slow:
        pytest.skip("need --run-slow option to run")

    A = generator.multiply(a)  # noqa: N806
    B = generator.multiply(b)  # noqa: N806

    assert A.multiply(b) == B.multiply(a)
    assert A + B == generator.multiply(a + b)
    assert generator.multiply(a * b) == generator.multiply((Fr_k1.reduce(a) * Fr_k1.reduce(b)).to_int())

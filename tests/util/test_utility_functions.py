import pytest

from ecarith.elliptic_curves.secp256k1.parameters import GROUP_ORDER, MODULUS
from ecarith.util.utility_functions import is_prime


@pytest.mark.parametrize("n", [2, 3, 5, 13, 19, 41, 43, 223, 7919, 2**61 - 1, 2**127 - 1, MODULUS, GROUP_ORDER])
def test_is_prime(n):
    assert is_prime(n)


@pytest.mark.parametrize(
    "n",
    [
        -7,
        0,
        1,
        4,
        10,
        561,  # Carmichael number
        41041,  # Carmichael number
        3215031751,  # Strong pseudoprime to the bases 2, 3, 5, 7
        3317044064679887385961981,  # Strong pseudoprime to every prime base up to 41
        43 * 47,
        (2**61 - 1) * (2**31 - 1),
        2**128 + 1,
        MODULUS * GROUP_ORDER,
    ],
)
def test_is_not_prime(n):
    assert not is_prime(n)

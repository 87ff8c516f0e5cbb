"""
Test cases for the crypto module: curve arithmetic, digests and scalar generation
"""

import hashlib
import json
import os
import random
import sys

import pytest

# Add the source directory to path to import the package without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pylibecdsa.crypto.ec import EllipticCurve, INFINITY, Infinity, Point, mod_inverse
from pylibecdsa.crypto.hash import (
    Hasher, digest_to_int, hash_message, hasher_for_bit_size
)
from pylibecdsa.crypto.scalar import SecureScalarGenerator, generate_private_key
from pylibecdsa.crypto.secp256k1 import SECP256K1
from pylibecdsa.crypto.secp256r1 import SECP256R1
from pylibecdsa.errors import ECDSAError


def open_file(name: str):
    """Open a test file, trying multiple possible locations"""
    possible_paths = [
        name,
        f"tests/{name}",
        os.path.join(os.path.dirname(__file__), name),
    ]

    for path in possible_paths:
        try:
            with open(path, 'r') as f:
                return f.read()
        except FileNotFoundError:
            continue

    raise FileNotFoundError(f"Failed to find file {name}")


@pytest.fixture
def k1():
    return EllipticCurve(SECP256K1)


def random_scalars(count: int, seed: int = 0):
    rng = random.Random(seed)
    return [rng.randrange(1, SECP256K1.N) for _ in range(count)]


# Modular inverse
@pytest.mark.parametrize("modulus", [SECP256K1.P, SECP256K1.N])
def test_mod_inverse(modulus):
    rng = random.Random(modulus)
    values = [1, 2, modulus - 1] + [rng.randrange(1, modulus) for _ in range(20)]
    for a in values:
        assert mod_inverse(a, modulus) * a % modulus == 1


def test_mod_inverse_small_prime():
    assert mod_inverse(3, 7) == 5
    assert mod_inverse(6, 7) == 6


# Point at infinity
def test_infinity_is_singleton():
    assert Infinity() is INFINITY
    assert INFINITY.is_infinity()
    assert not SECP256K1.G.is_infinity()
    assert SECP256K1.G != INFINITY


def test_add_identity(k1):
    g = SECP256K1.G
    assert k1.add(INFINITY, g) == g
    assert k1.add(g, INFINITY) == g
    assert k1.add(INFINITY, INFINITY) is INFINITY


def test_double_infinity(k1):
    assert k1.double(INFINITY) is INFINITY


def test_add_inverse_points(k1):
    g = SECP256K1.G
    assert k1.add(g, k1.negate(g)) is INFINITY


def test_multiply_by_zero(k1):
    assert k1.multiply(0, SECP256K1.G) is INFINITY
    assert k1.multiply(12345, INFINITY) is INFINITY


def test_multiply_without_point(k1):
    assert k1.multiply(5, None) is INFINITY
    assert k1.multiply(1, None) is INFINITY
    assert k1.multiply(1, SECP256K1.G) == SECP256K1.G


def test_multiply_negative_scalar(k1):
    g = SECP256K1.G
    assert k1.multiply(-1, g) == k1.negate(g)
    assert k1.multiply(-5, g) == k1.negate(k1.multiply(5, g))


def test_multiply_by_order_minus_one(k1):
    g = SECP256K1.G
    assert k1.multiply(SECP256K1.N - 1, g) == Point(g.x, SECP256K1.P - g.y)


def test_multiply_by_order(k1):
    assert k1.multiply(SECP256K1.N, SECP256K1.G) is INFINITY


def test_known_multiples(k1):
    test_data = json.loads(open_file("secp256k1_multiples_test.json"))
    for test in test_data["tests"]:
        d = int(test["d"], 16)
        expected = Point(int(test["x"], 16), int(test["y"], 16))
        assert k1.multiply(d, SECP256K1.G) == expected, f"d = {d}"


def test_add_equals_double(k1):
    for d in random_scalars(5):
        point = k1.multiply(d, SECP256K1.G)
        assert k1.add(point, point) == k1.double(point)


def test_multiples_are_on_curve(k1):
    for d in random_scalars(5, seed=1):
        point = k1.multiply(d, SECP256K1.G)
        assert not point.is_infinity()
        assert 0 <= point.x < SECP256K1.P
        assert 0 <= point.y < SECP256K1.P
        assert k1.contains(point)


def test_multiply_is_distributive(k1):
    a, b = random_scalars(2, seed=2)
    left = k1.multiply(a + b, SECP256K1.G)
    right = k1.add(k1.multiply(a, SECP256K1.G), k1.multiply(b, SECP256K1.G))
    assert left == right


def test_contains(k1):
    g = SECP256K1.G
    assert k1.contains(g)
    assert k1.contains(INFINITY)
    assert not k1.contains(Point(g.x, g.y + 1))


def test_against_python_ecdsa():
    ecdsa = pytest.importorskip("ecdsa")
    for curve, reference in [(SECP256K1, ecdsa.SECP256k1), (SECP256R1, ecdsa.NIST256p)]:
        ec = EllipticCurve(curve)
        for d in random_scalars(3, seed=3):
            expected = reference.generator * d
            point = ec.multiply(d % curve.N, curve.G)
            assert (point.x, point.y) == (expected.x(), expected.y())


# Digest selection
@pytest.mark.parametrize("bit_size,algorithm", [
    (192, 'sha1'),
    (256, 'sha256'),
    (384, 'sha384'),
    (512, 'sha512'),
])
def test_hasher_for_bit_size(bit_size, algorithm):
    assert hasher_for_bit_size(bit_size).algorithm == algorithm


@pytest.mark.parametrize("bit_size", [224, 521, 0])
def test_hasher_for_unsupported_bit_size(bit_size):
    with pytest.raises(ECDSAError) as e:
        hasher_for_bit_size(bit_size)
    assert e.value.error_type == ECDSAError.ErrorType.UNSUPPORTED_CURVE_BIT_SIZE


def test_hasher_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        Hasher('md5')
    with pytest.raises(ValueError):
        Hasher('sha224')


def test_hasher_incremental_digest():
    hasher = hasher_for_bit_size(256)
    hasher.update(b"Hello ")
    hasher.update(b"World!")
    result = hasher.finish()
    assert len(result) == 32
    assert result.as_ref() == hashlib.sha256(b"Hello World!").digest()
    assert result.as_int() == int(hashlib.sha256(b"Hello World!").hexdigest(), 16)


def test_digest_to_int():
    assert digest_to_int(b"\x01\x00") == 256
    assert digest_to_int(b"\x00\x00\xff") == 255
    assert digest_to_int(b"\xff" * 64) == 2 ** 512 - 1


def test_hash_message():
    expected = int(hashlib.sha256(b"Hello World!").hexdigest(), 16)
    assert hash_message(SECP256K1, "Hello World!") == expected
    assert hash_message(SECP256K1, b"Hello World!") == expected


def test_hash_message_encoding():
    expected = int(hashlib.sha256("héllo".encode("latin-1")).hexdigest(), 16)
    assert hash_message(SECP256K1, "héllo", encoding="latin-1") == expected
    assert hash_message(SECP256K1, "héllo") != expected


# Secure scalar generation
def test_generate_private_key_range():
    for _ in range(5):
        d = generate_private_key(SECP256K1)
        assert 1 <= d < SECP256K1.N


def test_generator_hashes_the_draw():
    draws = []

    def randbytes(n):
        draws.append(n)
        return bytes(n)

    value = SecureScalarGenerator(SECP256K1, randbytes).generate(SECP256K1.N)
    assert draws == [32]
    assert value == int(hashlib.sha256(bytes(32)).hexdigest(), 16)


def test_generator_rejects_out_of_range():
    candidates = sorted(
        (int(hashlib.sha256(draw).hexdigest(), 16), draw)
        for draw in (b"\x01" * 32, b"\x02" * 32)
    )
    (low, low_draw), (high, high_draw) = candidates

    # The first draw equals the bound and must be rejected
    outputs = iter([high_draw, low_draw])
    generator = SecureScalarGenerator(SECP256K1, lambda n: next(outputs))
    assert generator.generate(high) == low


def test_generator_invalid_range():
    for bound in (1, 0, -5):
        with pytest.raises(ECDSAError) as e:
            SecureScalarGenerator(SECP256K1).generate(bound)
        assert e.value.error_type == ECDSAError.ErrorType.INVALID_RANGE


def test_generator_requires_curve():
    with pytest.raises(ECDSAError) as e:
        SecureScalarGenerator(None).generate(100)
    assert e.value.error_type == ECDSAError.ErrorType.UNINITIALIZED_CURVE


def test_generator_rejects_invalid_curve():
    from dataclasses import replace
    bad_curve = replace(SECP256K1, G_Y=SECP256K1.G_Y + 1)
    with pytest.raises(ECDSAError) as e:
        SecureScalarGenerator(bad_curve).generate(bad_curve.N)
    assert e.value.error_type == ECDSAError.ErrorType.INVALID_CURVE_PARAMETERS


def test_generator_entropy_exhausted():
    calls = []

    def randbytes(n):
        calls.append(n)
        return os.urandom(n)

    # Only the value 1 is acceptable, which a 256-bit digest will not hit
    generator = SecureScalarGenerator(SECP256K1, randbytes, max_attempts=3)
    with pytest.raises(ECDSAError) as e:
        generator.generate(2)
    assert e.value.error_type == ECDSAError.ErrorType.ENTROPY_EXHAUSTED
    assert len(calls) == 3


if __name__ == "__main__":
    # Run a quick test to verify basic functionality
    print("Running basic crypto tests...")

    hasher = hasher_for_bit_size(256)
    hasher.update(b"test message")
    result = hasher.finish()
    print(f"SHA256 hash length: {len(result.as_ref())}")
    print(f"2G = {EllipticCurve(SECP256K1).multiply(2, SECP256K1.G)}")

"""
Elliptic curve arithmetic, curve parameters and digests for ECDSA

The secure scalar generator lives in `crypto.scalar` and is not re-exported
here, as it depends on curve validation.
"""

from .ec import CurveParams, CurvePoint, EllipticCurve, Infinity, INFINITY, Point, mod_inverse
from .hash import Hasher, HashResult, digest_to_int, hash_message, hasher_for_bit_size
from .secp256k1 import SECP256K1
from .secp256r1 import SECP256R1
from .secp384r1 import SECP384R1

__all__ = [
    'CurveParams',
    'CurvePoint',
    'EllipticCurve',
    'Infinity',
    'INFINITY',
    'Point',
    'mod_inverse',
    'Hasher',
    'HashResult',
    'digest_to_int',
    'hash_message',
    'hasher_for_bit_size',
    'SECP256K1',
    'SECP256R1',
    'SECP384R1',
]

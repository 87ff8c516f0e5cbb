"""
ECDSA signature generation and verification

Both operations validate the curve parameters on every call and raise
ECDSAError when the curve cannot be used. A signature that does not check out
is not an error: `verify` simply returns False.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, Union

from .crypto.ec import CurveParams, CurvePoint, EllipticCurve, Point, mod_inverse
from .crypto.hash import DEFAULT_ENCODING, hash_message
from .crypto.scalar import SecureScalarGenerator
from .errors import ECDSAError
from .validation import ensure_valid_curve

logger = logging.getLogger(__name__)

# Nonces tried before signing gives up
MAX_SIGN_ATTEMPTS = 64


@dataclass(frozen=True)
class Signature:
    """An ECDSA signature (r, s)"""
    r: int
    s: int


def public_key(curve: CurveParams, private_key: int) -> Point:
    """
    Derive the public key point d * G.

    Raises:
        ValueError: if the private key is not in [1, n)
    """
    ensure_valid_curve(curve)
    _check_private_key(curve, private_key)
    # d in [1, n) never lands on infinity for a validated curve
    return EllipticCurve(curve).multiply(private_key, curve.G)


def _check_private_key(curve: CurveParams, private_key: int) -> None:
    if not 1 <= private_key < curve.N:
        raise ValueError("Private key must be an integer in [1, n)")


def sign(curve: CurveParams, private_key: int, message: Union[str, bytes],
         encoding: str = DEFAULT_ENCODING,
         randbytes: Callable[[int], bytes] = secrets.token_bytes) -> Signature:
    """
    Sign a message with the given private key.

    Args:
        curve: Curve parameters
        private_key: Secret scalar in [1, n)
        message: Message to sign; text is encoded with `encoding` first
        encoding: Text encoding of the message
        randbytes: Source of random bytes for the nonce

    Returns:
        The signature (r, s)

    Raises:
        ECDSAError: if the curve is unusable, or ENTROPY_EXHAUSTED if no
            usable nonce was found
        ValueError: if the private key is out of range
    """
    ensure_valid_curve(curve)
    _check_private_key(curve, private_key)

    n = curve.N
    ec = EllipticCurve(curve)
    z = hash_message(curve, message, encoding)
    nonces = SecureScalarGenerator(curve, randbytes)

    for _ in range(MAX_SIGN_ATTEMPTS):
        k = nonces.generate(n)

        point = ec.multiply(k, curve.G)
        if point.is_infinity():
            logger.debug("k * G is the point at infinity, drawing a new nonce")
            continue

        r = point.x % n
        s = mod_inverse(k, n) * (z + r * private_key) % n
        # r = 0 or s = 0 yields a signature that no verifier accepts
        if r == 0 or s == 0:
            logger.debug("Degenerate signature component, drawing a new nonce")
            continue

        return Signature(r, s)

    raise ECDSAError(ECDSAError.ErrorType.ENTROPY_EXHAUSTED,
                     f"no usable nonce after {MAX_SIGN_ATTEMPTS} attempts")


def verify(curve: CurveParams, public_key: CurvePoint, signature: Signature,
           message: Union[str, bytes], encoding: str = DEFAULT_ENCODING) -> bool:
    """
    Validates the given signature against the given public key and message.

    Args:
        curve: Curve parameters
        public_key: Public key point
        signature: Signature (r, s)
        message: Message that was signed; text is encoded with `encoding` first
        encoding: Text encoding of the message

    Returns:
        True if signature is valid, False otherwise

    Raises:
        ECDSAError: if the curve is unusable
    """
    ensure_valid_curve(curve)

    n = curve.N
    r, s = signature.r, signature.s

    # Validate signature bounds
    if not (1 <= r < n and 1 <= s < n):
        return False

    ec = EllipticCurve(curve)
    if public_key.is_infinity() or not ec.contains(public_key):
        return False

    z = hash_message(curve, message, encoding)

    w = mod_inverse(s, n)
    u1 = (w * z * curve.H) % n
    u2 = (w * r * curve.H) % n

    total = ec.add(ec.multiply(u1, curve.G), ec.multiply(u2, public_key))
    if total.is_infinity():
        return False

    return total.x % n == r

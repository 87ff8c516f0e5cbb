"""
Checks that a set of curve parameters describes a usable cryptographic curve

This module provides the gatekeeping run before any key generation, signing or
verification touches a curve. The checks follow ANSI X9.62 and are applied in
order, stopping at the first failure.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .crypto.ec import CurveParams, EllipticCurve
from .crypto.hash import Hasher
from .errors import ECDSAError

logger = logging.getLogger(__name__)

# Digest used to re-derive b from the curve seed, whatever the curve size
SEED_HASH_ALGORITHM = 'sha1'


@dataclass(frozen=True)
class CurveValidation:
    """
    Outcome of validating curve parameters

    A failed validation is a normal result, not an exception. `reason` names
    the first check that failed and is empty when the curve is valid.
    """
    valid: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


def is_non_singular(curve: CurveParams) -> bool:
    """Check 4a^3 + 27b^2 != 0 (mod p)"""
    return (4 * pow(curve.A, 3) + 27 * pow(curve.B, 2)) % curve.P != 0


def is_b_in_field(curve: CurveParams) -> bool:
    return 0 <= curve.B < curve.P


def is_seed_valid(curve: CurveParams) -> bool:
    """
    Check b was derived from the seed, i.e. SHA-1(seed) mod p == b.

    A curve without a seed passes trivially.
    """
    if curve.SEED is None:
        return True
    hasher = Hasher(SEED_HASH_ALGORITHM)
    hasher.update(curve.SEED)
    return hasher.finish().as_int() % curve.P == curve.B


def is_base_point_on_curve(curve: CurveParams) -> bool:
    return EllipticCurve(curve).contains(curve.G)


def is_order_valid(curve: CurveParams) -> bool:
    """Check n > 0 and n * G is the point at infinity"""
    if curve.N <= 0:
        return False
    return EllipticCurve(curve).multiply(curve.N, curve.G).is_infinity()


_CHECKS = [
    (is_non_singular, "the curve is singular"),
    (is_b_in_field, "parameter b is not an element of the field Fp"),
    (is_seed_valid, "the seed does not generate parameter b"),
    (is_base_point_on_curve, "the base point G is not on the curve"),
    (is_order_valid, "the base point G does not have order n"),
]


def validate_curve(curve: CurveParams) -> CurveValidation:
    """
    Validate curve parameters.

    Args:
        curve: Curve parameters

    Returns:
        A CurveValidation which is truthy only if every check passed
    """
    for check, reason in _CHECKS:
        if not check(curve):
            logger.warning("Curve %s failed validation: %s", curve.name, reason)
            return CurveValidation(False, reason)
    return CurveValidation(True)


def ensure_valid_curve(curve: Optional[CurveParams]) -> CurveParams:
    """
    Validate curve parameters, raising if they cannot be used.

    The result is not cached; every call re-runs all checks.

    Raises:
        ECDSAError: UNINITIALIZED_CURVE if no curve was given, or
            INVALID_CURVE_PARAMETERS naming the failed check
    """
    if curve is None:
        raise ECDSAError(ECDSAError.ErrorType.UNINITIALIZED_CURVE,
                         "a valid elliptic curve is required")
    result = validate_curve(curve)
    if not result:
        raise ECDSAError(ECDSAError.ErrorType.INVALID_CURVE_PARAMETERS,
                         f"{curve.name}: {result.reason}")
    return curve

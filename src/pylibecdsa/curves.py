"""
Registry of the named curves the library knows about
"""

from enum import Enum

from .crypto.ec import CurveParams
from .crypto.secp256k1 import SECP256K1
from .crypto.secp256r1 import SECP256R1
from .crypto.secp384r1 import SECP384R1
from .errors import ECDSAError


class CurveType(Enum):
    """Supported curve identifiers"""
    SECP256K1 = "secp256k1"
    SECP256R1 = "secp256r1"
    SECP384R1 = "secp384r1"


_CURVES = {
    CurveType.SECP256K1: SECP256K1,
    CurveType.SECP256R1: SECP256R1,
    CurveType.SECP384R1: SECP384R1,
}


def curve_parameters(curve_type: CurveType) -> CurveParams:
    return _CURVES[curve_type]


def curve_by_name(name: str) -> CurveParams:
    """
    Look up curve parameters by curve name, e.g. "secp256k1".

    Raises:
        ECDSAError: UNINITIALIZED_CURVE for an empty name and
            UNSUPPORTED_CURVE_NAME for a name not in the registry
    """
    if not name:
        raise ECDSAError(ECDSAError.ErrorType.UNINITIALIZED_CURVE,
                         "a name for the elliptic curve is required")
    try:
        curve_type = CurveType(name.lower())
    except ValueError:
        raise ECDSAError(ECDSAError.ErrorType.UNSUPPORTED_CURVE_NAME,
                         f"unknown curve {name!r}") from None
    return _CURVES[curve_type]

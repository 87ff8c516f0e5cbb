"""
Cryptographically secure generation of secret scalars (private keys and nonces)
"""

import logging
import secrets
from typing import Callable, Optional

from ..errors import ECDSAError
from ..validation import ensure_valid_curve
from .ec import CurveParams
from .hash import curve_digest, digest_to_int

logger = logging.getLogger(__name__)

# Rejected draws tolerated before giving up on the entropy source
MAX_SCALAR_ATTEMPTS = 1024


class SecureScalarGenerator:
    """
    Draws secret integers in [1, bound) for a curve

    Each candidate is a fresh draw of ceil(bit_size / 8) random bytes, masked to
    the curve bit size and then passed through the curve digest. Candidates out
    of range are rejected and drawn again. As the digest width can differ from
    the masked draw, the acceptance rate per draw depends on the curve.
    """

    def __init__(self, curve: Optional[CurveParams],
                 randbytes: Callable[[int], bytes] = secrets.token_bytes,
                 max_attempts: int = MAX_SCALAR_ATTEMPTS):
        self.curve = curve
        self._randbytes = randbytes
        self.max_attempts = max_attempts

    def _draw(self, curve: CurveParams) -> int:
        byte_length = (curve.BIT_SIZE + 7) // 8
        data = bytearray(self._randbytes(byte_length))

        # Clear the high bits of the most significant byte beyond the bit size
        data[0] &= 0xFF >> (byte_length * 8 - curve.BIT_SIZE)

        return digest_to_int(curve_digest(curve, bytes(data)))

    def generate(self, bound: int) -> int:
        """
        Generate a uniformly distributed integer in [1, bound).

        Raises:
            ECDSAError: INVALID_RANGE if bound <= 1, UNINITIALIZED_CURVE or
                INVALID_CURVE_PARAMETERS if the curve is unusable, and
                ENTROPY_EXHAUSTED when no candidate was accepted in time
        """
        if bound <= 1:
            raise ECDSAError(ECDSAError.ErrorType.INVALID_RANGE,
                             "the upper bound must be greater than 1")
        curve = ensure_valid_curve(self.curve)

        for _ in range(self.max_attempts):
            value = self._draw(curve)
            if 1 <= value < bound:
                return value
            logger.debug("Random scalar out of range, drawing again")

        raise ECDSAError(ECDSAError.ErrorType.ENTROPY_EXHAUSTED,
                         f"no scalar in range after {self.max_attempts} draws")


def generate_private_key(curve: CurveParams,
                         randbytes: Callable[[int], bytes] = secrets.token_bytes) -> int:
    """Generate a private key in [1, n) for the curve"""
    return SecureScalarGenerator(curve, randbytes).generate(curve.N)

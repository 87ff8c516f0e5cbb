"""
Simple wrapper around various hash options, plus the mapping from curve size to
the digest used for signing.
"""

import hashlib
from typing import Union

from ..errors import ECDSAError
from .ec import CurveParams

# Text messages are encoded with this before hashing unless told otherwise
DEFAULT_ENCODING = "utf-8"

# Curve bit size -> digest algorithm. 224-bit curves are recognised but have no
# digest assigned.
_DIGEST_FOR_BIT_SIZE = {
    192: 'sha1',
    256: 'sha256',
    384: 'sha384',
    512: 'sha512',
}


class HashResult:
    """Container for hash results that can return bytes via as_ref()"""

    def __init__(self, hash_bytes: bytes):
        self._bytes = hash_bytes

    def as_ref(self) -> bytes:
        """Return the hash bytes"""
        return self._bytes

    def as_int(self) -> int:
        """Return the hash as an unsigned big-endian integer"""
        return digest_to_int(self._bytes)

    def __len__(self) -> int:
        return len(self._bytes)


class Hasher:
    """Incremental hash engine over one of the curve digest algorithms"""

    def __init__(self, algorithm: str):
        if algorithm not in _DIGEST_FOR_BIT_SIZE.values():
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")
        self._algorithm = algorithm
        self._hasher = hashlib.new(algorithm)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def update(self, data: bytes) -> None:
        """Update the hasher with new data"""
        self._hasher.update(data)

    def finish(self) -> HashResult:
        """Finalize the hash and return the result"""
        return HashResult(self._hasher.digest())


def hasher_for_bit_size(bit_size: int) -> Hasher:
    """
    Create the hasher matching a curve of the given bit size.

    Raises:
        ECDSAError: UNSUPPORTED_CURVE_BIT_SIZE when no digest is mapped to the size
    """
    algorithm = _DIGEST_FOR_BIT_SIZE.get(bit_size)
    if algorithm is None:
        raise ECDSAError(
            ECDSAError.ErrorType.UNSUPPORTED_CURVE_BIT_SIZE,
            f"no digest for {bit_size}-bit curves"
        )
    return Hasher(algorithm)


def curve_digest(curve: CurveParams, data: bytes) -> bytes:
    """Hash data with the digest associated with the curve"""
    hasher = hasher_for_bit_size(curve.BIT_SIZE)
    hasher.update(data)
    return hasher.finish().as_ref()


def digest_to_int(digest: bytes) -> int:
    """Interpret digest bytes as an unsigned big-endian integer, without truncation"""
    return int.from_bytes(digest, byteorder='big')


def hash_message(curve: CurveParams, message: Union[str, bytes],
                 encoding: str = DEFAULT_ENCODING) -> int:
    """
    Compute the integer z used in the signature equations.

    z is not reduced mod n here; the signing and verification equations are
    evaluated mod n, which reduces it.
    """
    if isinstance(message, str):
        message = message.encode(encoding)
    return digest_to_int(curve_digest(curve, message))

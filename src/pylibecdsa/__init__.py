"""
Python ECDSA Library

Elliptic curve arithmetic and ECDSA signatures over short Weierstrass
prime-field curves, centred on secp256k1.

The library provides:
- point doubling, addition and double-and-add scalar multiplication
- validation of curve parameters before they are used
- secret scalar generation from the OS random source with rejection sampling
- ECDSA signing and verification
- byte and text encodings of keys and signatures

Scalar multiplication is not constant time. Do not use this library where
timing side channels matter.
"""

from .errors import ECDSAError

from .crypto import (
    CurveParams,
    CurvePoint,
    EllipticCurve,
    Hasher,
    HashResult,
    Infinity,
    INFINITY,
    Point,
    SECP256K1,
    SECP256R1,
    SECP384R1,
    digest_to_int,
    hash_message,
    hasher_for_bit_size,
    mod_inverse,
)

from .validation import (
    CurveValidation,
    validate_curve,
    ensure_valid_curve,
)

from .crypto.scalar import (
    SecureScalarGenerator,
    generate_private_key,
)

from .ecdsa import (
    Signature,
    public_key,
    sign,
    verify,
)

from .curves import (
    CurveType,
    curve_by_name,
)

from .ser import (
    SerializationError,
    decode_point,
    decode_signature,
    encode_point_compressed,
    encode_point_uncompressed,
    encode_signature,
    int_to_bytes,
)

from .keys import (
    PrivateKeyRepresentation,
    PublicKeyRepresentation,
    derive_public_key,
    new_private_key,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ECDSAError",
    "SerializationError",

    # Curve arithmetic
    "CurveParams",
    "CurvePoint",
    "EllipticCurve",
    "Infinity",
    "INFINITY",
    "Point",
    "mod_inverse",
    "SECP256K1",
    "SECP256R1",
    "SECP384R1",
    "CurveType",
    "curve_by_name",

    # Digests
    "Hasher",
    "HashResult",
    "digest_to_int",
    "hash_message",
    "hasher_for_bit_size",

    # Validation
    "CurveValidation",
    "validate_curve",
    "ensure_valid_curve",

    # Keys and signatures
    "SecureScalarGenerator",
    "generate_private_key",
    "Signature",
    "public_key",
    "sign",
    "verify",
    "PrivateKeyRepresentation",
    "PublicKeyRepresentation",
    "derive_public_key",
    "new_private_key",

    # Serialization
    "decode_point",
    "decode_signature",
    "encode_point_compressed",
    "encode_point_uncompressed",
    "encode_signature",
    "int_to_bytes",
]

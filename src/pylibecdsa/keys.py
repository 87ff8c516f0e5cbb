"""
Key pairs and their printable representations
"""

from dataclasses import dataclass

from . import numeral
from .crypto.ec import CurveParams
from .crypto.scalar import generate_private_key
from .ecdsa import public_key
from .ser import encode_point_compressed, encode_point_uncompressed


@dataclass(frozen=True)
class PrivateKeyRepresentation:
    """A private key scalar with its text encodings"""
    value: int

    @property
    def hexadecimal(self) -> str:
        return numeral.to_hex(self.value)

    @property
    def decimal(self) -> str:
        return numeral.to_decimal(self.value)

    @property
    def octal(self) -> str:
        return numeral.to_octal(self.value)

    @property
    def base64(self) -> str:
        return numeral.to_base64(self.value)

    @property
    def der(self) -> str:
        """DER SEQUENCE { INTEGER d } in Base64"""
        return numeral.der_base64(self.value)

    @property
    def pem(self) -> str:
        return numeral.private_key_pem(self.value)


@dataclass(frozen=True)
class PublicKeyRepresentation:
    """
    A public key point with its byte and text encodings

    The hexadecimal, octal and decimal forms concatenate X and Y, each written
    without leading zeros.
    """
    x: int
    y: int
    compressed: bytes
    uncompressed: bytes

    @property
    def hexadecimal(self) -> str:
        return numeral.to_hex(self.x) + numeral.to_hex(self.y)

    @property
    def octal(self) -> str:
        return numeral.to_octal(self.x) + numeral.to_octal(self.y)

    @property
    def decimal(self) -> str:
        return numeral.to_decimal(self.x) + numeral.to_decimal(self.y)

    @property
    def base64(self) -> str:
        return numeral.to_base64(self.uncompressed)

    @property
    def der(self) -> str:
        """DER SEQUENCE { INTEGER x, INTEGER y } in Base64"""
        return numeral.der_base64(self.x, self.y)

    @property
    def pem(self) -> str:
        return numeral.public_key_pem(self.uncompressed)


def derive_public_key(curve: CurveParams, private_key: int) -> PublicKeyRepresentation:
    """Compute d * G and all of its representations"""
    point = public_key(curve, private_key)
    return PublicKeyRepresentation(
        x=point.x,
        y=point.y,
        compressed=encode_point_compressed(curve, point),
        uncompressed=encode_point_uncompressed(curve, point),
    )


def new_private_key(curve: CurveParams) -> PrivateKeyRepresentation:
    """Generate a fresh private key for the curve"""
    return PrivateKeyRepresentation(generate_private_key(curve))

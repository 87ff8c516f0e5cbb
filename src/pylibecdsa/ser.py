"""
Logic to read and write points, scalars and signatures as fixed-width bytes

All integers are unsigned big-endian and padded to the coordinate width of the
curve (bit size / 8 bytes).
"""

from typing import Tuple

from .crypto.ec import CurveParams, CurvePoint, EllipticCurve, Point
from .ecdsa import Signature

UNCOMPRESSED_PREFIX = 0x04
COMPRESSED_EVEN_PREFIX = 0x02
COMPRESSED_ODD_PREFIX = 0x03


class SerializationError(Exception):
    """Error during serialization/deserialization"""
    pass


def int_to_bytes(value: int, length: int) -> bytes:
    """Write value as exactly `length` big-endian bytes, left-padded with zeros"""
    if value < 0:
        raise SerializationError("Cannot serialize a negative integer")
    try:
        return value.to_bytes(length, byteorder='big')
    except OverflowError:
        raise SerializationError(f"Integer does not fit in {length} bytes") from None


def read_uint(data: bytes, offset: int, length: int) -> Tuple[int, int]:
    """Read a big-endian unsigned integer of `length` bytes, return (value, new_offset)"""
    if offset + length > len(data):
        raise SerializationError(f"Not enough data for {length}-byte integer")
    return int.from_bytes(data[offset:offset + length], byteorder='big'), offset + length


def _finite(point: CurvePoint) -> Point:
    if point.is_infinity():
        raise SerializationError("The point at infinity has no byte encoding")
    return point


def encode_point_uncompressed(curve: CurveParams, point: CurvePoint) -> bytes:
    """0x04 || X || Y"""
    point = _finite(point)
    width = curve.coord_bytes
    return bytes([UNCOMPRESSED_PREFIX]) + int_to_bytes(point.x, width) + int_to_bytes(point.y, width)


def encode_point_compressed(curve: CurveParams, point: CurvePoint) -> bytes:
    """0x02 || X for even Y, 0x03 || X for odd Y"""
    point = _finite(point)
    prefix = COMPRESSED_EVEN_PREFIX if point.y % 2 == 0 else COMPRESSED_ODD_PREFIX
    return bytes([prefix]) + int_to_bytes(point.x, curve.coord_bytes)


def _decompress_y(curve: CurveParams, x: int, odd: bool) -> int:
    p = curve.P
    if p % 4 != 3:
        raise SerializationError("Point decompression needs p = 3 (mod 4)")

    y_squared = (pow(x, 3, p) + curve.A * x + curve.B) % p
    y = pow(y_squared, (p + 1) // 4, p)
    if (y * y) % p != y_squared:
        raise SerializationError("X coordinate is not on the curve")

    if (y % 2 == 1) != odd:
        y = p - y
    return y


def decode_point(curve: CurveParams, data: bytes) -> Point:
    """
    Parse a compressed or uncompressed point, validating it lies on the curve.
    """
    width = curve.coord_bytes
    if not data:
        raise SerializationError("Empty point encoding")

    prefix = data[0]
    if prefix == UNCOMPRESSED_PREFIX:
        if len(data) != 1 + 2 * width:
            raise SerializationError("Uncompressed point has the wrong length")
        x, offset = read_uint(data, 1, width)
        y, _ = read_uint(data, offset, width)
    elif prefix in (COMPRESSED_EVEN_PREFIX, COMPRESSED_ODD_PREFIX):
        if len(data) != 1 + width:
            raise SerializationError("Compressed point has the wrong length")
        x, _ = read_uint(data, 1, width)
        if x >= curve.P:
            raise SerializationError("X coordinate is not a field element")
        y = _decompress_y(curve, x, prefix == COMPRESSED_ODD_PREFIX)
    else:
        raise SerializationError(f"Unknown point prefix 0x{prefix:02x}")

    point = Point(x, y)
    if x >= curve.P or y >= curve.P or not EllipticCurve(curve).contains(point):
        raise SerializationError("Point is not on the curve")
    return point


def encode_signature(curve: CurveParams, signature: Signature) -> bytes:
    """r || s, each padded to the coordinate width"""
    width = curve.coord_bytes
    return int_to_bytes(signature.r, width) + int_to_bytes(signature.s, width)


def decode_signature(curve: CurveParams, data: bytes) -> Signature:
    width = curve.coord_bytes
    if len(data) != width * 2:
        raise SerializationError("Signature has the wrong length")
    r, offset = read_uint(data, 0, width)
    s, _ = read_uint(data, offset, width)
    return Signature(r, s)

"""
Text representations of keys and signatures

Hexadecimal, octal and decimal strings carry no prefix and no leading zeros.
DER output is a SEQUENCE of one or more ASN.1 INTEGERs, and PEM wraps Base64 at
64 characters between BEGIN/END delimiters.
"""

import base64
from typing import List, Tuple, Union

from .ser import SerializationError

PEM_LINE_LENGTH = 64

_DER_INTEGER = 0x02
_DER_SEQUENCE = 0x30


def to_hex(value: int) -> str:
    """Uppercase hexadecimal, e.g. 255 -> 'FF'"""
    return f"{value:X}"


def to_octal(value: int) -> str:
    return f"{value:o}"


def to_decimal(value: int) -> str:
    return str(value)


def int_to_min_bytes(value: int) -> bytes:
    """Shortest unsigned big-endian encoding of value (one zero byte for 0)"""
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), byteorder='big')


def to_base64(data: Union[int, bytes]) -> str:
    """Base64 of raw bytes, or of the minimal big-endian bytes of an integer"""
    if isinstance(data, int):
        data = int_to_min_bytes(data)
    return base64.b64encode(data).decode('ascii')


def _encode_length(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    length_bytes = int_to_min_bytes(length)
    return bytes([0x80 | len(length_bytes)]) + length_bytes


def _encode_integer(value: int) -> bytes:
    if value < 0:
        raise SerializationError("Negative integers are not supported")
    body = int_to_min_bytes(value)
    # If the MSB is 1, an extra byte is required to avoid the sign flag
    if body[0] & 0b1000_0000:
        body = b"\x00" + body
    return bytes([_DER_INTEGER]) + _encode_length(len(body)) + body


def der_encode(*values: int) -> bytes:
    """DER SEQUENCE of INTEGERs"""
    content = b"".join(_encode_integer(v) for v in values)
    return bytes([_DER_SEQUENCE]) + _encode_length(len(content)) + content


def _read_length(data: bytes, offset: int) -> Tuple[int, int]:
    if offset >= len(data):
        raise SerializationError("Ran out of length bytes")
    first = data[offset]
    if not first & 0x80:
        return first, offset + 1
    llen = first & 0x7f
    if llen == 0 or offset + 1 + llen > len(data):
        raise SerializationError("Ran out of length bytes")
    return int.from_bytes(data[offset + 1:offset + 1 + llen], byteorder='big'), offset + 1 + llen


def der_decode(data: bytes) -> List[int]:
    """Parse a DER SEQUENCE of non-negative INTEGERs"""
    if not data or data[0] != _DER_SEQUENCE:
        raise SerializationError("Expected a DER SEQUENCE")
    length, offset = _read_length(data, 1)
    if offset + length != len(data):
        raise SerializationError("DER SEQUENCE length does not match the data")

    values = []
    while offset < len(data):
        if data[offset] != _DER_INTEGER:
            raise SerializationError(f"Expected a DER INTEGER, got 0x{data[offset]:02x}")
        length, offset = _read_length(data, offset + 1)
        if length == 0 or offset + length > len(data):
            raise SerializationError("Truncated DER INTEGER")
        body = data[offset:offset + length]
        if body[0] & 0b1000_0000:
            raise SerializationError("Negative DER INTEGER")
        values.append(int.from_bytes(body, byteorder='big'))
        offset += length
    return values


def der_base64(*values: int) -> str:
    return to_base64(der_encode(*values))


def pem(data: bytes, label: str) -> str:
    """Wrap data in PEM armour with the given label, e.g. 'PUBLIC KEY'"""
    b64 = to_base64(data)
    lines = [f"-----BEGIN {label}-----"]
    lines.extend(b64[start:start + PEM_LINE_LENGTH] for start in range(0, len(b64), PEM_LINE_LENGTH))
    lines.append(f"-----END {label}-----")
    return "\n".join(lines) + "\n"


def unpem(text: str) -> bytes:
    """Strip PEM armour and decode the Base64 body"""
    body = "".join(line.strip() for line in text.splitlines()
                   if line and not line.startswith("-----"))
    return base64.b64decode(body)


def private_key_pem(private_key: int) -> str:
    return pem(int_to_min_bytes(private_key), "PRIVATE KEY")


def public_key_pem(uncompressed: bytes) -> str:
    return pem(uncompressed, "PUBLIC KEY")

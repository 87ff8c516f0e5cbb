"""
Demo front-end: generate a key pair, sign a message and verify the signature
"""

import argparse
import logging
import sys

from .curves import CurveType, curve_by_name
from .ecdsa import sign, verify
from .errors import ECDSAError
from .keys import PrivateKeyRepresentation, derive_public_key, new_private_key
from .crypto.ec import Point


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pylibecdsa",
        description="Generate an ECDSA key pair, sign a message with it and verify the signature",
    )
    parser.add_argument(
        "--curve", type=str, default=CurveType.SECP256K1.value,
        choices=[c.value for c in CurveType], help="Curve to use"
    )
    parser.add_argument("--message", type=str, default="Hello World!", help="Message to sign")
    parser.add_argument(
        "--private-key", type=str, default=None,
        help="Private key in hexadecimal; a random one is generated if omitted"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        curve = curve_by_name(args.curve)
        if args.private_key is not None:
            private_key = PrivateKeyRepresentation(int(args.private_key, 16))
        else:
            private_key = new_private_key(curve)

        pub = derive_public_key(curve, private_key.value)
        signature = sign(curve, private_key.value, args.message)
        valid = verify(curve, Point(pub.x, pub.y), signature, args.message)
    except (ECDSAError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Private Key:")
    print(f"Hexadecimal:     {private_key.hexadecimal}")
    print()
    print("Public Key:")
    print(f"Hexadecimal:     {pub.hexadecimal}")
    print(f"Compressed:      {pub.compressed.hex().upper()}")
    print(f"Uncompressed:    {pub.uncompressed.hex().upper()}")
    print(f"Decimal:         {pub.decimal}")
    print(f"Octal:           {pub.octal}")
    print(f"Base64:          {pub.base64}")
    print(f"DER:             {pub.der}")
    print()
    print("Public Point:")
    print("{")
    print(f"    X:           {pub.x:X}")
    print(f"    Y:           {pub.y:X}")
    print("}")
    print()
    print("PEM:\n" + pub.pem)
    print(f"Message to Sign: {args.message}")
    print("Signature:")
    print("{")
    print(f"    R:           {signature.r:X}")
    print(f"    s:           {signature.s:X}")
    print("}")
    print(f"Signature validation: {valid}")

    return 0 if valid else 2


if __name__ == "__main__":
    sys.exit(main())

"""
secp256k1 curve parameters

y^2 = x^3 + 7 over the prime field P = 2^256 - 2^32 - 977, with a base point of
prime order n.
"""

from .ec import CurveParams


SECP256K1 = CurveParams(
    name="secp256k1",

    # Curve field prime (p)
    P=0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f,

    # Curve parameters for y^2 = x^3 + ax + b
    A=0,
    B=7,

    # Generator point coordinates
    G_X=0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
    G_Y=0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8,

    # Scalar field prime (n) - order of the base point
    N=0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141,

    H=1,
    BIT_SIZE=256,
)

"""
Elliptic curve group arithmetic over short Weierstrass prime-field curves

Points are kept in affine coordinates and the point at infinity is the
explicit `INFINITY` value, never None. Scalar multiplication is plain
double-and-add, so its running time depends on the bits of the scalar.
"""

from dataclasses import dataclass
from typing import Optional, Union


def mod_inverse(value: int, mod: int) -> int:
    """
    Compute the inverse of value mod a prime modulus via Fermat's little theorem.

    The result is only meaningful when mod is prime and value is not a multiple
    of mod. Neither condition is checked; pow() silently returns 0 for value 0.
    """
    return pow(value, mod - 2, mod)


@dataclass(frozen=True)
class Point:
    """A finite elliptic curve point in affine coordinates"""
    x: int
    y: int

    def is_infinity(self) -> bool:
        return False


class Infinity:
    """The point at infinity, the identity element of the curve group"""

    _instance: Optional['Infinity'] = None

    def __new__(cls) -> 'Infinity':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_infinity(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "INFINITY"


INFINITY = Infinity()

CurvePoint = Union[Point, Infinity]


@dataclass(frozen=True)
class CurveParams:
    """Parameters of the curve y^2 = x^3 + ax + b over the prime field P"""

    name: str

    # Curve field prime (p)
    P: int

    # Curve parameters for y^2 = x^3 + ax + b
    A: int
    B: int

    # Generator point coordinates
    G_X: int
    G_Y: int

    # Order of the generator point (n)
    N: int

    # Cofactor (h)
    H: int

    # Size of the field in bits, which also selects the message digest
    BIT_SIZE: int

    # Optional seed from which B was derived
    SEED: Optional[bytes] = None

    @property
    def G(self) -> Point:
        """Return the generator point for the curve"""
        return Point(self.G_X, self.G_Y)

    @property
    def coord_bytes(self) -> int:
        """Coordinate byte length"""
        return self.BIT_SIZE // 8


class EllipticCurve:
    """Group operations on the points of a single curve"""

    def __init__(self, params: CurveParams):
        self.params = params

    @property
    def G(self) -> Point:
        return self.params.G

    def contains(self, point: CurvePoint) -> bool:
        """Check the point satisfies y^2 = x^3 + ax + b (mod p)"""
        if point.is_infinity():
            return True
        p = self.params.P
        left = (point.y * point.y) % p
        right = (pow(point.x, 3, p) + self.params.A * point.x + self.params.B) % p
        return left == right

    def negate(self, point: CurvePoint) -> CurvePoint:
        if point.is_infinity():
            return INFINITY
        return Point(point.x, (-point.y) % self.params.P)

    def double(self, point: CurvePoint) -> CurvePoint:
        """
        Point doubling.

        A point with y == 0 has a vertical tangent and doubles to infinity, but
        that case is not special-cased here: the inverse of 0 comes out as 0 and
        the result is wrong. Curves of odd order, which includes every curve in
        the registry, have no such point.
        """
        if point.is_infinity():
            return INFINITY

        p = self.params.P

        # slope = (3x^2 + a) / 2y
        slope = (3 * point.x * point.x + self.params.A) * mod_inverse(2 * point.y, p) % p
        x3 = (slope * slope - 2 * point.x) % p
        y3 = (slope * (point.x - x3) - point.y) % p

        return Point(x3, y3)

    def add(self, pt1: CurvePoint, pt2: CurvePoint) -> CurvePoint:
        """Point addition"""
        if pt1.is_infinity():
            return pt2
        if pt2.is_infinity():
            return pt1

        # Same x with different y means pt2 == -pt1
        if pt1.x == pt2.x and pt1.y != pt2.y:
            return INFINITY
        if pt1 == pt2:
            return self.double(pt1)

        p = self.params.P

        slope = (pt2.y - pt1.y) * mod_inverse(pt2.x - pt1.x, p) % p
        x3 = (slope * slope - pt1.x - pt2.x) % p
        y3 = (slope * (pt1.x - x3) - pt1.y) % p

        return Point(x3, y3)

    def multiply(self, k: int, point: Optional[CurvePoint]) -> CurvePoint:
        """
        Scalar multiplication using the binary double-and-add method.

        Bits of k are scanned from least to most significant. A missing point
        multiplies to INFINITY. This is not constant time.
        """
        if point is None or k == 0 or point.is_infinity():
            return INFINITY
        if k < 0:
            return self.multiply(-k, self.negate(point))

        result: CurvePoint = INFINITY
        addend: CurvePoint = point

        while k > 0:
            if k & 1:
                result = self.add(result, addend)
            addend = self.double(addend)
            k >>= 1

        return result

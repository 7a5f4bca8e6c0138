import dataclasses
import typing as t

from . import modular
from .point import INFINITY, Point


@dataclasses.dataclass(frozen=True)
class Curve:
    """
    Short Weierstrass curve y^2 = x^3 + ax + b over the prime field F_p.

    The modulus must be a prime greater than 3. Primality is the
    caller's responsibility and is never checked here.
    """

    a: int
    b: int
    p: int
    name: t.Optional[str] = dataclasses.field(default=None, compare=False)

    def point(self, x: int, y: int) -> Point:
        """
        Create a point and check that it lies on this curve.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            The validated point

        Raises:
            ValueError: If the coordinates are outside the field or the
                point does not satisfy the curve equation
        """
        if not (0 <= x < self.p and 0 <= y < self.p):
            raise ValueError("Point coordinates out of field range")

        pt = Point.from_coordinates(x, y)
        if not self.verify(pt):
            raise ValueError("Point is not on the curve")
        return pt

    def verify(self, point: Point) -> bool:
        """
        Check whether a point satisfies the curve equation.

        The point at infinity is always on the curve.

        Args:
            point: Point to check

        Returns:
            True if y^2 = x^3 + ax + b (mod p)
        """
        if point.is_infinity:
            return True

        lhs = modular.modulo_power(point.y, 2, self.p)
        rhs = (modular.modulo_power(point.x, 3, self.p) + self.a * point.x + self.b) % self.p
        return lhs == rhs

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.verify(point)

    def double(self, point: Point) -> Point:
        """Return 2 * point."""
        return point.double(self.a, self.p)

    def add(self, p1: Point, p2: Point) -> Point:
        """Return p1 + p2."""
        return p1.add(p2, self.p, a=self.a)

    def negate(self, point: Point) -> Point:
        """Return -point."""
        return point.negate(self.p)

    def scalar_mult(self, scalar: int, point: Point) -> Point:
        """
        Multiply a point by a scalar using right-to-left double-and-add.

        Args:
            scalar: Non-negative multiplier
            point: Point to multiply, left untouched

        Returns:
            scalar * point, infinity when scalar is 0 or a multiple of
            the point's order

        Raises:
            ValueError: If scalar is negative or not an integer
        """
        if not isinstance(scalar, int) or scalar < 0:
            raise ValueError("Scalar must be a non-negative integer")

        if point.is_infinity:
            return point

        addend = point
        result = INFINITY
        if scalar & 1:
            result = addend
        scalar >>= 1

        while scalar > 0:
            addend = self.double(addend)
            if scalar & 1:
                result = self.add(result, addend)
            scalar >>= 1

        return result

    def __str__(self) -> str:
        equation = f"y^2 = x^3 + {self.a}x + {self.b} mod 0x{self.p:x}"
        return f"{self.name}: {equation}" if self.name else equation

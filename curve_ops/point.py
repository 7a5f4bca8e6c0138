import dataclasses
import typing as t

from . import modular


@dataclasses.dataclass(frozen=True)
class Point:
    """
    A point on a short Weierstrass curve, or the point at infinity.

    The point at infinity has both coordinates set to None. Points are
    values: arithmetic never modifies a point, it returns a new one.
    Coordinates given to the constructor are not checked against any
    curve, use Curve.point for that.
    """

    x: t.Optional[int] = None
    y: t.Optional[int] = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ValueError("Point at infinity must have both coordinates as None")

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "Point":
        """Create an affine point from x and y coordinates."""
        return cls(x=x, y=y)

    @classmethod
    def infinity(cls) -> "Point":
        """Return the point at infinity."""
        return cls()

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def copy(self) -> "Point":
        """Return an equal point with its own identity."""
        return Point(self.x, self.y)

    def double(self, a: int, modulus: int) -> "Point":
        """
        Double this point.

        Uses the tangent slope c = (3x^2 + a) / 2y, then
        x' = c^2 - 2x and y' = c(x - x') - y.

        Args:
            a: Linear coefficient of the curve equation
            modulus: Prime field modulus

        Returns:
            2 * self, with coordinates in [0, modulus)
        """
        if self.is_infinity:
            return self

        x = self.x % modulus
        y = self.y % modulus

        # Tangent is vertical at a point of order two
        if y == 0:
            return INFINITY

        num = (3 * modular.modulo_power(x, 2, modulus) + a) % modulus
        denom = modular.modulo_inverse(2 * y, modulus)
        c = (num * denom) % modulus

        new_x = (c * c - 2 * x) % modulus
        new_y = (c * (x - new_x) - y) % modulus
        return Point(new_x, new_y)

    def add(self, other: "Point", modulus: int, *, a: int) -> "Point":
        """
        Add another point to this point.

        Uses the chord slope c = (y2 - y1) / (x2 - x1), then
        x' = c^2 - x1 - x2 and y' = c(x1 - x') - y1. Points sharing an
        x coordinate are either equal, which dispatches to doubling, or
        negations of each other, which sum to infinity.

        Args:
            other: Point to add
            modulus: Prime field modulus
            a: Linear coefficient of the curve equation, used when both
                points are equal

        Returns:
            self + other, with coordinates in [0, modulus)

        Raises:
            TypeError: If other is not a Point
        """
        if not isinstance(other, Point):
            raise TypeError("Can only add Point to Point")

        if other.is_infinity:
            return self._reduced(modulus)
        if self.is_infinity:
            return other._reduced(modulus)

        x1, y1 = self.x % modulus, self.y % modulus
        x2, y2 = other.x % modulus, other.y % modulus

        if x1 == x2:
            if y1 == (-y2) % modulus:
                return INFINITY
            return self.double(a, modulus)

        num = (y2 - y1) % modulus
        denom = modular.modulo_inverse(x2 - x1, modulus)
        c = (num * denom) % modulus

        new_x = (c * c - x1 - x2) % modulus
        new_y = (c * (x1 - new_x) - y1) % modulus
        return Point(new_x, new_y)

    def _reduced(self, modulus: int) -> "Point":
        if self.is_infinity:
            return self
        return Point(self.x % modulus, self.y % modulus)

    def negate(self, modulus: int) -> "Point":
        """Return the additive inverse of this point."""
        if self.is_infinity:
            return self
        return Point(self.x % modulus, (-self.y) % modulus)

    def __repr__(self) -> str:
        if self.is_infinity:
            return "Point(infinity)"
        return f"Point(0x{self.x:x}, 0x{self.y:x})"


INFINITY = Point()

# core/vector.py
import math
import numbers
from typing import Iterator


class NumericDomainError(ArithmeticError):
    """Raised when a vector operation is undefined for its input."""


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization.
    """
    __slots__ = ("x", "y", "z")

    # Keep numpy scalars from broadcasting over us on the left of an operator.
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __neg__(self) -> "Vector3":
        return self.__class__(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.__class__(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.__class__(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self.__class__(self.x * other, self.y * other, self.z * other)
        return self.__class__(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return self.__class__(self.x / t, self.y / t, self.z / t)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way.
        Raises NumericDomainError for a zero-length vector.
        """
        l = self.length()
        if l == 0:
            raise NumericDomainError(f"cannot normalize zero-length vector {self!r}")
        return self / l

    def near_zero(self) -> bool:
        """
        True if every component is close to zero; used to catch degenerate
        scatter directions.
        """
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y}, {self.z})"


# A position in space; same representation, used positionally.
Point3D = Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the unit normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n using
    Snell's law, split into components perpendicular and parallel to n.
    """
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

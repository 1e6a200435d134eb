# core/vector.py
import math


class DegenerateVectorError(ValueError):
    """
    Raised when a zero-length vector would have to be scaled to unit length.
    """


class Vector3:
    """
    A simple 3D vector class used for points, directions and RGB colors.
    Color code reads the same components through the r, g, b aliases.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    # Color aliases
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> "Vector3":
        """
        Returns a unit-length copy of this vector.
        Raises DegenerateVectorError for the zero vector.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError(f"Cannot normalize zero-length vector {self!r}")
        return self / l

    def normalize(self) -> float:
        """
        Rescales this vector in place to unit length and returns its
        original length. A zero vector is left untouched and raises
        DegenerateVectorError.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError(f"Cannot normalize zero-length vector {self!r}")
        self.x /= l
        self.y /= l
        self.z /= l
        return l

    @staticmethod
    def lerp(a: "Vector3", b: "Vector3", t: float) -> "Vector3":
        """Linear blend from a (t = 0) to b (t = 1)."""
        return (1.0 - t) * a + t * b

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

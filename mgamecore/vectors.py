"""Two- and three-component float vectors with tolerant equality."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

FLOAT_TOLERANCE = 0.000001


def _near_zero(num: float) -> bool:
    return -FLOAT_TOLERANCE <= num <= FLOAT_TOLERANCE


def _close(a: float, b: float) -> bool:
    diff = a - b
    return -FLOAT_TOLERANCE < diff < FLOAT_TOLERANCE


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Vector2:
    """A mutable 2D vector."""

    __slots__ = ("x", "y")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    # Well-known vectors

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0, 0)

    @staticmethod
    def one() -> Vector2:
        return Vector2(1, 1)

    @staticmethod
    def left() -> Vector2:
        return Vector2(-1, 0)

    @staticmethod
    def right() -> Vector2:
        return Vector2(1, 0)

    @staticmethod
    def up() -> Vector2:
        return Vector2(0, 1)

    @staticmethod
    def down() -> Vector2:
        return Vector2(0, -1)

    @staticmethod
    def positive_infinity() -> Vector2:
        return Vector2(math.inf, math.inf)

    @staticmethod
    def negative_infinity() -> Vector2:
        return Vector2(-math.inf, -math.inf)

    # Arithmetic

    def __add__(self, other: object) -> Vector2:
        if isinstance(other, (Vector2, Vector3)):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vector2:
        if isinstance(other, (Vector2, Vector3)):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return Vector2(self.x * other, self.y * other)  # type: ignore[operator]
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, num: object) -> Vector2:
        if not _is_scalar(num):
            return NotImplemented
        if _near_zero(num):  # type: ignore[arg-type]
            return Vector2.positive_infinity()
        return Vector2(self.x / num, self.y / num)  # type: ignore[operator]

    def __iadd__(self, other: object) -> Vector2:
        if isinstance(other, (Vector2, Vector3)):
            self.x += other.x
            self.y += other.y
            return self
        return NotImplemented

    def __isub__(self, other: object) -> Vector2:
        if isinstance(other, (Vector2, Vector3)):
            self.x -= other.x
            self.y -= other.y
            return self
        return NotImplemented

    def __imul__(self, other: object) -> Vector2:
        if _is_scalar(other):
            self.x *= other  # type: ignore[operator]
            self.y *= other  # type: ignore[operator]
            return self
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
            return self
        return NotImplemented

    def __itruediv__(self, num: object) -> Vector2:
        if not _is_scalar(num):
            return NotImplemented
        if _near_zero(num):  # type: ignore[arg-type]
            self.x = math.inf
            self.y = math.inf
        else:
            self.x /= num  # type: ignore[operator]
            self.y /= num  # type: ignore[operator]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return _close(self.x, other.x) and _close(self.y, other.y)

    def __neg__(self) -> Vector2:
        return self * -1.0

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    # Geometry

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self) -> Vector2:
        """Return a unit-length copy, or the zero vector if too short."""
        length = self.magnitude()
        if length < FLOAT_TOLERANCE:
            return Vector2.zero()
        return self / length

    def normalize(self) -> None:
        """Scale to unit length in place; near-zero vectors are left alone."""
        length = self.magnitude()
        if length < FLOAT_TOLERANCE:
            return
        self.x /= length
        self.y /= length

    def to_vector3(self) -> Vector3:
        return Vector3(self.x, self.y, 0.0)


class Vector3:
    """A mutable 3D vector."""

    __slots__ = ("x", "y", "z")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    # Well-known vectors

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0, 0, 0)

    @staticmethod
    def one() -> Vector3:
        return Vector3(1, 1, 1)

    @staticmethod
    def left() -> Vector3:
        return Vector3(-1, 0, 0)

    @staticmethod
    def right() -> Vector3:
        return Vector3(1, 0, 0)

    @staticmethod
    def up() -> Vector3:
        return Vector3(0, 1, 0)

    @staticmethod
    def down() -> Vector3:
        return Vector3(0, -1, 0)

    @staticmethod
    def forward() -> Vector3:
        return Vector3(0, 0, 1)

    @staticmethod
    def back() -> Vector3:
        return Vector3(0, 0, -1)

    @staticmethod
    def positive_infinity() -> Vector3:
        return Vector3(math.inf, math.inf, math.inf)

    @staticmethod
    def negative_infinity() -> Vector3:
        return Vector3(-math.inf, -math.inf, -math.inf)

    # Arithmetic

    def __add__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Vector2):
            return Vector3(self.x + other.x, self.y + other.y, self.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector2):
            return Vector3(self.x - other.x, self.y - other.y, self.z)
        return NotImplemented

    def __mul__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)  # type: ignore[operator]
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, num: object) -> Vector3:
        if not _is_scalar(num):
            return NotImplemented
        if _near_zero(num):  # type: ignore[arg-type]
            return Vector3.positive_infinity()
        return Vector3(self.x / num, self.y / num, self.z / num)  # type: ignore[operator]

    def __iadd__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            self.z += other.z
        elif not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            self.z -= other.z
        elif not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: object) -> Vector3:
        if _is_scalar(other):
            self.x *= other  # type: ignore[operator]
            self.y *= other  # type: ignore[operator]
            self.z *= other  # type: ignore[operator]
            return self
        if isinstance(other, Vector3):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
            return self
        return NotImplemented

    def __itruediv__(self, num: object) -> Vector3:
        if not _is_scalar(num):
            return NotImplemented
        if _near_zero(num):  # type: ignore[arg-type]
            self.x = self.y = self.z = math.inf
        else:
            self.x /= num  # type: ignore[operator]
            self.y /= num  # type: ignore[operator]
            self.z /= num  # type: ignore[operator]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            _close(self.x, other.x)
            and _close(self.y, other.y)
            and _close(self.z, other.z)
        )

    def __neg__(self) -> Vector3:
        return self * -1.0

    def __pos__(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g},{self.z:g})"

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    # Geometry

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vector3:
        """Return a unit-length copy, or the zero vector if too short."""
        length = self.magnitude()
        if length < FLOAT_TOLERANCE:
            return Vector3.zero()
        return self / length

    def normalize(self) -> None:
        """Scale to unit length in place; near-zero vectors are left alone."""
        length = self.magnitude()
        if length < FLOAT_TOLERANCE:
            return
        self.x /= length
        self.y /= length
        self.z /= length

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)
"""Block-compression helpers: colour maths, BC1-3 block layouts, alpha fitting."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntFlag
from numbers import Real
from typing import Sequence

NUM_PIXELS_PER_BLOCK = 16


class BCFlags(IntFlag):
    NONE = 0x0
    DITHER_RGB = 0x10000
    DITHER_A = 0x20000
    UNIFORM = 0x40000
    USE_3SUBSETS = 0x80000
    FORCE_BC7_MODE6 = 0x100000


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass
class HDRColorA:
    """A floating-point RGBA colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __add__(self, other: object) -> HDRColorA:
        if not isinstance(other, HDRColorA):
            return NotImplemented
        return HDRColorA(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: object) -> HDRColorA:
        if not isinstance(other, HDRColorA):
            return NotImplemented
        return HDRColorA(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: object):
        """Scale by a number, or take the dot product with another colour."""
        if isinstance(other, HDRColorA):
            return self.r * other.r + self.g * other.g + self.b * other.b + self.a * other.a
        if _is_scalar(other):
            f = float(other)  # type: ignore[arg-type]
            return HDRColorA(self.r * f, self.g * f, self.b * f, self.a * f)
        return NotImplemented

    def __truediv__(self, f: object) -> HDRColorA:
        if not _is_scalar(f):
            return NotImplemented
        inv = 1.0 / float(f)  # type: ignore[arg-type]
        return HDRColorA(self.r * inv, self.g * inv, self.b * inv, self.a * inv)

    def __iadd__(self, other: object) -> HDRColorA:
        if not isinstance(other, HDRColorA):
            return NotImplemented
        self.r += other.r
        self.g += other.g
        self.b += other.b
        self.a += other.a
        return self

    def __isub__(self, other: object) -> HDRColorA:
        if not isinstance(other, HDRColorA):
            return NotImplemented
        self.r -= other.r
        self.g -= other.g
        self.b -= other.b
        self.a -= other.a
        return self

    def __imul__(self, f: object) -> HDRColorA:
        if not _is_scalar(f):
            return NotImplemented
        f = float(f)  # type: ignore[arg-type]
        self.r *= f
        self.g *= f
        self.b *= f
        self.a *= f
        return self

    def __itruediv__(self, f: object) -> HDRColorA:
        if not _is_scalar(f):
            return NotImplemented
        inv = 1.0 / float(f)  # type: ignore[arg-type]
        self.r *= inv
        self.g *= inv
        self.b *= inv
        self.a *= inv
        return self

    def clamp(self, f_min: float, f_max: float) -> HDRColorA:
        """Clamp every channel into [f_min, f_max] in place and return self."""
        self.r = min(f_max, max(f_min, self.r))
        self.g = min(f_max, max(f_min, self.g))
        self.b = min(f_max, max(f_min, self.b))
        self.a = min(f_max, max(f_min, self.a))
        return self


def hdr_color_lerp(c1: HDRColorA, c2: HDRColorA, s: float) -> HDRColorA:
    """Linear interpolation from c1 (s=0) to c2 (s=1)."""
    return HDRColorA(
        c1.r + s * (c2.r - c1.r),
        c1.g + s * (c2.g - c1.g),
        c1.b + s * (c2.b - c1.b),
        c1.a + s * (c2.a - c1.a),
    )


def _check_length(data: bytes, size: int, name: str) -> None:
    if len(data) != size:
        raise ValueError(f"{name} needs {size} bytes, got {len(data)}")


def _pack(fmt: struct.Struct, *values: int) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


_BC1 = struct.Struct("<2HI")
_BC2_ALPHA = struct.Struct("<2I")


@dataclass
class BC1Block:
    """BC1/DXT1 block: two 565 colours and a 2bpp index bitmap (8 bytes)."""

    rgb: tuple[int, int] = (0, 0)
    bitmap: int = 0

    SIZE = 8

    def pack(self) -> bytes:
        return _pack(_BC1, self.rgb[0], self.rgb[1], self.bitmap)

    @staticmethod
    def unpack(data: bytes) -> BC1Block:
        _check_length(data, BC1Block.SIZE, "BC1 block")
        c0, c1, bitmap = _BC1.unpack(data)
        return BC1Block((c0, c1), bitmap)


@dataclass
class BC2Block:
    """BC2/DXT2-3 block: explicit 4bpp alpha followed by a BC1 block (16 bytes)."""

    bitmap: tuple[int, int] = (0, 0)
    bc1: BC1Block = field(default_factory=BC1Block)

    SIZE = 16

    def pack(self) -> bytes:
        return _pack(_BC2_ALPHA, *self.bitmap) + self.bc1.pack()

    @staticmethod
    def unpack(data: bytes) -> BC2Block:
        _check_length(data, BC2Block.SIZE, "BC2 block")
        lo, hi = _BC2_ALPHA.unpack(data[:8])
        return BC2Block((lo, hi), BC1Block.unpack(data[8:]))


@dataclass
class BC3Block:
    """BC3/DXT4-5 block: two alpha endpoints, 3bpp alpha indices, a BC1 block."""

    alpha: tuple[int, int] = (0, 0)
    bitmap: bytes = bytes(6)
    bc1: BC1Block = field(default_factory=BC1Block)

    SIZE = 16

    def pack(self) -> bytes:
        if len(self.bitmap) != 6:
            raise ValueError("BC3 alpha bitmap must be 6 bytes")
        try:
            head = bytes(self.alpha)
        except ValueError as exc:
            raise ValueError("alpha endpoints must be in 0..255") from exc
        if len(head) != 2:
            raise ValueError("BC3 block needs two alpha endpoints")
        return head + bytes(self.bitmap) + self.bc1.pack()

    @staticmethod
    def unpack(data: bytes) -> BC3Block:
        _check_length(data, BC3Block.SIZE, "BC3 block")
        return BC3Block((data[0], data[1]), bytes(data[2:8]), BC1Block.unpack(data[8:]))


_C6 = [5 / 5, 4 / 5, 3 / 5, 2 / 5, 1 / 5, 0 / 5]
_D6 = [0 / 5, 1 / 5, 2 / 5, 3 / 5, 4 / 5, 5 / 5]
_C8 = [7 / 7, 6 / 7, 5 / 7, 4 / 7, 3 / 7, 2 / 7, 1 / 7, 0 / 7]
_D8 = [0 / 7, 1 / 7, 2 / 7, 3 / 7, 4 / 7, 5 / 7, 6 / 7, 7 / 7]


def optimize_alpha(
    points: Sequence[float], steps: int, signed_range: bool = False
) -> tuple[float, float]:
    """Fit alpha endpoints to 16 values with Newton's method.

    ``steps`` is 6 or 8 interpolated values; ``signed_range`` selects [-1, 1]
    instead of [0, 1]. Returns the clamped (low, high) endpoint pair.
    """
    if len(points) != NUM_PIXELS_PER_BLOCK:
        raise ValueError(f"expected {NUM_PIXELS_PER_BLOCK} points, got {len(points)}")
    if steps not in (6, 8):
        raise ValueError("steps must be 6 or 8")

    coeff_c, coeff_d = (_C6, _D6) if steps == 6 else (_C8, _D8)
    max_value = 1.0
    min_value = -1.0 if signed_range else 0.0

    fx, fy = max_value, min_value
    if steps == 8:
        for p in points:
            fx = min(fx, p)
            fy = max(fy, p)
    else:
        for p in points:
            if min_value < p < fx:
                fx = p
            if max_value > p > fy:
                fy = p
        if fx == fy:
            fy = max_value

    f_steps = float(steps - 1)
    for _ in range(8):
        if fy - fx < 1.0 / 256.0:
            break
        scale = f_steps / (fy - fx)
        step_values = [c * fx + d * fy for c, d in zip(coeff_c, coeff_d)]
        if steps == 6:
            step_values += [min_value, max_value]

        dx = dy = d2x = d2y = 0.0
        for p in points:
            dot = (p - fx) * scale
            if dot <= 0.0:
                index = 6 if steps == 6 and p <= (fx + min_value) * 0.5 else 0
            elif dot >= f_steps:
                index = 7 if steps == 6 and p >= (fy + max_value) * 0.5 else steps - 1
            else:
                index = int(dot + 0.5)
            if index < steps:
                diff = step_values[index] - p
                dx += coeff_c[index] * diff
                d2x += coeff_c[index] * coeff_c[index]
                dy += coeff_d[index] * diff
                d2y += coeff_d[index] * coeff_d[index]

        if d2x > 0.0:
            fx -= dx / d2x
        if d2y > 0.0:
            fy -= dy / d2y
        if fx > fy:
            fx, fy = fy, fx
        if dx * dx < 1.0 / 64.0 and dy * dy < 1.0 / 64.0:
            break

    def _clamp(v: float) -> float:
        return min_value if v < min_value else max_value if v > max_value else v

    return _clamp(fx), _clamp(fy)
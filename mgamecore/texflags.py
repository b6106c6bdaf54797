"""Texture conversion flags, extra DXGI format codes and HRESULT error codes."""

from __future__ import annotations

from enum import IntEnum, IntFlag

_UINT32_MASK = 0xFFFFFFFF


class ScanlineFlags(IntFlag):
    """Options for copying and swizzling scanlines."""

    NONE = 0
    SETALPHA = 0x1
    """Set the alpha channel to a known opaque value."""
    LEGACY = 0x2
    """Enable specific legacy format conversion cases."""


class ConvertFlags(IntFlag):
    """Properties of a pixel format that drive format conversion."""

    FLOAT = 0x1
    UNORM = 0x2
    UINT = 0x4
    SNORM = 0x8
    SINT = 0x10
    DEPTH = 0x20
    STENCIL = 0x40
    SHAREDEXP = 0x80
    BGR = 0x100
    XR = 0x200
    PACKED = 0x400
    BC = 0x800
    YUV = 0x1000
    POS_ONLY = 0x2000
    R = 0x10000
    G = 0x20000
    B = 0x40000
    A = 0x80000
    RGB_MASK = 0x70000
    RGBA_MASK = 0xF0000


class ExtraFormat(IntEnum):
    """DXGI format codes that platform headers may not define."""

    XBOX_R10G10B10_7E3_A2_FLOAT = 116
    XBOX_R10G10B10_6E4_A2_FLOAT = 117
    XBOX_D16_UNORM_S8_UINT = 118
    XBOX_R16_UNORM_X8_TYPELESS = 119
    XBOX_X16_TYPELESS_G8_UINT = 120
    WIN10_P208 = 130
    WIN10_V208 = 131
    WIN10_V408 = 132
    XBOX_R10G10B10_SNORM_A2_UNORM = 189
    XBOX_R4G4_UNORM = 190
    WIN11_A4B4G4R4_UNORM = 191


class HResult(IntEnum):
    """Failure codes, held as unsigned 32-bit values."""

    E_BOUNDS = 0x8000000B
    FILE_NOT_FOUND = 0x80070002
    ARITHMETIC_OVERFLOW = 0x80070216
    NOT_SUPPORTED = 0x80070032
    HANDLE_EOF = 0x80070026
    INVALID_DATA = 0x8007000D
    FILE_TOO_LARGE = 0x800700DF
    CANNOT_MAKE = 0x80070052
    NOT_SUFFICIENT_BUFFER = 0x8007007A

    @classmethod
    def from_code(cls, code: int) -> HResult:
        """Look up a code given either as a signed or an unsigned 32-bit value."""
        return cls(_normalize(code))

    @property
    def signed(self) -> int:
        """The code as a signed 32-bit integer."""
        value = int(self)
        return value - (1 << 32) if value & 0x80000000 else value


def _normalize(code: int) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"HRESULT must be an integer, got {type(code).__name__}")
    if not -(1 << 31) <= code <= _UINT32_MASK:
        raise ValueError(f"HRESULT out of 32-bit range: {code}")
    return code & _UINT32_MASK


def hresult_name(code: int) -> str:
    """Name a known HRESULT, or format an unknown one as eight hex digits."""
    value = _normalize(code)
    try:
        return HResult(value).name
    except ValueError:
        return f"0x{value:08X}"
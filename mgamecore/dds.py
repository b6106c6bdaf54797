"""DDS file header layouts, pixel formats and header parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

DDS_MAGIC = 0x20534444  # "DDS "

# Pixel format flags
DDS_FOURCC = 0x00000004
DDS_RGB = 0x00000040
DDS_RGBA = 0x00000041
DDS_LUMINANCE = 0x00020000
DDS_LUMINANCEA = 0x00020001
DDS_ALPHAPIXELS = 0x00000001
DDS_ALPHA = 0x00000002
DDS_PAL8 = 0x00000020
DDS_PAL8A = 0x00000021
DDS_BUMPLUMINANCE = 0x00040000
DDS_BUMPDUDV = 0x00080000
DDS_BUMPDUDVA = 0x00080001

# Header flags
DDS_HEADER_FLAGS_TEXTURE = 0x00001007
DDS_HEADER_FLAGS_MIPMAP = 0x00020000
DDS_HEADER_FLAGS_VOLUME = 0x00800000
DDS_HEADER_FLAGS_PITCH = 0x00000008
DDS_HEADER_FLAGS_LINEARSIZE = 0x00080000

DDS_HEIGHT = 0x00000002
DDS_WIDTH = 0x00000004

# Surface capability flags
DDS_SURFACE_FLAGS_TEXTURE = 0x00001000
DDS_SURFACE_FLAGS_MIPMAP = 0x00400008
DDS_SURFACE_FLAGS_CUBEMAP = 0x00000008

DDS_CUBEMAP_POSITIVEX = 0x00000600
DDS_CUBEMAP_NEGATIVEX = 0x00000A00
DDS_CUBEMAP_POSITIVEY = 0x00001200
DDS_CUBEMAP_NEGATIVEY = 0x00002200
DDS_CUBEMAP_POSITIVEZ = 0x00004200
DDS_CUBEMAP_NEGATIVEZ = 0x00008200
DDS_CUBEMAP_ALLFACES = (
    DDS_CUBEMAP_POSITIVEX
    | DDS_CUBEMAP_NEGATIVEX
    | DDS_CUBEMAP_POSITIVEY
    | DDS_CUBEMAP_NEGATIVEY
    | DDS_CUBEMAP_POSITIVEZ
    | DDS_CUBEMAP_NEGATIVEZ
)
DDS_CUBEMAP = 0x00000200
DDS_FLAGS_VOLUME = 0x00200000

DDS_RESOURCE_MISC_TEXTURECUBE = 0x4
DDS_MISC_FLAGS2_ALPHA_MODE_MASK = 0x7

XBOX_TILEMODE_SCARLETT = 0x1000000


class ResourceDimension(IntEnum):
    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


class AlphaMode(IntEnum):
    UNKNOWN = 0
    STRAIGHT = 1
    PREMULTIPLIED = 2
    OPAQUE = 3
    CUSTOM = 4


def make_fourcc(code: str | bytes) -> int:
    """Pack a four-character code into a little-endian 32-bit integer."""
    if isinstance(code, str):
        try:
            raw = code.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"four-character code must be 8-bit: {code!r}") from exc
    else:
        raw = bytes(code)
    if len(raw) != 4:
        raise ValueError(f"four-character code needs 4 characters, got {len(raw)}")
    return int.from_bytes(raw, "little")


def _pack(fmt: struct.Struct, *values: int) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _check_length(data: bytes, size: int, name: str) -> None:
    if len(data) != size:
        raise ValueError(f"{name} needs {size} bytes, got {len(data)}")


_PIXELFORMAT = struct.Struct("<8I")
_HEADER_HEAD = struct.Struct("<7I11I")
_HEADER_TAIL = struct.Struct("<5I")
_DXT10 = struct.Struct("<5I")
_XBOX = struct.Struct("<9I")
_U32 = struct.Struct("<I")


@dataclass(frozen=True)
class DdsPixelFormat:
    """The 32-byte DDS pixel format block."""

    size: int = 32
    flags: int = 0
    fourcc: int = 0
    rgb_bit_count: int = 0
    r_bit_mask: int = 0
    g_bit_mask: int = 0
    b_bit_mask: int = 0
    a_bit_mask: int = 0

    SIZE = 32

    @property
    def has_fourcc(self) -> bool:
        return bool(self.flags & DDS_FOURCC)

    def pack(self) -> bytes:
        return _pack(
            _PIXELFORMAT,
            self.size,
            self.flags,
            self.fourcc,
            self.rgb_bit_count,
            self.r_bit_mask,
            self.g_bit_mask,
            self.b_bit_mask,
            self.a_bit_mask,
        )

    @staticmethod
    def unpack(data: bytes) -> DdsPixelFormat:
        _check_length(data, DdsPixelFormat.SIZE, "DDS pixel format")
        return DdsPixelFormat(*_PIXELFORMAT.unpack(bytes(data)))


def _fourcc_format(code: str) -> DdsPixelFormat:
    return DdsPixelFormat(32, DDS_FOURCC, make_fourcc(code))


DDSPF_DXT1 = _fourcc_format("DXT1")
DDSPF_DXT2 = _fourcc_format("DXT2")
DDSPF_DXT3 = _fourcc_format("DXT3")
DDSPF_DXT4 = _fourcc_format("DXT4")
DDSPF_DXT5 = _fourcc_format("DXT5")
DDSPF_BC4_UNORM = _fourcc_format("BC4U")
DDSPF_BC4_SNORM = _fourcc_format("BC4S")
DDSPF_BC5_UNORM = _fourcc_format("BC5U")
DDSPF_BC5_SNORM = _fourcc_format("BC5S")
DDSPF_R8G8_B8G8 = _fourcc_format("RGBG")
DDSPF_G8R8_G8B8 = _fourcc_format("GRGB")
DDSPF_YUY2 = _fourcc_format("YUY2")
DDSPF_UYVY = _fourcc_format("UYVY")
DDSPF_A8R8G8B8 = DdsPixelFormat(32, DDS_RGBA, 0, 32, 0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)
DDSPF_X8R8G8B8 = DdsPixelFormat(32, DDS_RGB, 0, 32, 0x00FF0000, 0x0000FF00, 0x000000FF, 0)
DDSPF_A8B8G8R8 = DdsPixelFormat(32, DDS_RGBA, 0, 32, 0x000000FF, 0x0000FF00, 0x00FF0000, 0xFF000000)
DDSPF_X8B8G8R8 = DdsPixelFormat(32, DDS_RGB, 0, 32, 0x000000FF, 0x0000FF00, 0x00FF0000, 0)
DDSPF_G16R16 = DdsPixelFormat(32, DDS_RGB, 0, 32, 0x0000FFFF, 0xFFFF0000, 0, 0)
DDSPF_R5G6B5 = DdsPixelFormat(32, DDS_RGB, 0, 16, 0xF800, 0x07E0, 0x001F, 0)
DDSPF_A1R5G5B5 = DdsPixelFormat(32, DDS_RGBA, 0, 16, 0x7C00, 0x03E0, 0x001F, 0x8000)
DDSPF_X1R5G5B5 = DdsPixelFormat(32, DDS_RGB, 0, 16, 0x7C00, 0x03E0, 0x001F, 0)
DDSPF_A4R4G4B4 = DdsPixelFormat(32, DDS_RGBA, 0, 16, 0x0F00, 0x00F0, 0x000F, 0xF000)
DDSPF_X4R4G4B4 = DdsPixelFormat(32, DDS_RGB, 0, 16, 0x0F00, 0x00F0, 0x000F, 0)
DDSPF_R8G8B8 = DdsPixelFormat(32, DDS_RGB, 0, 24, 0xFF0000, 0x00FF00, 0x0000FF, 0)
DDSPF_A8R3G3B2 = DdsPixelFormat(32, DDS_RGBA, 0, 16, 0x00E0, 0x001C, 0x0003, 0xFF00)
DDSPF_R3G3B2 = DdsPixelFormat(32, DDS_RGB, 0, 8, 0xE0, 0x1C, 0x03, 0)
DDSPF_A4L4 = DdsPixelFormat(32, DDS_LUMINANCEA, 0, 8, 0x0F, 0, 0, 0xF0)
DDSPF_L8 = DdsPixelFormat(32, DDS_LUMINANCE, 0, 8, 0xFF, 0, 0, 0)
DDSPF_L16 = DdsPixelFormat(32, DDS_LUMINANCE, 0, 16, 0xFFFF, 0, 0, 0)
DDSPF_A8L8 = DdsPixelFormat(32, DDS_LUMINANCEA, 0, 16, 0x00FF, 0, 0, 0xFF00)
DDSPF_A8L8_ALT = DdsPixelFormat(32, DDS_LUMINANCEA, 0, 8, 0x00FF, 0, 0, 0xFF00)
DDSPF_L8_NVTT1 = DdsPixelFormat(32, DDS_RGB, 0, 8, 0xFF, 0, 0, 0)
DDSPF_L16_NVTT1 = DdsPixelFormat(32, DDS_RGB, 0, 16, 0xFFFF, 0, 0, 0)
DDSPF_A8L8_NVTT1 = DdsPixelFormat(32, DDS_RGBA, 0, 16, 0x00FF, 0, 0, 0xFF00)
DDSPF_A8 = DdsPixelFormat(32, DDS_ALPHA, 0, 8, 0, 0, 0, 0xFF)
DDSPF_V8U8 = DdsPixelFormat(32, DDS_BUMPDUDV, 0, 16, 0x00FF, 0xFF00, 0, 0)
DDSPF_Q8W8V8U8 = DdsPixelFormat(32, DDS_BUMPDUDV, 0, 32, 0x000000FF, 0x0000FF00, 0x00FF0000, 0xFF000000)
DDSPF_V16U16 = DdsPixelFormat(32, DDS_BUMPDUDV, 0, 32, 0x0000FFFF, 0xFFFF0000, 0, 0)
DDSPF_A2R10G10B10 = DdsPixelFormat(32, DDS_RGBA, 0, 32, 0x000003FF, 0x000FFC00, 0x3FF00000, 0xC0000000)
DDSPF_A2B10G10R10 = DdsPixelFormat(32, DDS_RGBA, 0, 32, 0x3FF00000, 0x000FFC00, 0x000003FF, 0xC0000000)
DDSPF_A2W10V10U10 = DdsPixelFormat(32, DDS_BUMPDUDVA, 0, 32, 0x3FF00000, 0x000FFC00, 0x000003FF, 0xC0000000)
DDSPF_L6V5U5 = DdsPixelFormat(32, DDS_BUMPLUMINANCE, 0, 16, 0x001F, 0x03E0, 0xFC00, 0)
DDSPF_X8L8V8U8 = DdsPixelFormat(32, DDS_BUMPLUMINANCE, 0, 32, 0x000000FF, 0x0000FF00, 0x00FF0000, 0)
DDSPF_DX10 = _fourcc_format("DX10")
DDSPF_XBOX = _fourcc_format("XBOX")


@dataclass(frozen=True)
class DdsHeader:
    """The 124-byte DDS surface header that follows the magic number."""

    size: int = 124
    flags: int = 0
    height: int = 0
    width: int = 0
    pitch_or_linear_size: int = 0
    depth: int = 0
    mip_map_count: int = 0
    reserved1: tuple[int, ...] = (0,) * 11
    ddspf: DdsPixelFormat = field(default_factory=DdsPixelFormat)
    caps: int = 0
    caps2: int = 0
    caps3: int = 0
    caps4: int = 0
    reserved2: int = 0

    SIZE = 124

    def pack(self) -> bytes:
        if len(self.reserved1) != 11:
            raise ValueError("reserved1 must hold 11 values")
        head = _pack(
            _HEADER_HEAD,
            self.size,
            self.flags,
            self.height,
            self.width,
            self.pitch_or_linear_size,
            self.depth,
            self.mip_map_count,
            *self.reserved1,
        )
        tail = _pack(_HEADER_TAIL, self.caps, self.caps2, self.caps3, self.caps4, self.reserved2)
        return head + self.ddspf.pack() + tail

    @staticmethod
    def unpack(data: bytes) -> DdsHeader:
        _check_length(data, DdsHeader.SIZE, "DDS header")
        raw = bytes(data)
        head = _HEADER_HEAD.unpack_from(raw, 0)
        pf_start = _HEADER_HEAD.size
        ddspf = DdsPixelFormat.unpack(raw[pf_start : pf_start + DdsPixelFormat.SIZE])
        tail = _HEADER_TAIL.unpack_from(raw, pf_start + DdsPixelFormat.SIZE)
        return DdsHeader(
            *head[:7],
            reserved1=tuple(head[7:]),
            ddspf=ddspf,
            caps=tail[0],
            caps2=tail[1],
            caps3=tail[2],
            caps4=tail[3],
            reserved2=tail[4],
        )


@dataclass(frozen=True)
class DdsHeaderDxt10:
    """The 20-byte DX10 extension header."""

    dxgi_format: int = 0
    resource_dimension: int = 0
    misc_flag: int = 0
    array_size: int = 0
    misc_flags2: int = 0

    SIZE = 20

    def pack(self) -> bytes:
        return _pack(
            _DXT10,
            self.dxgi_format,
            self.resource_dimension,
            self.misc_flag,
            self.array_size,
            self.misc_flags2,
        )

    @staticmethod
    def unpack(data: bytes) -> DdsHeaderDxt10:
        _check_length(data, DdsHeaderDxt10.SIZE, "DDS DX10 header")
        return DdsHeaderDxt10(*_DXT10.unpack(bytes(data)))


@dataclass(frozen=True)
class DdsHeaderXbox:
    """The 36-byte Xbox extension header."""

    dxgi_format: int = 0
    resource_dimension: int = 0
    misc_flag: int = 0
    array_size: int = 0
    misc_flags2: int = 0
    tile_mode: int = 0
    base_alignment: int = 0
    data_size: int = 0
    xdk_ver: int = 0

    SIZE = 36

    def pack(self) -> bytes:
        return _pack(
            _XBOX,
            self.dxgi_format,
            self.resource_dimension,
            self.misc_flag,
            self.array_size,
            self.misc_flags2,
            self.tile_mode,
            self.base_alignment,
            self.data_size,
            self.xdk_ver,
        )

    @staticmethod
    def unpack(data: bytes) -> DdsHeaderXbox:
        _check_length(data, DdsHeaderXbox.SIZE, "DDS Xbox header")
        return DdsHeaderXbox(*_XBOX.unpack(bytes(data)))


DDS_MIN_HEADER_SIZE = 4 + DdsHeader.SIZE
DDS_DX10_HEADER_SIZE = 4 + DdsHeader.SIZE + DdsHeaderDxt10.SIZE
DDS_XBOX_HEADER_SIZE = 4 + DdsHeader.SIZE + DdsHeaderXbox.SIZE


@dataclass(frozen=True)
class DdsFileHeader:
    """Everything in front of the pixel data of a DDS file."""

    header: DdsHeader
    extension: DdsHeaderDxt10 | DdsHeaderXbox | None
    data_offset: int


def read_header(data: bytes) -> DdsFileHeader:
    """Parse the magic number, main header and any extension header."""
    raw = bytes(data)
    if len(raw) < DDS_MIN_HEADER_SIZE:
        raise ValueError(f"DDS data needs at least {DDS_MIN_HEADER_SIZE} bytes, got {len(raw)}")
    (magic,) = _U32.unpack_from(raw, 0)
    if magic != DDS_MAGIC:
        raise ValueError(f"not a DDS file: magic 0x{magic:08x}")

    header = DdsHeader.unpack(raw[4:DDS_MIN_HEADER_SIZE])
    if header.size != DdsHeader.SIZE or header.ddspf.size != DdsPixelFormat.SIZE:
        raise ValueError("DDS header has wrong structure sizes")

    if header.ddspf.has_fourcc:
        if header.ddspf.fourcc == DDSPF_DX10.fourcc:
            if len(raw) < DDS_DX10_HEADER_SIZE:
                raise ValueError("DDS data too short for the DX10 header")
            ext = DdsHeaderDxt10.unpack(raw[DDS_MIN_HEADER_SIZE:DDS_DX10_HEADER_SIZE])
            return DdsFileHeader(header, ext, DDS_DX10_HEADER_SIZE)
        if header.ddspf.fourcc == DDSPF_XBOX.fourcc:
            if len(raw) < DDS_XBOX_HEADER_SIZE:
                raise ValueError("DDS data too short for the Xbox header")
            xbox = DdsHeaderXbox.unpack(raw[DDS_MIN_HEADER_SIZE:DDS_XBOX_HEADER_SIZE])
            return DdsFileHeader(header, xbox, DDS_XBOX_HEADER_SIZE)

    return DdsFileHeader(header, None, DDS_MIN_HEADER_SIZE)
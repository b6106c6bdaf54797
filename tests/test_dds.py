import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mgamecore.dds import (
    DDS_DX10_HEADER_SIZE,
    DDS_FOURCC,
    DDS_MAGIC,
    DDS_MIN_HEADER_SIZE,
    DDS_XBOX_HEADER_SIZE,
    DDSPF_A8R8G8B8,
    DDSPF_DX10,
    DDSPF_DXT1,
    DDSPF_XBOX,
    AlphaMode,
    DdsHeader,
    DdsHeaderDxt10,
    DdsHeaderXbox,
    DdsPixelFormat,
    ResourceDimension,
    make_fourcc,
    read_header,
)

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
MAGIC = struct.pack("<I", DDS_MAGIC)


def _header(ddspf, **kwargs):
    return DdsHeader(ddspf=ddspf, height=4, width=8, **kwargs)


def test_make_fourcc_matches_magic():
    assert make_fourcc("DDS ") == DDS_MAGIC
    assert make_fourcc(b"DDS ") == DDS_MAGIC


def test_make_fourcc_byte_order():
    assert make_fourcc("DXT1").to_bytes(4, "little") == b"DXT1"


@pytest.mark.parametrize("code", ["DX1", "DX100", "", "DX\u20ac1"])
def test_make_fourcc_rejects_bad_codes(code):
    with pytest.raises(ValueError):
        make_fourcc(code)


def test_enum_values():
    assert ResourceDimension(3) is ResourceDimension.TEXTURE2D
    assert ResourceDimension(4) is ResourceDimension.TEXTURE3D
    assert AlphaMode(2) is AlphaMode.PREMULTIPLIED
    with pytest.raises(ValueError):
        ResourceDimension(1)


def test_dxt1_pixel_format_bytes():
    packed = DDSPF_DXT1.pack()
    assert packed == b"\x20\x00\x00\x00\x04\x00\x00\x00DXT1" + bytes(20)


def test_structure_sizes():
    assert len(DdsPixelFormat().pack()) == 32
    assert len(DdsHeader().pack()) == 124
    assert len(DdsHeaderDxt10().pack()) == 20
    assert len(DdsHeaderXbox().pack()) == 36
    assert DDS_MIN_HEADER_SIZE == 128
    assert DDS_DX10_HEADER_SIZE == 148
    assert DDS_XBOX_HEADER_SIZE == 164


@given(st.tuples(*[u32] * 8))
def test_pixel_format_round_trip(values):
    pf = DdsPixelFormat(*values)
    assert DdsPixelFormat.unpack(pf.pack()) == pf


@given(st.tuples(*[u32] * 7), st.tuples(*[u32] * 11), st.tuples(*[u32] * 5))
def test_header_round_trip(head, reserved, tail):
    header = DdsHeader(
        *head,
        reserved1=reserved,
        ddspf=DDSPF_A8R8G8B8,
        caps=tail[0],
        caps2=tail[1],
        caps3=tail[2],
        caps4=tail[3],
        reserved2=tail[4],
    )
    assert DdsHeader.unpack(header.pack()) == header


@given(st.tuples(*[u32] * 5))
def test_dxt10_round_trip(values):
    ext = DdsHeaderDxt10(*values)
    assert DdsHeaderDxt10.unpack(ext.pack()) == ext


@given(st.tuples(*[u32] * 9))
def test_xbox_round_trip(values):
    ext = DdsHeaderXbox(*values)
    assert DdsHeaderXbox.unpack(ext.pack()) == ext


def test_pack_rejects_out_of_range():
    with pytest.raises(ValueError):
        DdsPixelFormat(flags=-1).pack()
    with pytest.raises(ValueError):
        DdsHeaderDxt10(dxgi_format=1 << 32).pack()


def test_header_rejects_bad_reserved_length():
    with pytest.raises(ValueError):
        DdsHeader(reserved1=(0,) * 10).pack()


@pytest.mark.parametrize(
    "cls,size",
    [(DdsPixelFormat, 32), (DdsHeader, 124), (DdsHeaderDxt10, 20), (DdsHeaderXbox, 36)],
)
def test_unpack_rejects_wrong_length(cls, size):
    with pytest.raises(ValueError):
        cls.unpack(bytes(size - 1))


def test_read_plain_header():
    header = _header(DDSPF_DXT1)
    result = read_header(MAGIC + header.pack() + b"pixels")
    assert result.header == header
    assert result.extension is None
    assert result.data_offset == DDS_MIN_HEADER_SIZE


def test_read_dx10_header():
    header = _header(DDSPF_DX10)
    ext = DdsHeaderDxt10(28, ResourceDimension.TEXTURE2D, 0, 1, AlphaMode.STRAIGHT)
    result = read_header(MAGIC + header.pack() + ext.pack())
    assert result.extension == ext
    assert result.data_offset == DDS_DX10_HEADER_SIZE


def test_read_xbox_header():
    header = _header(DDSPF_XBOX)
    ext = DdsHeaderXbox(28, 3, 0, 1, 0, 5, 256, 1024, 1)
    result = read_header(MAGIC + header.pack() + ext.pack())
    assert result.extension == ext
    assert result.data_offset == DDS_XBOX_HEADER_SIZE


def test_dx10_code_without_fourcc_flag_is_plain():
    pf = DdsPixelFormat(fourcc=DDSPF_DX10.fourcc)
    assert not pf.flags & DDS_FOURCC
    result = read_header(MAGIC + _header(pf).pack())
    assert result.extension is None
    assert result.data_offset == DDS_MIN_HEADER_SIZE


def test_read_header_rejects_short_data():
    with pytest.raises(ValueError):
        read_header(MAGIC + bytes(10))


def test_read_header_rejects_bad_magic():
    with pytest.raises(ValueError):
        read_header(b"PNG " + _header(DDSPF_DXT1).pack())


def test_read_header_rejects_bad_sizes():
    bad = DdsHeader(size=100, ddspf=DDSPF_DXT1)
    with pytest.raises(ValueError):
        read_header(MAGIC + bad.pack())
    bad_pf = _header(DdsPixelFormat(size=16))
    with pytest.raises(ValueError):
        read_header(MAGIC + bad_pf.pack())


def test_read_header_rejects_truncated_extension():
    with pytest.raises(ValueError):
        read_header(MAGIC + _header(DDSPF_DX10).pack() + bytes(10))
    with pytest.raises(ValueError):
        read_header(MAGIC + _header(DDSPF_XBOX).pack() + bytes(20))
import pytest
from hypothesis import given
from hypothesis import strategies as st

from mgamecore.bc import (
    BC1Block,
    BC2Block,
    BC3Block,
    BCFlags,
    HDRColorA,
    hdr_color_lerp,
    optimize_alpha,
)

u16 = st.integers(0, 0xFFFF)
u32 = st.integers(0, 0xFFFFFFFF)
bc1_blocks = st.builds(BC1Block, st.tuples(u16, u16), u32)


def test_flags_combine():
    flags = BCFlags(0x30000)
    assert flags == BCFlags.DITHER_RGB | BCFlags.DITHER_A
    assert BCFlags.DITHER_A in flags
    assert BCFlags.UNIFORM not in flags
    assert BCFlags(0x100000) is BCFlags.FORCE_BC7_MODE6


def test_color_add_sub_roundtrip():
    a = HDRColorA(0.5, 0.25, 1.0, 0.0)
    b = HDRColorA(1.0, 2.0, 3.0, 4.0)
    assert (a + b) - b == a


def test_color_dot_product():
    a = HDRColorA(1.0, 2.0, 3.0, 4.0)
    assert a * HDRColorA(1.0, 1.0, 1.0, 1.0) == 10.0


def test_color_scale_and_divide():
    a = HDRColorA(1.0, 2.0, 3.0, 4.0)
    assert a * 2.0 == HDRColorA(2.0, 4.0, 6.0, 8.0)
    assert (a * 4.0) / 4.0 == a


def test_inplace_ops_keep_identity():
    a = HDRColorA(1.0, 2.0, 3.0, 4.0)
    original = a
    a += HDRColorA(1.0, 1.0, 1.0, 1.0)
    a -= HDRColorA(1.0, 1.0, 1.0, 1.0)
    a *= 2.0
    a /= 2.0
    assert a is original
    assert a == HDRColorA(1.0, 2.0, 3.0, 4.0)


def test_clamp():
    c = HDRColorA(-1.0, 0.5, 2.0, 1.0).clamp(0.0, 1.0)
    assert c == HDRColorA(0.0, 0.5, 1.0, 1.0)


def test_lerp_endpoints():
    c1 = HDRColorA(0.0, 0.2, 0.4, 0.6)
    c2 = HDRColorA(1.0, 0.8, 0.6, 0.4)
    assert hdr_color_lerp(c1, c2, 0.0) == c1
    assert hdr_color_lerp(c1, c2, 1.0) == c2


def test_lerp_midpoint_is_average():
    c1 = HDRColorA(0.0, 0.0, 0.0, 0.0)
    c2 = HDRColorA(2.0, 4.0, 6.0, 8.0)
    assert hdr_color_lerp(c1, c2, 0.5) == c2 / 2.0


def test_bc1_pack_is_little_endian():
    block = BC1Block((0xF800, 0x001F), 0x12345678)
    assert block.pack() == b"\x00\xf8\x1f\x00\x78\x56\x34\x12"


@given(bc1_blocks)
def test_bc1_roundtrip(block):
    data = block.pack()
    assert len(data) == 8
    assert BC1Block.unpack(data) == block


@given(st.tuples(u32, u32), bc1_blocks)
def test_bc2_roundtrip(bitmap, bc1):
    block = BC2Block(bitmap, bc1)
    data = block.pack()
    assert len(data) == 16
    assert BC2Block.unpack(data) == block
    assert data[8:] == bc1.pack()


@given(st.tuples(st.integers(0, 255), st.integers(0, 255)), st.binary(min_size=6, max_size=6), bc1_blocks)
def test_bc3_roundtrip(alpha, bitmap, bc1):
    block = BC3Block(alpha, bitmap, bc1)
    data = block.pack()
    assert len(data) == 16
    assert data[:2] == bytes(alpha)
    assert BC3Block.unpack(data) == block


@pytest.mark.parametrize("cls,size", [(BC1Block, 7), (BC2Block, 15), (BC3Block, 17)])
def test_unpack_wrong_length(cls, size):
    with pytest.raises(ValueError):
        cls.unpack(bytes(size))


def test_pack_out_of_range():
    with pytest.raises(ValueError):
        BC1Block((0x10000, 0), 0).pack()
    with pytest.raises(ValueError):
        BC3Block((256, 0)).pack()
    with pytest.raises(ValueError):
        BC3Block((0, 0), bytes(5)).pack()


def test_optimize_alpha_constant_points():
    assert optimize_alpha([0.5] * 16, 8) == (0.5, 0.5)


def test_optimize_alpha_exact_steps():
    points = [k / 7 for k in range(8)] * 2
    x, y = optimize_alpha(points, 8)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(1.0)


@pytest.mark.parametrize("steps", [5, 7])
def test_optimize_alpha_bad_steps(steps):
    with pytest.raises(ValueError):
        optimize_alpha([0.0] * 16, steps)


def test_optimize_alpha_bad_length():
    with pytest.raises(ValueError):
        optimize_alpha([0.0] * 15, 8)


@given(
    st.lists(st.floats(0.0, 1.0), min_size=16, max_size=16),
    st.sampled_from([6, 8]),
)
def test_optimize_alpha_unsigned_within_range(points, steps):
    x, y = optimize_alpha(points, steps)
    assert 0.0 <= x <= 1.0
    assert 0.0 <= y <= 1.0


@given(st.lists(st.floats(-1.0, 1.0), min_size=16, max_size=16))
def test_optimize_alpha_signed_eight_steps_ordered(points):
    x, y = optimize_alpha(points, 8, True)
    assert -1.0 <= x <= y <= 1.0
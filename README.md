# mgamecore

Small building blocks for game and rendering code, with no dependencies
beyond the standard library.

- `mgamecore.vectors`: `Vector2` and `Vector3`, mutable float vectors with
  arithmetic operators (`+`, `-`, `*`, `/` and their in-place forms),
  component-wise multiplication by another vector of the same kind, and
  equality that treats components within 0.000001 of each other as equal.
  Adding or subtracting a `Vector2` to a `Vector3` touches only x and y.
  Dividing by a value within 0.000001 of zero gives a vector of positive
  infinity instead of raising. Also `magnitude()`, `normalized()`,
  `normalize()`, `to_vector3()` / `to_vector2()`, and constant directions
  such as `Vector2.zero()`, `Vector3.up()`, `Vector3.forward()` and
  `Vector3.positive_infinity()`.
- `mgamecore.color`: `Color`, a frozen RGBA colour with components in the
  range 0.0 to 1.0, and `Color.black()`.
- `mgamecore.debug`: `Debug`, a printf-style (`%`-formatting) logging front
  end that forwards `log`, `log_warning` and `log_error` to a `Logger` back
  end. Without a logger it uses `DefaultLogger`, which writes informational
  messages to its stream (standard output by default); its warning and
  error methods format the message and return the text without writing it.
  `set_logger(None)` silences all output. A ready-made instance is available
  as `mgamecore.debug.debug`.
- `mgamecore.bc`: block-compression helpers: `HDRColorA` (arithmetic, dot
  product with `*`, `clamp`), `hdr_color_lerp`, `BCFlags`, the packed
  little-endian `BC1Block` (8 bytes), `BC2Block` and `BC3Block` (16 bytes)
  with `pack()` / `unpack()`, and `optimize_alpha`, which fits alpha endpoints
  to a block of 16 values for 6- or 8-step interpolation.
- `mgamecore.dds`: DDS header structures (`DdsPixelFormat`, `DdsHeader`,
  `DdsHeaderDxt10`, `DdsHeaderXbox`) with `pack()` / `unpack()`, the common
  `DDSPF_*` pixel formats and flag constants, `ResourceDimension`,
  `AlphaMode`, `make_fourcc`, and `read_header`, which checks the magic number
  and structure sizes and reads any DX10 or Xbox extension header.
- `mgamecore.texflags`: `ScanlineFlags`, `ConvertFlags`, `ExtraFormat`
  format codes, `HResult` failure codes and `hresult_name`.

Malformed input raises `ValueError`: wrong block or header lengths, values
that do not fit their fields, a bad DDS magic number, or `optimize_alpha`
called with other than 16 points or 6/8 steps.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from mgamecore.vectors import Vector2, Vector3

v = Vector3(3, 4, 0)
print(v.magnitude())        # 5.0
print(v.normalized())       # (0.6,0.8,0)
print(Vector2(1, 2) * 2)    # (2,4)
print(Vector2(1, 1) / 0)    # (inf,inf)
```

```python
from mgamecore.dds import make_fourcc, read_header

assert make_fourcc("DXT1") == 0x31545844

with open("texture.dds", "rb") as fh:
    info = read_header(fh.read())
print(info.header.width, info.header.height, info.data_offset)
```

```python
import sys
from mgamecore.debug import Debug, DefaultLogger

debug = Debug(DefaultLogger(sys.stdout))
debug.log("loaded %d textures\n", 12)
```

## What it does not do

There is no renderer, window or GPU access here, and no command-line tool.
The BC module describes block layouts and fits alpha endpoints but does not
encode or decode whole blocks into pixels, and the DDS module reads headers
only; it does not load or convert the pixel data that follows them.
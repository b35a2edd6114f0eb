# crcforge

Table-driven CRC calculation in pure Python. Any CRC of width 8, 16, 32 or
64 bits can be described by its polynomial, initial value, input/output
reflection and final XOR. A catalogue of well-known algorithms is ready to
use.

## Installation

```
pip install crcforge
```

## Using a preset

```python
from crcforge.presets import CRC16, CRC32, by_name

data = bytes([0x12, 0x5A, 0x23, 0x19, 0x92, 0xF3, 0xDE, 0xC2, 0x5A, 0x1F, 0x91, 0xA3])

value = CRC16.CCITT_FALSE.calc(data)
print(f"0x{value:04X}")

crc32 = by_name("CRC32.CRC32")
print(f"0x{crc32.calc(b'hello'):08X}")
```

The presets are grouped by width in the classes `CRC8`, `CRC16`, `CRC32` and
`CRC64` of `crcforge.presets`:

- `CRC8`: `CRC8`, `CDMA2000`, `DARC`, `DVB_S2`, `EBU`, `I_CODE`, `ITU`,
  `MAXIM`, `ROHC`, `WCDMA`
- `CRC16`: `ARC`, `AUG_CCITT`, `BUYPASS`, `CCITT_FALSE`, `CDMA2000`,
  `DDS_110`, `DECT_R`, `DECT_X`, `DNP`, `EN_13757`, `GENIBUS`, `KERMIT`,
  `MAXIM`, `MCRF4XX`, `MODBUS`, `RIELLO`, `T10_DIF`, `TELEDISK`,
  `TMS37157`, `USB`, `X_25`, `XMODEM`, `A`
- `CRC32`: `CRC32`, `BZIP2`, `JAMCRC`, `MPEG_2`, `POSIX`, `SATA`, `XFER`,
  `C`, `D`, `Q`
- `CRC64`: `ECMA`, `GO_ISO`, `WE`, `XY`

`by_name` looks a preset up by its dotted name, such as
`"CRC16.CCITT_FALSE"`. The lookup ignores case and surrounding whitespace,
and accepts `::` for `.` and `-` for `_` (so `"crc16::ccitt-false"` works
too). An unknown name raises `KeyError`.

## Calculating in chunks

`calc(data, prior_crc)` takes `bytes`, `bytearray`, `memoryview` or any
iterable of byte values. Pass the previous result as `prior_crc` to continue
a calculation:

```python
crc = CRC16.CCITT_FALSE
value = crc.calc(b"\x12\x34\x56")
value = crc.calc(b"\x78\x9a\xbc\xde", value)
assert value == crc.calc(b"\x12\x34\x56\x78\x9a\xbc\xde")
```

Calling `calc()` with no data returns the CRC of empty input, the same value
as `null_crc()`. To start a chunked calculation by hand, begin from
`crc.null_crc()`, never from the algorithm's `init` parameter. The two
differ when the output is reflected or XORed.

## Defining your own CRC

```python
from crcforge.crc import Crc

mine = Crc(width=8, poly=0x12, init=0x34, refl_in=True, refl_out=True, xor_out=0xFF)
print(hex(mine.calc(b"\x12\x34\x56")))
print(hex(mine.table()[1]))
```

`Crc` is a frozen dataclass. It checks its parameters when it is created:

- A width other than 8, 16, 32 or 64 raises `ValueError`.
- A `poly`, `init` or `xor_out` that does not fit in the width raises `ValueError`.
- Reflection flags that are not `bool` raise `TypeError`.

Passing a `str` or an `int` as data to `calc` raises `TypeError`. A
`prior_crc` that does not fit the width raises `ValueError`.

`table()` returns the 256-entry lookup table that `calc` uses, as a tuple.
Tables are built once and cached. `reverse_bits(value, width)` from
`crcforge.crc` reverses the lowest `width` bits of `value`, for widths 8,
16, 32 and 64.

## What it does not do

crcforge is a library only. It has no command-line tool and reads no files
itself. Hand it the bytes to checksum. Widths other than 8, 16, 32 and 64
bits are not supported.

## Running the tests

```
pip install "crcforge[test]"
pytest
```
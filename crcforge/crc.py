"""Table-driven CRC computation for 8, 16, 32 and 64 bit checksums."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

SUPPORTED_WIDTHS = (8, 16, 32, 64)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _check_width(width: int) -> None:
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported CRC width {width!r}; expected one of {SUPPORTED_WIDTHS}")


def _check_fits(value: int, width: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    if not 0 <= value < (1 << width):
        raise ValueError(f"{what} 0x{value:X} does not fit in {width} bits")
    return value


def reverse_bits(value: int, width: int) -> int:
    """Return ``value`` with its lowest ``width`` bits in reverse order."""
    _check_width(width)
    _check_fits(value, width, "value")
    return int(format(value, f"0{width}b")[::-1], 2)


@lru_cache(maxsize=None)
def _build_table(width: int, poly: int, reflected: bool) -> tuple[int, ...]:
    mask = (1 << width) - 1
    top_bit = 1 << (width - 1)

    def entry(index: int) -> int:
        remainder = reverse_bits(index, 8) if reflected else index
        for _ in range(width):
            if remainder & top_bit:
                remainder = ((remainder << 1) ^ poly) & mask
            else:
                remainder = (remainder << 1) & mask
        return reverse_bits(remainder, width) if reflected else remainder

    return tuple(entry(index) for index in range(256))


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, (int, str)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    return bytes(data)


@dataclass(frozen=True)
class Crc:
    """A CRC algorithm described by its width, polynomial, initial state,
    input/output reflection and final XOR value."""

    width: int
    poly: int
    init: int
    refl_in: bool
    refl_out: bool
    xor_out: int

    def __post_init__(self) -> None:
        _check_width(self.width)
        _check_fits(self.poly, self.width, "poly")
        _check_fits(self.init, self.width, "init")
        _check_fits(self.xor_out, self.width, "xor_out")
        if not isinstance(self.refl_in, bool) or not isinstance(self.refl_out, bool):
            raise TypeError("refl_in and refl_out must be bool")

    def null_crc(self) -> int:
        """CRC of empty input; the value to start a chunked calculation from."""
        start = reverse_bits(self.init, self.width) if self.refl_out else self.init
        return start ^ self.xor_out

    def table(self) -> tuple[int, ...]:
        """The 256-entry lookup table used by :meth:`calc`."""
        return _build_table(self.width, self.poly, self.refl_in)

    def calc(self, data: BytesLike = b"", prior_crc: Optional[int] = None) -> int:
        """Checksum ``data``, continuing from ``prior_crc`` when it is given."""
        width = self.width
        if prior_crc is None:
            crc = self.null_crc()
        else:
            crc = _check_fits(prior_crc, width, "prior_crc")
        payload = _as_bytes(data)
        lookup = self.table()

        crc ^= self.xor_out
        if self.refl_out:
            crc = reverse_bits(crc, width)

        if self.refl_in:
            crc = reverse_bits(crc, width)
            for byte in payload:
                crc = lookup[(byte ^ crc) & 0xFF] ^ (crc >> 8)
            if self.refl_out != self.refl_in:
                crc = reverse_bits(crc, width)
        else:
            shift = width - 8
            mask = (1 << width) - 1
            for byte in payload:
                crc = lookup[(byte ^ (crc >> shift)) & 0xFF] ^ ((crc << 8) & mask)
            if self.refl_out:
                crc = reverse_bits(crc, width)

        return crc ^ self.xor_out
"""Catalogue of well-known CRC algorithms."""

from __future__ import annotations

from crcforge.crc import Crc


class CRC8:
    """8-bit CRC algorithms."""

    CRC8 = Crc(8, 0x07, 0x00, False, False, 0x00)
    CDMA2000 = Crc(8, 0x9B, 0xFF, False, False, 0x00)
    DARC = Crc(8, 0x39, 0x00, True, True, 0x00)
    DVB_S2 = Crc(8, 0xD5, 0x00, False, False, 0x00)
    EBU = Crc(8, 0x1D, 0xFF, True, True, 0x00)
    I_CODE = Crc(8, 0x1D, 0xFD, False, False, 0x00)
    ITU = Crc(8, 0x07, 0x00, False, False, 0x55)
    MAXIM = Crc(8, 0x31, 0x00, True, True, 0x00)
    ROHC = Crc(8, 0x07, 0xFF, True, True, 0x00)
    WCDMA = Crc(8, 0x9B, 0x00, True, True, 0x00)


class CRC16:
    """16-bit CRC algorithms."""

    ARC = Crc(16, 0x8005, 0x0000, True, True, 0x0000)
    AUG_CCITT = Crc(16, 0x1021, 0x1D0F, False, False, 0x0000)
    BUYPASS = Crc(16, 0x8005, 0x0000, False, False, 0x0000)
    CCITT_FALSE = Crc(16, 0x1021, 0xFFFF, False, False, 0x0000)
    CDMA2000 = Crc(16, 0xC867, 0xFFFF, False, False, 0x0000)
    DDS_110 = Crc(16, 0x8005, 0x800D, False, False, 0x0000)
    DECT_R = Crc(16, 0x0589, 0x0000, False, False, 0x0001)
    DECT_X = Crc(16, 0x0589, 0x0000, False, False, 0x0000)
    DNP = Crc(16, 0x3D65, 0x0000, True, True, 0xFFFF)
    EN_13757 = Crc(16, 0x3D65, 0x0000, False, False, 0xFFFF)
    GENIBUS = Crc(16, 0x1021, 0xFFFF, False, False, 0xFFFF)
    KERMIT = Crc(16, 0x1021, 0x0000, True, True, 0x0000)
    MAXIM = Crc(16, 0x8005, 0x0000, True, True, 0xFFFF)
    MCRF4XX = Crc(16, 0x1021, 0xFFFF, True, True, 0x0000)
    MODBUS = Crc(16, 0x8005, 0xFFFF, True, True, 0x0000)
    RIELLO = Crc(16, 0x1021, 0xB2AA, True, True, 0x0000)
    T10_DIF = Crc(16, 0x8BB7, 0x0000, False, False, 0x0000)
    TELEDISK = Crc(16, 0xA097, 0x0000, False, False, 0x0000)
    TMS37157 = Crc(16, 0x1021, 0x89EC, True, True, 0x0000)
    USB = Crc(16, 0x8005, 0xFFFF, True, True, 0xFFFF)
    X_25 = Crc(16, 0x1021, 0xFFFF, True, True, 0xFFFF)
    XMODEM = Crc(16, 0x1021, 0x0000, False, False, 0x0000)
    A = Crc(16, 0x1021, 0xC6C6, True, True, 0x0000)


class CRC32:
    """32-bit CRC algorithms."""

    CRC32 = Crc(32, 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF)
    BZIP2 = Crc(32, 0x04C11DB7, 0xFFFFFFFF, False, False, 0xFFFFFFFF)
    JAMCRC = Crc(32, 0x04C11DB7, 0xFFFFFFFF, True, True, 0x00000000)
    MPEG_2 = Crc(32, 0x04C11DB7, 0xFFFFFFFF, False, False, 0x00000000)
    POSIX = Crc(32, 0x04C11DB7, 0x00000000, False, False, 0xFFFFFFFF)
    SATA = Crc(32, 0x04C11DB7, 0x52325032, False, False, 0x00000000)
    XFER = Crc(32, 0x000000AF, 0x00000000, False, False, 0x00000000)
    C = Crc(32, 0x1EDC6F41, 0xFFFFFFFF, True, True, 0xFFFFFFFF)
    D = Crc(32, 0xA833982B, 0xFFFFFFFF, True, True, 0xFFFFFFFF)
    Q = Crc(32, 0x814141AB, 0x00000000, False, False, 0x00000000)


class CRC64:
    """64-bit CRC algorithms."""

    ECMA = Crc(64, 0x42F0E1EBA9EA3693, 0x0000000000000000, False, False, 0x0000000000000000)
    GO_ISO = Crc(64, 0x000000000000001B, 0xFFFFFFFFFFFFFFFF, True, True, 0xFFFFFFFFFFFFFFFF)
    WE = Crc(64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF, False, False, 0xFFFFFFFFFFFFFFFF)
    XY = Crc(64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF, True, True, 0xFFFFFFFFFFFFFFFF)


_REGISTRY: dict[str, Crc] = {
    f"{family.__name__}.{attr}": preset
    for family in (CRC8, CRC16, CRC32, CRC64)
    for attr, preset in vars(family).items()
    if isinstance(preset, Crc)
}


def by_name(name: str) -> Crc:
    """Look up a preset such as ``"CRC16.CCITT_FALSE"`` (case-insensitive;
    ``::`` and ``-`` are accepted for ``.`` and ``_``)."""
    key = name.strip().upper().replace("::", ".").replace("-", "_")
    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(f"unknown CRC preset {name!r}") from None
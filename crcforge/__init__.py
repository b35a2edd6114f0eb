"""Table-driven CRC calculation with standard 8, 16, 32 and 64-bit presets."""

__version__ = "1.3.0"
__all__ = ["crc", "presets"]
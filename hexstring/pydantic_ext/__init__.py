from .hex_bytes import HexBytes

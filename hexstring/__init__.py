from hexstring.codec import char_to_nibble, nibble_to_char, byte_to_hex_pair, hex_pair_to_byte, encode, decode
from hexstring.error import HexStringException, InvalidCharacter, InvalidStringLength, InvalidNibble
from hexstring.types import HexString

__version__ = '0.1.0'

__all__ = [
    'HexString',
    'HexStringException',
    'InvalidCharacter',
    'InvalidStringLength',
    'InvalidNibble',
    'char_to_nibble',
    'nibble_to_char',
    'byte_to_hex_pair',
    'hex_pair_to_byte',
    'encode',
    'decode',
]

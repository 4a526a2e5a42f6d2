from typing import Iterable, Tuple, Union

from hexstring.const import HEX_ALPHABET, NIBBLE_MAX, BYTE_MAX
from hexstring.error import InvalidCharacter, InvalidNibble, InvalidStringLength

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]

_NIBBLE_OF_CHAR = {c: i for i, c in enumerate(HEX_ALPHABET)}

# '00' -> 0 ... 'ff' -> 255, used to decode payloads that are already validated
_BYTE_OF_PAIR = {hi + lo: (_NIBBLE_OF_CHAR[hi] << 4) | _NIBBLE_OF_CHAR[lo]
                 for hi in HEX_ALPHABET for lo in HEX_ALPHABET}


def char_to_nibble(c: str) -> int:
    """
    Convert a hex character into a value in the range 0-15 (inclusive).
    Only 0-9 and a-f (lower-case) are accepted.
    :param c:
    :return:
    """
    try:
        return _NIBBLE_OF_CHAR[c]
    except KeyError:
        raise InvalidCharacter(c) from None


def nibble_to_char(n: int) -> str:
    """
    Convert a nibble (0-15 inclusive) to its hex character.
    :param n:
    :return:
    """
    if not 0 <= n <= NIBBLE_MAX:
        raise InvalidNibble(n)
    return HEX_ALPHABET[n]


def byte_to_hex_pair(b: int) -> Tuple[str, str]:
    if not 0 <= b <= BYTE_MAX:
        raise ValueError('byte value out of range 0-255: %r' % b)

    try:
        return nibble_to_char(b >> 4), nibble_to_char(b & 0x0f)
    except InvalidNibble as e:
        raise RuntimeError('should never have an invalid nibble here, byte: %r' % b) from e


def hex_pair_to_byte(hi: str, lo: str) -> int:
    return (char_to_nibble(hi) << 4) | char_to_nibble(lo)


def validate_text(s: str) -> None:
    """
    Check length first, then stop at the first character outside 0-9a-f.
    :param s:
    :return:
    """
    if len(s) % 2 != 0:
        raise InvalidStringLength()

    for c in s:
        char_to_nibble(c)


def encode(data: BytesLike) -> str:
    if isinstance(data, memoryview):
        # any format or shape, as raw bytes in C order
        data = data.tobytes()
    return ''.join(hi + lo for hi, lo in map(byte_to_hex_pair, data))


def decode(text: str) -> bytes:
    if len(text) % 2 != 0:
        raise InvalidStringLength()

    return bytes(hex_pair_to_byte(text[i], text[i + 1]) for i in range(0, len(text), 2))


def _decode_trusted(text: str) -> bytes:
    return bytes(_BYTE_OF_PAIR[text[i:i + 2]] for i in range(0, len(text), 2))

import array
import pickle

import pytest

from hexstring import HexString, HexStringException, InvalidCharacter, InvalidStringLength

BYTE_REPR = bytes([203, 187, 198, 225, 155, 230, 62, 252, 221, 120, 50, 125, 45, 248, 80, 217,
                   35, 117, 175, 106, 3, 147, 79, 53, 228, 123, 208, 45, 27, 73, 108, 12])
STRING_REPR = 'cbbbc6e19be63efcdd78327d2df850d92375af6a03934f35e47bd02d1b496c0c'


def test_hexstr_from_bytes():
    assert HexString.from_bytes(bytes([203, 187, 198, 225])).as_text() == 'cbbbc6e1'
    assert HexString.from_bytes(BYTE_REPR).as_text() == STRING_REPR


def test_hexstr_from_text():
    assert HexString.from_text('cbbbc6e1').as_bytes() == bytes([203, 187, 198, 225])
    assert HexString.from_text(STRING_REPR).as_bytes() == BYTE_REPR
    assert HexString.from_text(STRING_REPR).as_text() == STRING_REPR


def test_hexstr_from_bytes_like():
    assert HexString.from_bytes(bytearray(b'\xee\xff')) == 'eeff'
    assert HexString.from_bytes(memoryview(b'\xee\xff')) == 'eeff'
    assert HexString.from_bytes([0, 1, 255]) == '0001ff'


def test_hexstr_from_bytes_rejects_text():
    with pytest.raises(TypeError):
        HexString.from_bytes('aa')


def test_hexstr_empty():
    assert HexString.from_bytes(b'').as_text() == ''
    assert HexString.from_bytes([]).as_bytes() == b''
    assert HexString.from_text('').as_bytes() == b''


def test_hexstr_as_bytes_repeatable():
    s = HexString.from_bytes(BYTE_REPR)
    assert s.as_bytes() == s.as_bytes() == BYTE_REPR
    assert s == STRING_REPR


def test_hexstr_odd_length():
    with pytest.raises(InvalidStringLength):
        HexString.from_text('abb')
    # length is checked before characters
    with pytest.raises(InvalidStringLength):
        HexString.from_text('abcdefg')


def test_hexstr_invalid_char():
    with pytest.raises(InvalidCharacter) as e:
        HexString.from_text('gg')
    assert e.value.char == 'g'
    assert str(e.value) == "Encountered invalid character: 'g'"


def test_hexstr_uppercase_rejected():
    with pytest.raises(InvalidCharacter) as e:
        HexString.from_text('AB')
    assert e.value.char == 'A'


def test_hexstr_errors_are_value_errors():
    with pytest.raises(ValueError):
        HexString.from_text('abb')
    with pytest.raises(HexStringException):
        HexString.from_text('zz')


def test_hexstr_parse():
    assert HexString.parse(STRING_REPR) == HexString.from_text(STRING_REPR)
    with pytest.raises(InvalidStringLength):
        HexString.parse('abb')


def test_hexstr_constructor():
    assert HexString('aa11').as_bytes() == b'\xaa\x11'
    with pytest.raises(InvalidStringLength):
        HexString('abb')
    with pytest.raises(TypeError):
        HexString(b'aa11')


def test_hexstr_str_behaviour():
    s = HexString('aa11')
    assert isinstance(s, str)
    assert type(s.as_text()) is str
    assert bytes(s) == b'\xaa\x11'
    assert repr(s) == "HexString('aa11')"
    assert hash(s) == hash('aa11')
    assert {s: 1}['aa11'] == 1


def test_hexstr_pickle():
    s = HexString('aa11')
    s2 = pickle.loads(pickle.dumps(s))
    assert type(s2) is HexString
    assert s2 == s


def test_hexstr_from_memoryview_any_format():
    mv = memoryview(array.array('H', [256]))
    assert HexString.from_bytes(mv).as_bytes() == bytes(mv)
    assert HexString.from_bytes(memoryview(b'ab').cast('c')) == '6162'
    assert HexString.from_bytes(memoryview(b'\x00\x01\x02\x03').cast('B', shape=[2, 2])) == '00010203'


def test_hexstr_length_counts_characters():
    # length is counted in characters, not in utf-8 bytes
    with pytest.raises(InvalidStringLength):
        HexString.from_text('é')
    with pytest.raises(InvalidCharacter) as e:
        HexString.from_text('aé')
    assert e.value.char == 'é'

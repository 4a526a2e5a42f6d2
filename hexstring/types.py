from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from hexstring.codec import BytesLike, encode, validate_text, _decode_trusted
from hexstring.const import HEX_STRING_PATTERN, HEX_STRING_EXAMPLES


class HexString(str):
    """
    A valid lowercase hex string, whether initialized from text or from bytes.

    Examples:
    HexString('cbbbc6e1')

    HexString.parse('cbbbc6e1').as_bytes()  # b'\\xcb\\xbb\\xc6\\xe1'

    HexString.from_bytes(b'\\xcb\\xbb\\xc6\\xe1')  # HexString('cbbbc6e1')
    """
    __slots__ = ()

    def __new__(cls, text: str):
        if not isinstance(text, str):
            raise TypeError('HexString requires str, got %s (use HexString.from_bytes for binary data)' %
                            type(text).__name__)
        validate_text(text)
        return super().__new__(cls, text)

    @classmethod
    def from_text(cls, s: str) -> 'HexString':
        """
        :param s: even length text of 0-9 and a-f
        :return:
        :raise InvalidStringLength: odd length
        :raise InvalidCharacter: first character that is not lowercase hex
        """
        return cls(s)

    @classmethod
    def parse(cls, s: str) -> 'HexString':
        return cls.from_text(s)

    @classmethod
    def from_bytes(cls, v: BytesLike) -> 'HexString':
        if isinstance(v, str):
            raise TypeError('HexString.from_bytes requires binary data, use HexString.from_text for text')
        # encoded text is valid by construction, skip validation
        return str.__new__(cls, encode(v))

    def as_text(self) -> str:
        return str(self)

    def as_bytes(self) -> bytes:
        return _decode_trusted(self)

    def __bytes__(self):
        return self.as_bytes()

    def __repr__(self):
        return f'HexString({super().__repr__()})'

    @classmethod
    def validate(cls, v: Any) -> 'HexString':
        if isinstance(v, cls):
            return v
        elif isinstance(v, str):
            return cls.from_text(v)
        elif isinstance(v, (bytes, bytearray, memoryview)):
            return cls.from_bytes(v)

        raise ValueError('invalid type')

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema,
                                     handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {
            'type': 'string',
            'pattern': HEX_STRING_PATTERN,
            'examples': HEX_STRING_EXAMPLES,
        }

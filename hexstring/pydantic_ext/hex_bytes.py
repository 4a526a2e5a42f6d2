import logging
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from hexstring.const import HEX_STRING_PATTERN, HEX_STRING_EXAMPLES
from hexstring.types import HexString

logger = logging.getLogger(__name__)


class HexBytes(bytes):
    """
    Binary field of a pydantic model. Accepts bytes, or hex text (e.g. from a json body).
    Dumped to json as hex text.
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.serialize, when_used='json'),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema,
                                     handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {
            'type': 'string',
            'pattern': HEX_STRING_PATTERN,
            'examples': HEX_STRING_EXAMPLES,
        }

    @classmethod
    def validate(cls, v):
        if isinstance(v, cls):
            return v
        elif isinstance(v, bytes):
            return cls(v)
        elif isinstance(v, (bytearray, memoryview)):
            logger.debug('coerce %s to bytes', type(v).__name__)
            return cls(bytes(v))
        elif isinstance(v, str):
            return cls(HexString.from_text(v).as_bytes())

        raise ValueError('invalid type')

    @staticmethod
    def serialize(v: bytes) -> str:
        return HexString.from_bytes(v).as_text()

    def __repr__(self):
        return f'HexBytes({super().__repr__()})'

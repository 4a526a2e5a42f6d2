import json

from hexstring.types import HexString


def json_default_ex(o):
    if isinstance(o, (bytes, bytearray, memoryview)):
        return HexString.from_bytes(o).as_text()
    elif isinstance(o, set):
        return list(o)
    raise TypeError('Object of type %s is not JSON serializable' % type(o).__name__)


def json_dumps_ex(obj, **kwargs):
    return json.dumps(obj, default=json_default_ex, **kwargs)

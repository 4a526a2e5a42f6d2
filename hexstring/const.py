# lowercase only, index == nibble value
HEX_ALPHABET = '0123456789abcdef'

NIBBLE_MAX = 0x0f
BYTE_MAX = 0xff

HEX_STRING_PATTERN = '^([0-9a-f]{2})*$'
HEX_STRING_EXAMPLES = ['aabb11', '1122', 'af02']

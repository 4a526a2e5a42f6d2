class HexStringException(ValueError):
    pass


class InvalidCharacter(HexStringException):
    """
    There was an invalid character in the hex string
    """
    def __init__(self, char: str):
        super().__init__("Encountered invalid character: '%s'" % char)
        self.char = char


class InvalidStringLength(HexStringException):
    """
    Each two characters represent one byte, so a hex string must be of even length
    """
    def __init__(self):
        super().__init__('String length was odd, but it must be even')


class InvalidNibble(HexStringException):
    """
    A value outside 0-15 was given to the nibble mapping.
    Only a direct call of `nibble_to_char` or a bug in the codec raises this.
    """
    def __init__(self, nibble: int):
        super().__init__('tried to convert nibble outside of 0-15 (inclusive): %r' % nibble)
        self.nibble = nibble

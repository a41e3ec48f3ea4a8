'decode digit strings written in bases 2 through 36'
from typing import Optional

MIN_BASE = 2
MAX_BASE = 36


class DecodeError(ValueError):
    pass


class EmptyInput(DecodeError):
    pass


class InvalidBase(DecodeError):
    pass


class InvalidDigitCharacter(DecodeError):
    def __init__(self, digit, position):
        super().__init__(f'Invalid digit {digit!r} at position {position}.')
        self.digit = digit
        self.position = position


class DigitOutOfRangeForBase(DecodeError):
    def __init__(self, digit, position, base):
        super().__init__(
            f'Digit {digit!r} at position {position} is invalid for base {base}.')
        self.digit = digit
        self.position = position
        self.base = base


def digit_value(c: str) -> Optional[int]:
    "value of a single digit symbol, letters are case-insensitive"
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 10
    if 'A' <= c <= 'Z':
        return ord(c) - ord('A') + 10
    return None


def decode(digits: str, base: int) -> int:
    """
    Decode `digits` as a non-negative integer written in `base`.

    int(digits, base) is not used because it also accepts signs, whitespace,
    underscores and prefixes, none of which are digits.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f'Base must be an integer, got {base!r}.')
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f'Base {base} is outside [{MIN_BASE}, {MAX_BASE}].')
    if not digits:
        raise EmptyInput('Cannot decode an empty digit string.')
    value = 0
    for pos, c in enumerate(digits):
        d = digit_value(c)
        if d is None:
            raise InvalidDigitCharacter(c, pos)
        if d >= base:
            raise DigitOutOfRangeForBase(c, pos, base)
        value = value * base + d
    return value

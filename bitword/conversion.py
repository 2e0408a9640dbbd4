"""Convert words from and to their textual binary representation.

Only the characters ``'0'`` and ``'1'`` are meaningful in the binary
text; any other character is skipped when parsing.
"""
import bidict

from bitword import core
from bitword.extraop import Reverse
from bitword.section import AddRight, pop_right

BINARY_DIGITS = bidict.bidict({"0": False, "1": True})
"""The mapping between binary characters and bit values."""


def from_string_msb(text):
    """Parse a word from a binary text with the first character being the MSB.

        >>> from bitword.conversion import from_string_msb
        >>> from_string_msb("101")
        0x0000000000000005
        >>> from_string_msb("1010 0001")
        0x00000000000000a1

    If the text contains more than `WORD_SIZE` binary characters,
    the first ones (the most significant) are discarded.
    """
    if not isinstance(text, str):
        msg = "cannot parse a word from '{}'"
        raise TypeError(msg.format(type(text).__name__))

    x = core.Word(0)
    for char in text:
        if char in BINARY_DIGITS:
            x = AddRight(x, BINARY_DIGITS[char])
    return x


def from_string_lsb(text):
    """Parse a word from a binary text with the first character being the LSB.

    The text is parsed with `from_string_msb` and the word is reversed,
    so the first binary character becomes the bit 1 when the text
    has exactly `WORD_SIZE` binary characters.

        >>> from bitword.conversion import from_string_lsb
        >>> from_string_lsb("1" + "0" * 63)
        0x0000000000000001
        >>> from_string_lsb("1")
        0x8000000000000000

    """
    return Reverse(from_string_msb(text))


def to_string_msb(x):
    """Return the binary text of the word with the MSB as first character.

        >>> from bitword.conversion import to_string_msb
        >>> to_string_msb(5)[-4:], len(to_string_msb(5))
        ('0101', 64)

    """
    chars = ["0"] * core.WORD_SIZE
    for i in reversed(range(core.WORD_SIZE)):
        bit, x = pop_right(x)
        chars[i] = BINARY_DIGITS.inverse[bit]
    return "".join(chars)


def to_string_lsb(x):
    """Return the binary text of the word with the LSB as first character.

        >>> from bitword.conversion import to_string_lsb
        >>> to_string_lsb(5)[:4]
        '1010'

    """
    return to_string_msb(Reverse(x))

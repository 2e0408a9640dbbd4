"""Manage the representation of words."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str

from bitword import conversion
from bitword import core


# noinspection PyPep8Naming,PyMethodMayBeStatic
class WordStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Word`."""

    def _print_Word(self, x):
        return x.hex()


# noinspection PyPep8Naming,PyMethodMayBeStatic
class WordReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `Word.vrepr` method."""

    def _print_Word(self, x):
        return "{}({})".format(type(x).__name__, x.hex())


def format_bin(x, nibbles=False):
    """Return the binary text of the word, MSB first.

    Args:
        x: a `Word` or an integer
        nibbles: if True, the bits are grouped in nibbles (groups of 4 bits)
            separated by spaces

    ::

        >>> from bitword.printing import format_bin
        >>> format_bin(0xa5, nibbles=True)[-9:]
        '1010 0101'

    """
    text = conversion.to_string_msb(x)
    if nibbles:
        text = " ".join(text[i:i + 4] for i in range(0, len(text), 4))
    return text


def format_hex(x):
    """Return the hexadecimal text of the word.

    The text has the prefix ``0X`` followed by ``WORD_SIZE / 4``
    upper-case digits.

        >>> from bitword.printing import format_hex
        >>> format_hex(0xabc)
        '0X0000000000000ABC'

    """
    x = core.wordify(x)
    width = (core.WORD_SIZE // 4) + 2
    return format(int(x), "#0{}X".format(width))


def print_bin(x, nibbles=False, file=None):
    """Print the word in binary format (see `format_bin`)."""
    print(format_bin(x, nibbles), file=file)


def print_hex(x, file=None):
    """Print the word in hexadecimal format (see `format_hex`)."""
    print(format_hex(x), file=file)

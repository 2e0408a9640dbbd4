"""Provide the word type."""
from sympy import Atom

WORD_SIZE = 64
"""The bit-width of every word."""

WORD_MASK = 2 ** WORD_SIZE - 1
"""The word with every bit set."""


class Word(Atom):
    """Represent fixed-width words.

    Words are interpreted as unsigned integers in base 2, that is,
    a word :math:`(x_{n-1}, \\dots, x_1, x_0)` represents the non-negative
    integer :math:`x_0 + 2 x_1 + \\dots + 2^{n-1} x_{n-1}`, where
    :math:`n` is `WORD_SIZE`.

    Bit indices are 1-based: index 1 is the least significant bit
    and index `WORD_SIZE` the most significant one.

    Args:
        val: the integer value.

    ::

        >>> from bitword.core import Word
        >>> Word(3)
        0x0000000000000003
        >>> Word(0b11) == 3
        True
        >>> Word(3).vrepr()
        'Word(0x0000000000000003)'

    Words support the bitwise operators with the standard symbols.
    See `operation` for more information.

        >>> ~Word(0)
        0xffffffffffffffff
        >>> Word(0b1100) & 0b1010
        0x0000000000000008
        >>> Word(1) << 63
        0x8000000000000000

    """

    # Bitwise operators

    def __invert__(self):
        """Override ~ operator."""
        from bitword import operation
        return operation.BvNot(self)

    def __and__(self, other):
        """Override & operator."""
        from bitword import operation
        return operation.BvAnd(self, other)

    __rand__ = __and__

    def __or__(self, other):
        """Override | operator."""
        from bitword import operation
        return operation.BvOr(self, other)

    __ror__ = __or__

    def __xor__(self, other):
        """Override ^ operator."""
        from bitword import operation
        return operation.BvXor(self, other)

    __rxor__ = __xor__

    # Shifts

    def __lshift__(self, other):
        """Override << operator."""
        from bitword import operation
        return operation.BvShl(self, other)

    def __rshift__(self, other):
        """Override >> operator."""
        from bitword import operation
        return operation.BvLshr(self, other)

    def __int__(self):
        return self.val

    def __hash__(self):
        return super().__hash__()

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, int):
            return self.val == other
        elif isinstance(other, Word):
            return self.val == other.val
        else:
            return False

    def __ne__(self, other):
        return not self == other

    def _hashable_content(self):
        """Return a tuple of information about self to compute its hash."""
        return (self.val, )

    @classmethod
    def class_key(cls):
        """Return the key (identifier) of the class for sorting."""
        return 1, 0, cls.__name__

    __slots__ = ["_val"]

    def __new__(cls, val):
        assert isinstance(val, int) and 0 <= val <= WORD_MASK
        obj = Atom.__new__(cls)
        obj._val = int(val)
        return obj

    def __str__(self):
        """Return the non-verbose string representation."""
        from bitword import printing
        return (printing.WordStrPrinter()).doprint(self)

    __repr__ = __str__

    @property
    def val(self):
        """The integer represented by the word."""
        return self._val

    @property
    def width(self):
        """The bit-width of the word."""
        return WORD_SIZE

    def vrepr(self):
        """Return a verbose string representation."""
        from bitword import printing
        return (printing.WordReprPrinter()).doprint(self)

    def bin(self):
        """Return the binary representation.

            >>> from bitword.core import Word
            >>> print(Word(5).bin())
            0b0000000000000000000000000000000000000000000000000000000000000101

        """
        width = WORD_SIZE + 2  # 2 due to '0b'
        return format(self.val, r'0=#{}b'.format(width))

    def hex(self):
        """Return the hexadecimal representation.

            >>> from bitword.core import Word
            >>> print(Word(255).hex())
            0x00000000000000ff

        """
        width = (WORD_SIZE // 4) + 2
        return format(self.val, '0=#{}x'.format(width))


def wordify(t):
    """Convert the argument *t* to a word.

        >>> from bitword.core import wordify
        >>> print(wordify(7).vrepr())
        Word(0x0000000000000007)

    """
    if isinstance(t, Word):
        return t
    elif isinstance(t, int):
        return Word(t)
    else:
        msg = "cannot convert '{}' to a word"
        raise TypeError(msg.format(type(t).__name__))

"""Provide the operators over sections (contiguous ranges of bits) of a word.

A section is given by the 1-based indices of its lowest and highest
bits, both included.
"""
from bitword import core
from bitword import operation
from bitword.operation import BvLshr, BvNot, BvOr, BvShl, Mask


def _complement_width(n):
    """Return the shift that keeps n bits of a word (0 if n >= WORD_SIZE)."""
    return max(core.WORD_SIZE - n, 0)


class FilterLeft(operation.Operation):
    """Keep the n most significant bits (the rest are zeroed).

        >>> from bitword.section import FilterLeft
        >>> FilterLeft(0xffffffffffffffff, 4)
        0xf000000000000000
        >>> FilterLeft(0xffffffffffffffff, 0)
        0x0000000000000000

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, n):
        r = _complement_width(n)
        return BvShl(BvLshr(x, r), r)


class FilterRight(operation.Operation):
    """Keep the n least significant bits (the rest are zeroed).

        >>> from bitword.section import FilterRight
        >>> FilterRight(0xffffffffffffffff, 4)
        0x000000000000000f
        >>> FilterRight(0xffffffffffffffff, 70)
        0xffffffffffffffff

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, n):
        r = _complement_width(n)
        return BvLshr(BvShl(x, r), r)


class FilterSectionIncl(operation.Operation):
    """Keep the bits between the indices ``first`` and ``last`` (included).

    The bits above ``last`` are dropped first and then the bits
    below ``first``. An empty section (``first > last``) gives
    the zero word.

        >>> from bitword.section import FilterSectionIncl
        >>> FilterSectionIncl(0xffff, 5, 8)
        0x00000000000000f0
        >>> FilterSectionIncl(0xffff, 0, 8)
        0x00000000000000ff

    """

    arity = [1, 2]
    operand_types = [core.Word, int, int]

    @classmethod
    def eval(cls, x, first, last):
        return FilterLeft(FilterRight(x, last), core.WORD_SIZE - first + 1)


class FilterSectionExcl(operation.Operation):
    """Return the complement of `FilterSectionIncl`.

    The bits of the section taken from the word are inverted and
    every bit outside the section is set.

        >>> from bitword.section import FilterSectionExcl
        >>> FilterSectionExcl(0xf0, 5, 8)
        0xffffffffffffff0f
        >>> FilterSectionExcl(0xffff, 5, 8)
        0xffffffffffffff0f
        >>> FilterSectionExcl(0x0, 5, 8)
        0xffffffffffffffff

    """

    arity = [1, 2]
    operand_types = [core.Word, int, int]

    @classmethod
    def eval(cls, x, first, last):
        return BvNot(FilterSectionIncl(x, first, last))


class GetSection(operation.Operation):
    """Extract the bits between ``first`` and ``last`` (included).

    The section is shifted so that the bit ``first`` becomes the
    least significant bit.
    With ``first <= 1`` nothing is shifted, so the bits up to ``last``
    are already right-aligned.

        >>> from bitword.section import GetSection
        >>> GetSection(0xf0, 5, 8)
        0x000000000000000f
        >>> GetSection(0xabcd000000000000, 49, 64)
        0x000000000000abcd
        >>> GetSection(0xff, 0, 4)
        0x000000000000000f

    """

    arity = [1, 2]
    operand_types = [core.Word, int, int]

    @classmethod
    def eval(cls, x, first, last):
        return BvLshr(FilterSectionIncl(x, first, last), max(first - 1, 0))


# Concatenation

class AddLeft(operation.Operation):
    """Shift one position to the right and put the given bit as MSB.

        >>> from bitword.section import AddLeft
        >>> AddLeft(0b10, True)
        0x8000000000000001
        >>> AddLeft(0b10, False)
        0x0000000000000001

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def condition(cls, x, bit):
        return bit in [0, 1]

    @classmethod
    def eval(cls, x, bit):
        return BvOr(BvLshr(x, 1), Mask(core.WORD_SIZE) if bit else 0)


class AddRight(operation.Operation):
    """Shift one position to the left and put the given bit as LSB.

        >>> from bitword.section import AddRight
        >>> AddRight(0b10, True)
        0x0000000000000005

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def condition(cls, x, bit):
        return bit in [0, 1]

    @classmethod
    def eval(cls, x, bit):
        return BvOr(BvShl(x, 1), 1 if bit else 0)


class AddBitsLeft(operation.Operation):
    """Shift n positions to the right and fill the MSBs with the n LSBs of ``left``.

        >>> from bitword.section import AddBitsLeft
        >>> AddBitsLeft(0xff, 0xabc, 8)
        0xbc00000000000000

    """

    arity = [2, 1]
    operand_types = [core.Word, core.Word, int]

    @classmethod
    def condition(cls, x, left, n):
        return n >= 0

    @classmethod
    def eval(cls, x, left, n):
        return BvOr(BvLshr(x, n), BvShl(FilterRight(left, n), _complement_width(n)))


class AddBitsRight(operation.Operation):
    """Shift n positions to the left and fill the LSBs with the n LSBs of ``right``.

        >>> from bitword.section import AddBitsRight
        >>> AddBitsRight(0xff, 0xabc, 8)
        0x000000000000ffbc

    """

    arity = [2, 1]
    operand_types = [core.Word, core.Word, int]

    @classmethod
    def condition(cls, x, right, n):
        return n >= 0

    @classmethod
    def eval(cls, x, right, n):
        return BvOr(BvShl(x, n), FilterRight(right, n))


# Consume-and-shift

def pop_left(x):
    """Return the MSB of the word and the word shifted one position left.

    The given word is not modified; rebind the returned word to consume it.

        >>> from bitword.section import pop_left
        >>> pop_left(0x8000000000000001)
        (True, 0x0000000000000002)

    """
    return operation.get_bit(x, core.WORD_SIZE), BvShl(x, 1)


def pop_right(x):
    """Return the LSB of the word and the word shifted one position right.

        >>> from bitword.section import pop_right
        >>> pop_right(0b110)
        (False, 0x0000000000000003)

    """
    return operation.get_bit(x, 1), BvLshr(x, 1)

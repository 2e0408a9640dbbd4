"""Provide the reversal, rotation and bit counting operators."""
from bitword import core
from bitword import operation
from bitword.section import (
    AddBitsLeft, AddBitsRight, AddRight, GetSection, pop_left, pop_right
)


class Reverse(operation.Operation):
    """Reverse the word.

    The bit at index ``i`` moves to the index ``WORD_SIZE + 1 - i``.

        >>> from bitword.extraop import Reverse
        >>> Reverse(0b1011)
        0xd000000000000000
        >>> Reverse(0x8000000000000000)
        0x0000000000000001

    """

    arity = [1, 0]

    @classmethod
    def eval(cls, x):
        rev = core.Word(0)
        for _ in range(core.WORD_SIZE):
            bit, x = pop_right(x)
            rev = AddRight(rev, bit)
        return rev


class RotateLeft(operation.Operation):
    """Circular left rotation operation.

    The rotation offset is taken modulo `WORD_SIZE`.

        >>> from bitword.extraop import RotateLeft
        >>> RotateLeft(0xf00000000000000a, 4)
        0x00000000000000af
        >>> RotateLeft(0xf00000000000000a, 68)
        0x00000000000000af

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, r):
        r = r % core.WORD_SIZE
        leftmost = GetSection(x, core.WORD_SIZE - r + 1, core.WORD_SIZE)
        return AddBitsRight(x, leftmost, r)


class RotateRight(operation.Operation):
    """Circular right rotation operation.

    The rotation offset is taken modulo `WORD_SIZE`.

        >>> from bitword.extraop import RotateRight
        >>> RotateRight(0xf00000000000000a, 4)
        0xaf00000000000000

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, r):
        r = r % core.WORD_SIZE
        return AddBitsLeft(x, GetSection(x, 1, r), r)


# Bit counting

def first_set_bit(x):
    """Return the index of the least significant 1-bit (0 for the zero word).

        >>> from bitword.extraop import first_set_bit
        >>> first_set_bit(0), first_set_bit(0x8), first_set_bit(0x8000000000000000)
        (0, 4, 64)

    """
    i = 1 if x != 0 else 0
    while x != 0:
        bit, x = pop_right(x)
        if bit:
            break
        i += 1
    return i


def count_set_bits(x):
    """Count the number of 1's in the word.

    This operation is also known as the hamming weight of the word.

        >>> from bitword.extraop import count_set_bits
        >>> count_set_bits(0b1011), count_set_bits(0xffffffffffffffff)
        (3, 64)

    """
    count = 0
    while x != 0:
        bit, x = pop_right(x)
        if bit:
            count += 1
    return count


def even_parity_bit(x):
    """Return the bit that appended to the word gives an even number of 1's.

        >>> from bitword.extraop import even_parity_bit
        >>> even_parity_bit(0b1011), even_parity_bit(0b11)
        (True, False)

    """
    return count_set_bits(x) % 2 == 1


def highest_set_bit_index(x):
    """Return the index of the most significant 1-bit (0 for the zero word).

    For a non-zero word it is the bit length of its integer value.

        >>> from bitword.extraop import highest_set_bit_index
        >>> highest_set_bit_index(0), highest_set_bit_index(1), highest_set_bit_index(0x1f)
        (0, 1, 5)

    """
    i = core.WORD_SIZE if x != 0 else 0
    while x != 0:
        bit, x = pop_left(x)
        if bit:
            break
        i -= 1
    return i

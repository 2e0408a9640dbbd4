"""Provide the primitive word operators and the single-bit operators."""
from sympy import default_sort_key
from sympy.core import cache

from bitword import context
from bitword import core


def _cacheit(func):
    """Cache functions if `Cache` and `Validation` are enabled."""
    cfunc = cache.cacheit(func)

    def cached_func(*args, **kwargs):
        if context.Cache.current_context and context.Validation.current_context:
            return cfunc(*args, **kwargs)
        else:
            return func(*args, **kwargs)

    return cached_func


def _clamp_index(n):
    return min(max(n, 1), core.WORD_SIZE)


class Operation(object):
    """Represent word operations.

    A word operation takes some word operands (i.e. `Word`) and some
    scalar operands (i.e. `int`), and returns a single word. Calling
    an operator evaluates it right away, so an operator behaves like a
    function returning a `Word`; instances of `Operation` are never created.

    This class is not meant to be called but to provide a base
    class for the different word operators.

    Attributes:
        arity: a pair of number specifying the number of word operands
            and scalar operands.
        is_symmetric: True if the operator is symmetric with respect to
            its operands. Operators with scalar operands cannot be symmetric.
        operand_types: a list specifying the types of the operands (optional
            if all operands are words)

    Word operands allow *Automatic Constant Conversion*, that is, instead
    of passing the word operands as `Word` objects, it is possible to pass
    them as plain integers.

        >>> from bitword.core import Word
        >>> (Word(1) | 2).vrepr()
        'Word(0x0000000000000003)'

    """

    is_symmetric = False

    @_cacheit
    def __new__(cls, *args, **options):
        val_op = options.pop("validate_operands",
                             context.Validation.current_context)

        if val_op:
            args = cls._parse_args(*args)

        return cls.eval(*args)

    @classmethod
    def _parse_args(cls, *args):
        if hasattr(cls, "operand_types"):
            operand_types = cls.operand_types
        else:
            operand_types = [core.Word for _ in range(sum(cls.arity))]

        msg = "{} expects {} operands but {} were given"
        assert len(args) == sum(cls.arity), msg.format(
            cls.__name__, sum(cls.arity), len(args))

        # Automatic Constant Conversion
        newargs = []
        for arg_type, arg in zip(operand_types, args):
            if arg_type is core.Word:
                arg = core.wordify(arg)
            else:
                assert isinstance(arg, arg_type)
            newargs.append(arg)
        args = newargs

        if cls.is_symmetric:
            args = sorted(args, key=default_sort_key)

        assert cls.condition(*args), "{}.condition({}) did not hold".format(
            cls.__name__, ", ".join(str(a) for a in args))

        return args

    @classmethod
    def condition(cls, *args):
        """Check if the operands verify the restrictions of the operator."""
        return True

    @classmethod
    def eval(cls, *args):
        """Evaluate the operator with given operands.

        This is an internal method. To evaluate a word operation,
        use the operator ``()``.
        """
        raise NotImplementedError("subclasses need to override this method")


# Bitwise operators

class BvNot(Operation):
    """Bitwise negation operation.

    It overrides the operator ~. See `Operation` for more information.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvNot
        >>> BvNot(Word(0x0f0f0f0f0f0f0f0f))
        0xf0f0f0f0f0f0f0f0
        >>> ~Word(0xffffffff00000000)
        0x00000000ffffffff

    """

    arity = [1, 0]

    @classmethod
    def eval(cls, x):
        return core.Word(~int(x) & core.WORD_MASK)


InvertAll = BvNot


class BvAnd(Operation):
    """Bitwise AND (logical conjunction) operation.

    It overrides the operator &. See `Operation` for more information.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvAnd
        >>> BvAnd(Word(5), Word(3))
        0x0000000000000001
        >>> Word(5) & 3
        0x0000000000000001

    """

    arity = [2, 0]
    is_symmetric = True

    @classmethod
    def eval(cls, x, y):
        return core.Word(int(x) & int(y))


class BvOr(Operation):
    """Bitwise OR (logical disjunction) operation.

    It overrides the operator |. See `Operation` for more information.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvOr
        >>> BvOr(Word(5), 3)
        0x0000000000000007

    """

    arity = [2, 0]
    is_symmetric = True

    @classmethod
    def eval(cls, x, y):
        return core.Word(int(x) | int(y))


class BvXor(Operation):
    """Bitwise XOR (exclusive-or) operation.

    It overrides the operator ^. See `Operation` for more information.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvXor
        >>> BvXor(Word(5), 3)
        0x0000000000000006

    """

    arity = [2, 0]
    is_symmetric = True

    @classmethod
    def eval(cls, x, y):
        return core.Word(int(x) ^ int(y))


# Shifts operators

class BvShl(Operation):
    """Shift left operation.

    It overrides <<. Shifting by `WORD_SIZE` or more positions gives
    the zero word.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvShl
        >>> BvShl(Word(0x8000000000000001), 1)
        0x0000000000000002
        >>> Word(1) << 64
        0x0000000000000000

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def condition(cls, x, n):
        return n >= 0

    @classmethod
    def eval(cls, x, n):
        if n >= core.WORD_SIZE:
            return core.Word(0)
        return core.Word((int(x) << n) & core.WORD_MASK)


class BvLshr(Operation):
    """Logical right shift operation.

    It overrides >>. Shifting by `WORD_SIZE` or more positions gives
    the zero word.

        >>> from bitword.core import Word
        >>> from bitword.operation import BvLshr
        >>> BvLshr(Word(0b10001), 1)
        0x0000000000000008
        >>> Word(0x8000000000000000) >> 63
        0x0000000000000001

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def condition(cls, x, n):
        return n >= 0

    @classmethod
    def eval(cls, x, n):
        if n >= core.WORD_SIZE:
            return core.Word(0)
        return core.Word(int(x) >> n)


# Single-bit operators

class Mask(Operation):
    """Return the word with only the n-th bit set.

    The index is clamped to ``[1, WORD_SIZE]``.

        >>> from bitword.operation import Mask
        >>> Mask(1)
        0x0000000000000001
        >>> Mask(64)
        0x8000000000000000
        >>> Mask(0) == Mask(1), Mask(100) == Mask(64)
        (True, True)

    """

    arity = [0, 1]
    operand_types = [int]

    @classmethod
    def eval(cls, n):
        return BvShl(1, _clamp_index(n) - 1)


class TurnOn(Operation):
    """Set the n-th bit.

        >>> from bitword.operation import TurnOn
        >>> TurnOn(0b0001, 4)
        0x0000000000000009

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, n):
        return BvOr(x, Mask(n))


class TurnOff(Operation):
    """Clear the n-th bit.

        >>> from bitword.operation import TurnOff
        >>> TurnOff(0b1001, 1)
        0x0000000000000008

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, n):
        return BvAnd(x, BvNot(Mask(n)))


class Toggle(Operation):
    """Flip the n-th bit.

        >>> from bitword.operation import Toggle
        >>> Toggle(0b1001, 2)
        0x000000000000000b
        >>> Toggle(0b1011, 2)
        0x0000000000000009

    """

    arity = [1, 1]
    operand_types = [core.Word, int]

    @classmethod
    def eval(cls, x, n):
        return BvXor(x, Mask(n))


def get_bit(x, n):
    """Return the n-th bit of the word as a `bool`.

        >>> from bitword.operation import get_bit
        >>> get_bit(0b0100, 3), get_bit(0b0100, 2)
        (True, False)

    """
    return BvAnd(x, Mask(n)) != 0

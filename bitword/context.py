"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the results of word operations are cached.
    By default, the cache is enabled.

        >>> from bitword.context import Cache
        >>> from bitword.extraop import Reverse
        >>> with Cache(False):
        ...     Reverse(1)
        0x8000000000000000

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not arguments of word operators are validated.
    By default, validation of arguments is enabled.

    Note that when it is disabled, Automatic Constant Conversion is no
    longer available (see `Operation`) and the operators receive
    their operands unchanged.

        >>> from bitword.core import Word
        >>> from bitword.context import Validation
        >>> from bitword.operation import BvShl
        >>> BvShl(Word(1), -1)
        Traceback (most recent call last):
         ...
        AssertionError: BvShl.condition(0x0000000000000001, -1) did not hold
        >>> with Validation(False):
        ...     BvShl(3, 1)
        0x0000000000000006

    Note:
        Disabling `Validation` speeds up computations with words.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)

"""Tests for the conversion module."""
import doctest
import unittest
import warnings

from hypothesis import given, settings
from hypothesis.strategies import integers

from bitword.conversion import (
    BINARY_DIGITS, from_string_lsb, from_string_msb, to_string_lsb, to_string_msb
)
from bitword.core import WORD_MASK, WORD_SIZE, Word
from bitword.extraop import Reverse

words = integers(min_value=0, max_value=WORD_MASK)


class TestParse(unittest.TestCase):
    """Tests of the parsing functions."""

    def test_from_string_msb(self):
        self.assertEqual(from_string_msb("101"), 0b101)
        self.assertEqual(from_string_msb("1 0-1"), 0b101)
        self.assertEqual(from_string_msb("0b101"), 0b101)
        self.assertEqual(from_string_msb("1111 0000"), 0xF0)
        self.assertEqual(from_string_msb(""), 0)
        self.assertEqual(from_string_msb("abc"), 0)
        self.assertEqual(from_string_msb("1" * WORD_SIZE), WORD_MASK)
        self.assertIsInstance(from_string_msb("1"), Word)

    def test_from_string_lsb(self):
        self.assertEqual(from_string_lsb("1" + "0" * (WORD_SIZE - 1)), 1)
        self.assertEqual(from_string_lsb("101"), Reverse(0b101))
        self.assertEqual(from_string_lsb("1"), 0x8000000000000000)

    def test_overflow(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(from_string_msb("11" + "0" * WORD_SIZE), 0)
            self.assertEqual(from_string_msb("1" * (WORD_SIZE + 3)), WORD_MASK)
            self.assertEqual(from_string_msb("10" * WORD_SIZE), int("10" * (WORD_SIZE // 2), 2))
            self.assertEqual(from_string_msb("1" * WORD_SIZE), WORD_MASK)

    # noinspection PyTypeChecker
    def test_invalid_args(self):
        with self.assertRaises(TypeError):
            from_string_msb(None)
        with self.assertRaises(TypeError):
            from_string_lsb(None)
        with self.assertRaises(TypeError):
            from_string_msb(101)
        with self.assertRaises(TypeError):
            from_string_msb(b"101")


class TestFormat(unittest.TestCase):
    """Tests of the formatting functions."""

    def test_to_string(self):
        self.assertEqual(to_string_msb(0), "0" * WORD_SIZE)
        self.assertEqual(to_string_msb(WORD_MASK), "1" * WORD_SIZE)
        self.assertEqual(to_string_msb(0b101), "0" * (WORD_SIZE - 3) + "101")
        self.assertEqual(to_string_lsb(0b110), "011" + "0" * (WORD_SIZE - 3))
        self.assertEqual(to_string_msb(Word(0x8000000000000000))[0], "1")

    def test_binary_digits(self):
        self.assertEqual(BINARY_DIGITS["1"], True)
        self.assertEqual(BINARY_DIGITS.inverse[False], "0")

    @given(words)
    @settings(deadline=None)
    def test_round_trip(self, x):
        bvx = Word(x)
        text = to_string_msb(bvx)

        self.assertEqual(len(text), WORD_SIZE)
        self.assertEqual(text, format(x, "0{}b".format(WORD_SIZE)))
        self.assertEqual(from_string_msb(text), bvx)
        self.assertEqual(to_string_lsb(bvx), text[::-1])
        self.assertEqual(from_string_lsb(to_string_lsb(bvx)), bvx)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitword.conversion
    tests.addTests(doctest.DocTestSuite(bitword.conversion))
    return tests

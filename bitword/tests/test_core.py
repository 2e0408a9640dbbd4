"""Tests for the core module."""
import doctest
import unittest

from bitword.core import WORD_MASK, WORD_SIZE, Word, wordify


class TestWord(unittest.TestCase):
    """Tests of the Word class."""

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            Word("1")
        with self.assertRaises(AssertionError):
            Word(0.5)
        with self.assertRaises(AssertionError):
            Word(-1)
        with self.assertRaises(AssertionError):
            Word(WORD_MASK + 1)

    def test_initialization(self):
        x = Word(0)

        self.assertTrue(x.is_Atom)
        self.assertEqual(x.atoms(), {x})
        self.assertEqual(x.width, WORD_SIZE)

        with self.assertRaises(AttributeError):
            x.val = 1

    def test_comparisons(self):
        x, y = Word(1), Word(2)

        self.assertNotEqual(x, y)
        self.assertEqual(x, Word(1))
        self.assertEqual(x, 1)
        self.assertNotEqual(x, "1")
        self.assertEqual(hash(x), hash(Word(1)))
        self.assertEqual(len({x, y, Word(1)}), 2)

    def test_representation(self):
        x = Word(0xabc)

        self.assertEqual(int(x), 0xabc)
        self.assertEqual(str(x), "0x0000000000000abc")
        self.assertEqual(repr(x), str(x))
        self.assertEqual(x.vrepr(), "Word(0x0000000000000abc)")
        self.assertEqual(x.hex(), "0x0000000000000abc")
        self.assertEqual(len(x.bin()), WORD_SIZE + 2)
        self.assertTrue(x.bin().endswith("101010111100"))

    def test_python_operators(self):
        x = Word(0b1100)

        self.assertEqual(~x, WORD_MASK ^ 0b1100)
        self.assertEqual(x & 0b1010, 0b1000)
        self.assertEqual(0b1010 & x, 0b1000)
        self.assertEqual(x | 0b0011, 0b1111)
        self.assertEqual(x ^ 0b0110, 0b1010)
        self.assertEqual(x << 2, 0b110000)
        self.assertEqual(x >> 2, 0b11)

        expr = x
        expr <<= 1
        self.assertEqual(expr, 0b11000)
        self.assertEqual(x, 0b1100)


class Testwordify(unittest.TestCase):
    """Tests of the wordify function."""

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            wordify(-1)
        with self.assertRaises(TypeError):
            wordify("0b1")
        with self.assertRaises(TypeError):
            wordify(None)

    def test_initialization(self):
        self.assertEqual(wordify(2), Word(2))
        self.assertIs(wordify(Word(2)).__class__, Word)
        x = Word(5)
        self.assertIs(wordify(x), x)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitword.core
    tests.addTests(doctest.DocTestSuite(bitword.core))
    return tests

"""Top-level script environment."""
import argparse
import sys

from bitword import conversion
from bitword import core
from bitword import printing


def parse_word(text):
    """Parse an integer literal (e.g. ``42``, ``0x2a`` or ``0b101010``) as a word."""
    try:
        val = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid integer literal: {!r}".format(text))
    if not 0 <= val <= core.WORD_MASK:
        msg = "{} does not fit in {} bits".format(text, core.WORD_SIZE)
        raise argparse.ArgumentTypeError(msg)
    return core.Word(val)


parser = argparse.ArgumentParser(prog="bitword", description="Dump a word in binary and hexadecimal format.")
parser.add_argument("value")
parser.add_argument("-b", "--binary", action="store_true",
                    help="parse VALUE as binary text (characters other than 0 and 1 are skipped)")
parser.add_argument("-l", "--lsb-first", action="store_true",
                    help="the first binary character of VALUE is the LSB")
parser.add_argument("-n", "--nibbles", action="store_true",
                    help="group the binary dump in nibbles")
parser.add_argument("-x", "--hex", action="store_true",
                    help="also print the hexadecimal dump")


def main(argv=None):
    args = parser.parse_args(argv)

    if args.binary:
        if args.lsb_first:
            word = conversion.from_string_lsb(args.value)
        else:
            word = conversion.from_string_msb(args.value)
    else:
        try:
            word = parse_word(args.value)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

    printing.print_bin(word, nibbles=args.nibbles)
    if args.hex:
        printing.print_hex(word)


if __name__ == "__main__":
    sys.exit(main())

"""Manipulate fixed-width words.

This package implements the common operations over a single word of
`WORD_SIZE` bits: bitwise operators, masks, sections, rotations,
bit counting and the conversion from and to binary text.

Bit indices are 1-based, from the least significant bit (index 1)
to the most significant bit (index `WORD_SIZE`).

"""

"""
Conversion between binary data and human friendly phrases.

Each word of a phrase maps to 16 bits: the first 10 bits select one of the 1024 dictionary words and the remaining
6 bits are written as a number between 0 and 63 directly appended to the word, e.g. "sugar21". The number 64 marks a
word which only represents a single byte, that is the trailing byte of data with an odd length. Only the final word
of a phrase may use the number 64.

    >>> binary_to_phrase(bytes(2))
    'abbey0'
    >>> phrase_to_binary("abbey0")
    b'\\x00\\x00'
"""

import logging

from .dictionary import DICTIONARY, abbreviate, dict_index
from .errors import (
    MisplacedTerminal,
    MissingSuffix,
    SuffixNotTrailing,
    SuffixOutOfRange,
    SuffixTooLong,
    TerminalWordOutOfRange,
)

logger = logging.getLogger(__name__)

TERMINAL_SUFFIX = "64"


def binary_to_phrase(data: bytes, abbreviated: bool = False) -> str:
    """Converts the given binary data into a space-separated phrase. If abbreviated is set, every word is shortened
    to its unique prefix.
    """
    words = []

    def add(index: int, suffix: str) -> None:
        word = DICTIONARY[index]
        words.append((abbreviate(word) if abbreviated else word) + suffix)

    # Two bytes per word: 8 + 2 bits select the word, the low 6 bits form the number.
    for i in range(0, len(data) - 1, 2):
        add(data[i] * 4 + data[i + 1] // 64, str(data[i + 1] % 64))

    if len(data) % 2 == 1:
        add(data[-1], TERMINAL_SUFFIX)

    return " ".join(words)


def split_word(word: str) -> tuple[str, str]:
    """Splits a single word of a phrase into its letters and its numerical suffix.
    Raises a MalformedWord error if the word is not made of letters followed by a number of 1 or 2 digits.
    """
    digits = 0
    for c in word:
        is_digit = c.isascii() and c.isdigit()
        if digits > 0 and not is_digit:
            raise SuffixNotTrailing(word)
        if digits > 1:
            raise SuffixTooLong(word)
        if is_digit:
            digits += 1

    if digits == 0:
        raise MissingSuffix(word)

    return word[:-digits], word[-digits:]


def phrase_to_binary(phrase: str) -> bytes:
    """Converts a phrase created by binary_to_phrase back into binary data. Words may be abbreviated down to their
    unique prefix. Raises a DecodeError describing the first offending word if the phrase is invalid.
    """
    if phrase == "":
        return b""

    result = bytearray()
    finalized = False
    for word in phrase.split(" "):
        if finalized:
            raise MisplacedTerminal(word)

        letters, suffix = split_word(word)
        index = dict_index(letters)

        if suffix == TERMINAL_SUFFIX:
            if index > 255:
                raise TerminalWordOutOfRange(word, index)
            result.append(index)
            finalized = True
        else:
            number = int(suffix)
            if number > 64:
                raise SuffixOutOfRange(word, number)
            value = index * 64 + number
            result.append(value // 256)
            result.append(value % 256)

    logger.debug(f"Decoded phrase of {len(result)} bytes.")
    return bytes(result)


def normalize_phrase(phrase: str, abbreviated: bool = False) -> str:
    """Validates the phrase and rewrites it with either full or abbreviated dictionary words."""
    return binary_to_phrase(phrase_to_binary(phrase), abbreviated)

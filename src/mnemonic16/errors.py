"""
Errors raised while parsing a phrase back into binary data.
Encoding never fails, so every error here belongs to the decoding path.
"""


class DecodeError(ValueError):
    """Base class for all errors raised by an invalid phrase."""

    def __init__(self, message: str, word: str | None = None):
        super().__init__(message)
        self.word = word


class MalformedWord(DecodeError):
    """A word of the phrase does not have the shape <letters><1 or 2 digits>, or is too short."""


class SuffixNotTrailing(MalformedWord):
    def __init__(self, word: str):
        super().__init__(f"Number must appear as suffix only ({word!r}).", word)


class SuffixTooLong(MalformedWord):
    def __init__(self, word: str):
        super().__init__(f"Number must be at most 2 digits ({word!r}).", word)


class MissingSuffix(MalformedWord):
    def __init__(self, word: str):
        super().__init__(f"Word must have a numerical suffix ({word!r}).", word)


class WordNotFound(DecodeError):
    def __init__(self, word: str):
        super().__init__(f"Invalid word {word!r} in phrase, word is not in dictionary.", word)


class TerminalWordOutOfRange(DecodeError):
    def __init__(self, word: str, index: int):
        super().__init__(
            f"Final word {word!r} is invalid, needs to be among the first 256 words in the dictionary (index {index}).",
            word,
        )
        self.index = index


class SuffixOutOfRange(DecodeError):
    def __init__(self, word: str, suffix: int):
        super().__init__(f"Numerical suffix of {word!r} must have a value in [0, 64], got {suffix}.", word)
        self.suffix = suffix


class MisplacedTerminal(DecodeError):
    def __init__(self, word: str):
        super().__init__(f"Only the last word may contain the number 64 (found {word!r} after it).", word)

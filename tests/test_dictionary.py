import pytest

from mnemonic16 import errors
from mnemonic16.dictionary import DICTIONARY, PREFIX_INDICES, UNIQUE_PREFIX_LEN, dict_index


def test_dictionary_size():
    assert len(DICTIONARY) == 1024
    assert len(set(DICTIONARY)) == 1024


def test_unique_prefixes():
    prefixes = {word[:UNIQUE_PREFIX_LEN] for word in DICTIONARY}
    assert len(prefixes) == len(DICTIONARY)
    assert len(PREFIX_INDICES) == len(DICTIONARY)


def test_words_are_lowercase_letters():
    for word in DICTIONARY:
        assert len(word) >= UNIQUE_PREFIX_LEN
        assert word.isascii() and word.isalpha() and word.islower()


def test_dict_index():
    for index, word in enumerate(DICTIONARY):
        assert dict_index(word) == index
        assert dict_index(word[:UNIQUE_PREFIX_LEN]) == index
    assert dict_index("abbey") == 0
    assert dict_index("zoom") == 1023
    assert dict_index("sugarcoated") == dict_index("sugar")


def test_dict_index_too_short():
    for word in ("", "a", "ab"):
        with pytest.raises(errors.MalformedWord):
            dict_index(word)


def test_dict_index_not_found():
    with pytest.raises(errors.WordNotFound) as e:
        dict_index("xylophone")
    assert e.value.word == "xylophone"
    with pytest.raises(errors.WordNotFound):
        dict_index("Abbey")

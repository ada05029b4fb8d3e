import pytest

from Namesake.dictionary import WordDictionary
from Namesake.identifiers import is_descriptive, split_identifier_words


@pytest.mark.parametrize("identifier", ["camelCase", "TitleCase", "node3", "num11", "properNounsLikeIllinois"])
def test_descriptive(identifier, words):
    assert is_descriptive(identifier, words)


def test_abbreviations(words):
    for name in ("num", "msg", "temp", "tmp", "min", "max", "numUsersIn"):
        assert is_descriptive(name, words), name


def test_one_bad_word_invalidates(words):
    assert not is_descriptive("camelBleh", words)


def test_bad_word_position_does_not_matter(words):
    assert not is_descriptive("hueghsuhgriusCase", words)


@pytest.mark.parametrize("identifier", ["i", "x", "I", "7"])
def test_single_character_never_descriptive(identifier, words):
    assert not is_descriptive(identifier, words)


def test_single_character_ignores_dictionary():
    assert not is_descriptive("a", WordDictionary(["a"]))


def test_lookup_is_case_insensitive(words):
    assert is_descriptive("ILLINOIS", words)
    assert is_descriptive("Illinois", words)


def test_acronym_before_word(words):
    assert split_identifier_words("HTTPServer") == ["HTTP", "Server"]
    assert is_descriptive("HTTPServer", words)


@pytest.mark.parametrize("identifier,expected", [
    ("camelCase", ["camel", "Case"]),
    ("TitleCase", ["Title", "Case"]),
    ("node3", ["node", "3"]),
    ("num11", ["num", "11"]),
    ("node10", ["node", "10"]),
    ("value2Copy", ["value", "2", "Copy"]),
    ("PI", ["PI"]),
    ("properNounsLikeIllinois", ["proper", "Nouns", "Like", "Illinois"]),
])
def test_split(identifier, expected):
    assert split_identifier_words(identifier) == expected


@pytest.mark.parametrize("word", ["camel", "Case", "HTTP", "11", "node"])
def test_split_single_word_is_stable(word):
    assert split_identifier_words(word) == [word]


def test_numbers_need_no_dictionary():
    assert is_descriptive("node42", WordDictionary(["node"]))


def test_digits_then_letters_are_one_word(words):
    # "3d" is neither numeric nor a word
    assert not is_descriptive("node3d", words)


def test_underscore_is_not_a_separator(words):
    assert not is_descriptive("MAX_VALUE", words)


def test_uses_default_dictionary_when_none_given():
    assert is_descriptive("greetingStatement")
    assert not is_descriptive("ergserejsgioerj")

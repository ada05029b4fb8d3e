import pytest

from Namesake import dictionary as dictionary_mod
from Namesake.dictionary import WordDictionary


@pytest.fixture(autouse=True)
def offline_corpus(monkeypatch):
    """Stand in a tiny English corpus so tests never download nltk data."""
    monkeypatch.setattr(dictionary_mod, "load_corpus_words", lambda: ["employee", "customer", "address"])
    dictionary_mod.default_dictionary.cache_clear()
    yield
    dictionary_mod.default_dictionary.cache_clear()


@pytest.fixture
def words():
    """Small fixed dictionary so results do not depend on the bundled word list."""
    return WordDictionary([
        "camel", "case", "title", "node", "num", "msg", "temp", "tmp", "min", "max",
        "users", "in", "proper", "nouns", "like", "illinois", "http", "server",
        "pi", "greeting", "statement", "total", "square", "index", "word", "words",
        "upper", "first", "second", "value", "copy", "count", "i",
    ])


MAIN_JAVA = """
public class Main {
    final double PI = 3.14;

    public static void main(String[] args) {
        String greetingStatement = "Hello world!";
        int ergserejsgioerj = 5;
        System.out.println(greetingStatement);
    }
}
"""


@pytest.fixture
def main_java():
    return MAIN_JAVA

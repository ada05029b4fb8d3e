"""namesake: lightweight entry point."""

__version__ = "0.1.0"

# Public API facade (re-export)
from .api import statistics_from_file, statistics_from_paths  # noqa: F401
from .collector import NameStatistics, collect_declarations, collect_name_statistics
from .dictionary import WordDictionary, default_dictionary, load_dictionary
from .errors import MalformedSourceError, NoDeclarationsError, UnsupportedLanguageError
from .identifiers import is_descriptive, split_identifier_words

__all__ = [
    "__version__",
    "is_descriptive",
    "split_identifier_words",
    "collect_name_statistics",
    "collect_declarations",
    "NameStatistics",
    "WordDictionary",
    "default_dictionary",
    "load_dictionary",
    "statistics_from_file",
    "statistics_from_paths",
    "MalformedSourceError",
    "NoDeclarationsError",
    "UnsupportedLanguageError",
]

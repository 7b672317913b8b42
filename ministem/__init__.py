from .czech import CzechStemmer
from .driver import Driver
from .english import EnglishStemmer
from .errors import DriverNotFoundError, StemmerError, UnsupportedModeError
from .mode import Mode
from .regions import find_r1, find_r2
from .search import Stemmer

__all__ = [
    "CzechStemmer",
    "Driver",
    "DriverNotFoundError",
    "EnglishStemmer",
    "Mode",
    "Stemmer",
    "StemmerError",
    "UnsupportedModeError",
    "default_stemmer",
    "find_r1",
    "find_r2",
]
__version__ = "0.1.0"


def default_stemmer() -> Stemmer:
    """Registry with the English and Czech drivers"""
    return Stemmer([EnglishStemmer(), CzechStemmer()])

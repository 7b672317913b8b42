from enum import Enum


class Mode(Enum):
    """
    How far a driver strips a word.

    LIGHT removes inflectional suffixes only (plurals, verb tenses, cases) so
    the result usually stays readable, e.g. "calling" -> "call". Good for
    autocomplete and highlighting.

    AGGRESSIVE continues from the LIGHT result down to the morphological root,
    e.g. "computation" -> "comput". Good for indexing, the result may not be a
    valid word.
    """

    LIGHT = "light"
    AGGRESSIVE = "aggressive"

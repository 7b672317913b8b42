import re
from functools import lru_cache

from line_profiler import profile

from .driver import Driver
from .mode import Mode
from .regions import find_r1, find_r2


class EnglishStemmer(Driver):
    """
    English stemmer based on the Porter2 (Snowball) algorithm
    https://snowballstem.org/algorithms/english/stemmer.html

    LIGHT mode runs steps 0, 1a, 1b and 1c (possessives, plurals, verb endings,
    final y). AGGRESSIVE mode continues with the derivational steps 2 to 5.

    Regions come from ministem.regions, where R1 is the index of the first
    non-vowel following a vowel. Reference Snowball puts R1 one character
    later, so the R1/R2 gates here accept slightly shorter stems, e.g.
    "relational" -> "relat".
    """

    VOWELS = "aeiouy"

    EXCEPTIONS = {
        "skis": "ski",
        "skies": "sky",
        "dying": "die",
        "lying": "lie",
        "tying": "tie",
        "id": "id",
        "gently": "gentl",
        "ugly": "ugli",
        "early": "earli",
        "only": "onli",
        "singly": "singl",
        "sky": "sky",
        "news": "news",
        "howe": "howe",
        "atlas": "atlas",
        "cosmos": "cosmos",
        "bias": "bias",
        "andes": "andes",
    }

    # R1 never reaches past these prefixes
    R1_PREFIXES = (("gener", 5), ("arsen", 5), ("commun", 6))

    STEP_1B_SUFFIXES = ("edly", "ed", "ingly", "ing")

    STEP_2_SUFFIXES = (
        ("ational", "ate"),
        ("tional", "tion"),
        ("ization", "ize"),
        ("ation", "ate"),
        ("ator", "ate"),
        ("alism", "al"),
        ("iveness", "ive"),
        ("fulness", "ful"),
        ("ousness", "ous"),
        ("aliti", "al"),
        ("iviti", "ive"),
        ("biliti", "ble"),
        ("enci", "ence"),
        ("anci", "ance"),
        ("izer", "ize"),
        ("bli", "ble"),
        ("alli", "al"),
        ("entli", "ent"),
        ("eli", "e"),
        ("ousli", "ous"),
        ("logi", "log"),
    )

    STEP_3_SUFFIXES = (
        ("icate", "ic"),
        ("ative", ""),
        ("alize", "al"),
        ("iciti", "ic"),
        ("ical", "ic"),
        ("ful", ""),
        ("ness", ""),
    )

    STEP_4_SUFFIXES = (
        "al",
        "ance",
        "ence",
        "er",
        "ic",
        "able",
        "ible",
        "ant",
        "ement",
        "ment",
        "ent",
        "ism",
        "ate",
        "iti",
        "ous",
        "ive",
        "ize",
    )

    def __init__(self, locale: str = "en") -> None:
        super().__init__(locale)

    @lru_cache(maxsize=1024)
    @profile
    def _stem(self, word: str, mode: Mode) -> str:
        word = word.lower()

        if len(word) <= 2:
            return word

        word = self.remove_initial_apostrophe(word)
        if word in self.__class__.EXCEPTIONS:
            return self.__class__.EXCEPTIONS[word]

        r1, r2 = self.find_r1r2(word)
        word = self.set_ys(word)

        word = self.step_0(word)
        word = self.step_1a(word)
        word = self.step_1b(word, r1)
        word = self.step_1c(word)

        if mode is Mode.AGGRESSIVE:
            word = self.step_2(word, r1)
            word = self.step_3(word, r1, r2)
            word = self.step_4(word, r2)
            word = self.step_5(word, r1, r2)

        return word.lower()

    def find_r1r2(self, word):
        r1 = find_r1(word, self.__class__.VOWELS)

        for prefix, limit in self.__class__.R1_PREFIXES:
            if word.startswith(prefix):
                r1 = min(r1, limit)
                break

        return r1, find_r2(word, self.__class__.VOWELS, r1)

    def remove_initial_apostrophe(self, word):
        if word.startswith("'"):
            return word[1:]

        return word

    def set_ys(self, word):
        # consonant y becomes Y so that vowel checks skip it
        if word.startswith("y"):
            word = "Y" + word[1:]

        return re.sub(r"([aeiouy])y", r"\1Y", word)

    def contains_vowel(self, word):
        return re.search(r"[aeiouy]", word) is not None

    def ends_with_double(self, word):
        return (
            len(word) > 1
            and word[-1] == word[-2]
            and word[-1] not in self.__class__.VOWELS
            and word[-1] not in "lsz"
        )

    def ends_with_short_syllable(self, word):
        if len(word) == 2:
            return re.match(r"[aeiouy][^aeiouy]$", word) is not None

        return re.search(r"[^aeiouy][aeiouy][^aeiouywxY]$", word) is not None

    def is_short(self, word, r1):
        return len(word) < r1 and self.ends_with_short_syllable(word)

    def step_0(self, word):
        if word.endswith("'s'"):
            return word[:-3]
        elif word.endswith("'s"):
            return word[:-2]
        elif word.endswith("'"):
            return word[:-1]

        return word

    def step_1a(self, word):
        if word.endswith("sses"):
            return word[:-2]

        if word.endswith(("ied", "ies")):
            stem = word[:-3]
            return stem + "i" if len(stem) > 1 else stem + "ie"

        if word.endswith(("ss", "us")):
            return word

        # the vowel has to come before the letter preceding the s: gas, this
        if word.endswith("s") and self.contains_vowel(word[:-2]):
            return word[:-1]

        return word

    def step_1b(self, word, r1):
        for suffix in ("eedly", "eed"):
            if word.endswith(suffix):
                stem = word[: -len(suffix)]
                return stem + "ee" if len(stem) >= r1 else word

        for suffix in self.__class__.STEP_1B_SUFFIXES:
            if word.endswith(suffix):
                break
        else:
            return word

        stem = word[: -len(suffix)]
        if not self.contains_vowel(stem):
            return word

        if stem.endswith(("at", "bl", "iz")):
            return stem + "e"
        elif self.ends_with_double(stem):
            return stem[:-1]
        elif self.is_short(stem, r1):
            return stem + "e"

        return stem

    def step_1c(self, word):
        if len(word) > 2 and word[-1] in "yY" and word[-2] not in self.__class__.VOWELS:
            return word[:-1] + "i"

        return word

    def step_2(self, word, r1):
        for suffix, repl in self.__class__.STEP_2_SUFFIXES:
            if word.endswith(suffix):
                stem = word[: -len(suffix)]
                return stem + repl if len(stem) >= r1 else word

        return word

    def step_3(self, word, r1, r2):
        for suffix, repl in self.__class__.STEP_3_SUFFIXES:
            if word.endswith(suffix):
                stem = word[: -len(suffix)]

                if len(stem) >= r1 or (suffix == "ative" and len(stem) >= r2):
                    return stem + repl

                return word

        return word

    def step_4(self, word, r2):
        # a suffix outside R2 does not stop shorter ones: ement -> ment -> ent
        for suffix in self.__class__.STEP_4_SUFFIXES:
            if word.endswith(suffix) and len(word) - len(suffix) >= r2:
                return word[: -len(suffix)]

        if word.endswith("ion"):
            stem = word[:-3]
            if len(stem) >= r2 and stem.endswith(("s", "t")):
                return stem

        return word

    def step_5(self, word, r1, r2):
        if word.endswith("e"):
            stem = word[:-1]
            if len(stem) >= r2 or (
                len(stem) >= r1 and not self.ends_with_short_syllable(stem)
            ):
                word = stem

        if word.endswith("ll") and len(word) - 1 >= r2:
            word = word[:-1]

        return word

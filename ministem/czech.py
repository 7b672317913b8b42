from functools import lru_cache

from line_profiler import profile

from .driver import Driver
from .mode import Mode


class CzechStemmer(Driver):
    """
    Czech stemmer after the light and aggressive stemmers of Dolamic and Savoy
    http://members.unine.ch/jacques.savoy/clef/index.html

    Each rule table is a tuple of buckets, longest suffixes first. A rule is
    (suffix, cut, palatalize): cut that many trailing characters, then, if
    palatalize is set, turn the softened ending back into its base consonant.
    The first rule that applies ends the table.

    LIGHT mode removes case endings and possessives. AGGRESSIVE mode continues
    with comparatives, diminutives, augmentatives and derivational suffixes.
    """

    PREFIX = "nej"

    # no rule may leave fewer characters than this, measured per table
    MIN_LENGTH = 3

    EXCLUDED_WORDS = ("internet", "magnet")

    CASE_RULES = (
        (
            ("atech", 5, False),
            ("ětemi", 3, True),
            ("átor", 4, False),
            ("ator", 4, False),
        ),
        (
            ("ětem", 3, True),
            ("atům", 4, False),
            ("atým", 4, False),
        ),
        (
            ("ech", 2, True),
            ("ich", 2, True),
            ("ého", 2, True),
            ("ěmi", 2, True),
            ("emi", 2, True),
            ("ému", 2, True),
            ("ěte", 2, True),
            ("ěti", 2, True),
            ("iho", 2, True),
            ("ího", 2, True),
            ("ími", 2, True),
            ("ímu", 2, True),
            ("imu", 2, True),
            ("ích", 2, True),
            ("ách", 3, False),
            ("ata", 3, False),
            ("aty", 3, False),
            ("ých", 3, False),
            ("ama", 3, False),
            ("ami", 3, False),
            ("ové", 3, False),
            ("ovi", 3, False),
            ("ými", 3, False),
            ("áme", 3, False),
            ("áte", 3, False),
            ("ají", 3, False),
            ("ali", 3, False),
            ("ala", 3, False),
            ("at", 2, False),
            ("et", 2, False),
            ("it", 2, False),
        ),
        (
            ("em", 1, True),
            ("es", 2, True),
            ("ém", 2, True),
            ("ím", 2, True),
            ("ům", 2, False),
            ("at", 2, False),
            ("ám", 2, False),
            ("om", 2, False),
            ("os", 2, False),
            ("us", 2, False),
            ("ým", 2, False),
            ("mi", 2, False),
            ("ou", 2, False),
            ("áš", 2, False),
            ("as", 2, False),
            ("is", 2, False),
            ("ál", 2, False),
            ("ěl", 2, False),
            ("il", 2, False),
            ("al", 2, False),
            ("el", 2, False),
            ("dl", 2, False),
        ),
        (
            ("e", 0, True),
            ("i", 0, True),
            ("í", 0, True),
            ("é", 0, True),
            ("ě", 0, True),
            ("u", 1, False),
            ("y", 1, False),
            ("ů", 1, False),
            ("a", 1, False),
            ("o", 1, False),
            ("á", 1, False),
            ("ý", 1, False),
        ),
    )

    POSSESSIVE_RULES = (
        (
            ("ov", 2, False),
            ("ův", 2, False),
            ("in", 1, True),
        ),
    )

    COMPARATIVE_RULES = (
        (
            ("ejš", 3, False),
            ("ějš", 3, True),
        ),
    )

    DIMINUTIVE_RULES = (
        (("oušek", 5, False),),
        (
            ("eček", 3, True),
            ("éček", 3, True),
            ("iček", 3, True),
            ("íček", 3, True),
            ("enek", 3, True),
            ("ének", 3, True),
            ("inek", 3, True),
            ("ínek", 3, True),
            ("áček", 4, False),
            ("aček", 4, False),
            ("oček", 4, False),
            ("uček", 4, False),
            ("anek", 4, False),
            ("onek", 4, False),
            ("unek", 4, False),
            ("ánek", 4, False),
        ),
        (
            ("ečk", 3, True),
            ("éčk", 3, True),
            ("ičk", 3, True),
            ("íčk", 3, True),
            ("enk", 3, True),
            ("énk", 3, True),
            ("ink", 3, True),
            ("ínk", 3, True),
            ("áčk", 3, False),
            ("ačk", 3, False),
            ("očk", 3, False),
            ("učk", 3, False),
            ("ank", 3, False),
            ("onk", 3, False),
            ("unk", 3, False),
            ("átk", 3, False),
            ("ánk", 3, False),
            ("ušk", 3, False),
        ),
        (
            ("ek", 1, True),
            ("ék", 1, True),
            ("ík", 1, True),
            ("ik", 1, True),
            ("ák", 1, False),
            ("ak", 1, False),
            ("ok", 1, False),
            ("uk", 1, False),
        ),
        (("k", 1, False),),
    )

    AUGMENTATIVE_RULES = (
        (("ajzn", 4, False),),
        (
            ("izn", 2, True),
            ("isk", 2, True),
        ),
        (("ák", 2, False),),
    )

    DERIVATIONAL_RULES = (
        (("obinec", 6, False),),
        (
            ("ionář", 4, True),
            ("ovisk", 5, False),
            ("ovstv", 5, False),
            ("ovišt", 5, False),
            ("ovník", 5, False),
            ("átor", 4, False),
            ("ator", 4, False),
            ("tor", 3, False),
        ),
        (
            ("ásek", 4, False),
            ("loun", 4, False),
            ("nost", 4, False),
            ("teln", 4, False),
            ("ovec", 4, False),
            ("ovtv", 4, False),
            ("ovin", 4, False),
            ("štin", 4, False),
            ("ovík", 4, False),
            ("enic", 3, True),
            ("inec", 3, True),
            ("itel", 3, True),
        ),
        (
            ("árn", 3, False),
            ("ěnk", 2, True),
            ("ián", 2, True),
            ("ist", 2, True),
            ("isk", 2, True),
            ("išt", 2, True),
            ("itb", 2, True),
            ("írn", 2, True),
            ("och", 3, False),
            ("ost", 3, False),
            ("ovn", 3, False),
            ("oun", 3, False),
            ("out", 3, False),
            ("ouš", 3, False),
            ("ušk", 3, False),
            ("kyn", 3, False),
            ("čan", 3, False),
            ("kář", 3, False),
            ("néř", 3, False),
            ("ník", 3, False),
            ("ctv", 3, False),
            ("stv", 3, False),
        ),
        (
            ("ec", 1, True),
            ("en", 1, True),
            ("ěn", 1, True),
            ("éř", 1, True),
            ("íř", 1, True),
            ("ic", 1, True),
            ("in", 1, True),
            ("ín", 1, True),
            ("it", 1, True),
            ("iv", 1, True),
            ("ob", 2, False),
            ("ot", 2, False),
            ("ov", 2, False),
            ("oň", 2, False),
            ("ul", 2, False),
            ("yn", 2, False),
            ("čk", 2, False),
            ("čn", 2, False),
            ("dl", 2, False),
            ("nk", 2, False),
            ("tv", 2, False),
            ("tk", 2, False),
            ("vk", 2, False),
        ),
    )

    # (endings, characters to drop, base consonant), first match wins
    PALATALIZATIONS = (
        (("ci", "ce", "či", "če"), 2, "k"),
        (("zi", "ze"), 2, "h"),
        (("ži", "že"), 2, "h"),
        (("si", "se"), 2, "ch"),
        (("ši", "še"), 2, "ch"),
        (("čtě", "čté", "čti", "čtí"), 3, "ck"),
        (("ště", "šté", "šti", "ští"), 3, "sk"),
        (("ři", "ře"), 2, "r"),
        (("ni", "ne", "ně", "ní"), 2, "n"),
        (("ti", "te", "tě", "tí"), 2, "t"),
        (("di", "de", "dě", "dí"), 2, "d"),
    )

    def __init__(self, locale: str = "cs") -> None:
        super().__init__(locale)

    @lru_cache(maxsize=1024)
    def _stem(self, word: str, mode: Mode) -> str:
        word = self.remove_prefix(word.lower())

        word = self.apply_rules(word, self.__class__.CASE_RULES)
        word = self.apply_rules(word, self.__class__.POSSESSIVE_RULES)

        if mode is Mode.AGGRESSIVE:
            word = self.apply_rules(word, self.__class__.COMPARATIVE_RULES)
            word = self.apply_rules(word, self.__class__.DIMINUTIVE_RULES)
            word = self.apply_rules(word, self.__class__.AUGMENTATIVE_RULES)
            word = self.apply_rules(word, self.__class__.DERIVATIONAL_RULES)

        return word

    def remove_prefix(self, word):
        # superlative: nejlepší -> lepší
        if word.startswith(self.__class__.PREFIX) and len(word) > 5:
            return word[len(self.__class__.PREFIX) :]

        return word

    @profile
    def apply_rules(self, word, rules):
        length = len(word)

        for bucket in rules:
            for suffix, cut, palatalize in bucket:
                if not word.endswith(suffix):
                    continue

                if (
                    length - cut < self.__class__.MIN_LENGTH
                    or word in self.__class__.EXCLUDED_WORDS
                ):
                    continue

                if cut > 0:
                    word = word[:-cut]

                return self.palatalize(word) if palatalize else word

        return word

    def palatalize(self, word):
        for endings, cut, consonant in self.__class__.PALATALIZATIONS:
            if word.endswith(endings):
                return word[:-cut] + consonant

        return word[:-1]

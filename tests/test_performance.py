import timeit
import statistics

import pytest
from ministem import CzechStemmer, EnglishStemmer, Mode, find_r1, find_r2


@pytest.fixture
def english_words():
    return (
        "caresses ponies ties caress cats feed agreed plastered bled motoring "
        "sing conflated troubled sized hopping tanned falling hissing fizzing "
        "failing filing happy sky relational conditional rational valence "
        "hesitancy digitizer conformably radically differently vilely "
        "analogously viabilization precedential declaration operator feudalism "
        "decisiveness hopefulness callousness formality sensitivity sensibility "
        "triplicate formative formalize electricity electrical hopeful goodness "
        "revival allowance inference airliner gyroscopic adjustable defensible "
        "irritant replacement adjustment dependent adoption homologism activate "
        "angularity homologous effective normalize probate rate cease controll "
        "roll generous communication arsenal yelling enjoying syzygy men's "
        "witnesses' 'quoted queueing strengths rhythm"
    ).split()


@pytest.fixture
def czech_words():
    return (
        "nejlepší nejkrásnější programátor poupětem kuřatům střech jarních "
        "zeleného kočkami ženami hrady domem stolem hradům děláš snědl hradě "
        "město moře otcův matčin rychlejší krásnější domeček stoleček kočička "
        "pejsek parník panák chlapák babizna učitel slovník blbost rychlost "
        "vlci matce praze knize bože mouše střeše američtí čínští moři tváře "
        "písni kostě lodí internet internetem magnet dělat udělat hradů"
    ).split()


@pytest.mark.parametrize("mode", [Mode.LIGHT, Mode.AGGRESSIVE])
def test_deterministic(english_words, czech_words, mode):
    for driver, words in ((EnglishStemmer(), english_words), (CzechStemmer(), czech_words)):
        first = [driver.stem(w, mode) for w in words]
        # a fresh driver does not share cached results with the first one
        second = [type(driver)().stem(w, mode) for w in words]

        assert first == second


@pytest.mark.parametrize("mode", [Mode.LIGHT, Mode.AGGRESSIVE])
def test_stems_never_grow(english_words, czech_words, mode):
    for driver, words in ((EnglishStemmer(), english_words), (CzechStemmer(), czech_words)):
        for w in words:
            assert len(driver.stem(w, mode)) <= len(w), w


def test_region_bounds(english_words):
    for w in english_words:
        r1 = find_r1(w, EnglishStemmer.VOWELS)
        r2 = find_r2(w, EnglishStemmer.VOWELS, r1)

        assert 0 <= r1 <= r2 <= len(w), w


def test_performance(english_words, czech_words):

    def stem_words(driver, words, mode):
        def _wrapper():
            # time stemming, not cache lookups
            type(driver)._stem.cache_clear()
            for w in words:
                driver.stem(w, mode)

        return _wrapper

    for driver, words in ((EnglishStemmer(), english_words), (CzechStemmer(), czech_words)):
        for mode in Mode:
            times = timeit.repeat(stem_words(driver, words, mode), number=10, repeat=5)

            print(f"\n{driver} {mode.value}: {len(words)} WORDS x 10")
            print(f"MIN TIME: {min(times)}")
            print(f"MAX TIME: {max(times)}")
            print(f"AVG TIME: {statistics.mean(times)}")

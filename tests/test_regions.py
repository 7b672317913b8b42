import pytest
from ministem.regions import find_r1, find_r2


VOWELS = "aeiouy"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("beautiful", 4),
        ("beauty", 4),
        ("apple", 1),
        ("try", 3),
        ("stress", 4),
        ("abc", 1),
        ("", 0),
        ("rhythm", 3),
        ("crwth", 5),
    ],
)
def test_find_r1(word, expected):
    assert find_r1(word, VOWELS) == expected


@pytest.mark.parametrize(
    "word, r1, expected",
    [
        ("beautiful", 4, 6),
        ("communism", 3, 5),
        ("try", 3, 3),
        ("rate", 2, 4),
    ],
)
def test_find_r2(word, r1, expected):
    assert find_r2(word, VOWELS, r1) == expected


def test_custom_vowels():
    # Czech vowels with diacritics are plain characters
    assert find_r1("příliš", "aeiouyáéěíóúůý") == 3
    assert find_r2("příliš", "aeiouyáéěíóúůý", 3) == 5


@pytest.mark.parametrize(
    "word", ["generous", "communication", "a", "aaa", "strengths", "queueing"]
)
def test_regions_are_ordered(word):
    r1 = find_r1(word, VOWELS)
    r2 = find_r2(word, VOWELS, r1)

    assert 0 <= r1 <= r2 <= len(word)

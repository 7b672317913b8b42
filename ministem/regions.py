"""
Snowball regions.

R1 starts where the first run of vowels ends, i.e. at the first non-vowel that
follows a vowel. R2 is found the same way, scanning from R1. Both are the
length of the word when no such position exists, so 0 <= R1 <= R2 <= len(word)
always holds.

https://snowballstem.org/texts/r1r2.html
"""


def _scan(word: str, vowels, start: int) -> int:
    length = len(word)
    i = start

    while i < length and word[i] not in vowels:
        i += 1

    while i < length and word[i] in vowels:
        i += 1

    return i


def find_r1(word: str, vowels) -> int:
    return _scan(word, vowels, 0)


def find_r2(word: str, vowels, r1: int) -> int:
    return _scan(word, vowels, r1)

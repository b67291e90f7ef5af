"""Small letter-level helpers shared by the inflection modules."""

_VOWELS = frozenset("aeiouy")


def is_vowel(char: str) -> bool:
    """Return True if ``char`` is a vowel letter (a, e, i, o, u or y), in any case."""
    return char.lower() in _VOWELS if len(char) == 1 else False


def is_all_upper(word: str) -> bool:
    """Return True if ``word`` has at least one letter and no lowercase letters."""
    has_letter = False
    for char in word:
        if char.isalpha():
            if char.islower():
                return False
            has_letter = True
    return has_letter


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in ``word`` from its vowel groups.

    Consecutive vowels count as one syllable, a final silent ``e`` is not
    counted when the word already has another syllable, and any non-empty
    word has at least one syllable. The empty string has none.
    """
    if not word:
        return 0

    lower = word.lower()
    count = 0
    prev_vowel = False
    last_index = len(lower) - 1

    for index, char in enumerate(lower):
        current_vowel = is_vowel(char)
        if current_vowel and not prev_vowel:
            count += 1
        prev_vowel = current_vowel
        if index == last_index and char == "e" and count > 1:
            count -= 1

    return max(count, 1)


def match_case(original: str, replacement: str) -> str:
    """Return ``replacement`` with the capitalisation pattern of ``original``.

    An all-uppercase original gives an uppercase result, a capitalised one a
    capitalised result; anything else leaves ``replacement`` unchanged.
    """
    if not original or not replacement:
        return replacement
    if is_all_upper(original):
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def match_suffix(original: str, suffix: str) -> str:
    """Return ``suffix`` uppercased when ``original`` is all uppercase."""
    if is_all_upper(original):
        return suffix.upper()
    return suffix
"""Choice of the indefinite article ("a" or "an") for English words."""

from __future__ import annotations

import re
import threading

from inflectkit.letters import is_all_upper

# Words starting with a silent 'h' that take "an".
_SILENT_H_WORDS = (
    "honest", "heir", "heiress", "heirloom", "honor", "honour", "hour", "hourly",
)

# Lowercase abbreviations spoken letter by letter.
_LOWERCASE_ABBREVS = frozenset(
    {"mpeg", "jpeg", "gif", "sql", "html", "xml", "fbi", "cia", "nsa"}
)

# Prefixes where a written vowel is spoken with a consonant sound.
_CONSONANT_VOWEL_PREFIXES = (
    "uni", "upon", "use", "used", "user", "using", "usual",
    "usu", "uran", "uret", "euro", "ewe", "onc", "one",
    "onet",
)

# Three-letter starts of u-words spoken with a "you" sound.
_YOU_PREFIXES = frozenset(
    {
        "uga", "ukr", "ula", "ule", "uli", "ulo", "ulu",
        "una", "uni", "uno", "unu", "ura", "ure", "uri", "uro", "uru",
        "usa", "use", "usi", "uso", "usu", "uta", "ute", "uti", "uto", "utu",
    }
)

# Letters whose spoken names begin with a vowel sound (eff, aitch, ell, ...).
_VOWEL_SOUND_LETTERS = "AEFHILMNORSX"


def _is_vowel_sound(char: str) -> bool:
    return char.lower() in "aeiou"


def _abbreviation_needs_an(abbrev: str) -> bool:
    return bool(abbrev) and abbrev[0].upper() in _VOWEL_SOUND_LETTERS


def _is_abbreviation(word: str) -> bool:
    return len(word) >= 2 and is_all_upper(word)


def _has_you_sound(lower: str) -> bool:
    return len(lower) >= 3 and lower[:3] in _YOU_PREFIXES


def _needs_an(first_word: str) -> bool:
    """Apply the default rules to the first word of a phrase."""
    lower = first_word.lower()

    if lower.startswith(_SILENT_H_WORDS):
        return True
    if _is_abbreviation(first_word):
        return _abbreviation_needs_an(first_word)
    if lower in _LOWERCASE_ABBREVS:
        return _abbreviation_needs_an(lower.upper())
    if lower.startswith(_CONSONANT_VOWEL_PREFIXES):
        return False
    if len(lower) >= 2 and lower[0] == "u" and _has_you_sound(lower):
        return False
    return _is_vowel_sound(lower[0])


class ArticleEngine:
    """Chooses "a" or "an", with user-defined words and patterns taking priority.

    Priority, highest first: words forced to "a", words forced to "an",
    "a" patterns, "an" patterns, then the built-in rules. Matching is
    against the lowercased first word of the input. Safe for use from
    several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._a_words: set[str] = set()
        self._an_words: set[str] = set()
        self._a_patterns: list[tuple[str, re.Pattern[str]]] = []
        self._an_patterns: list[tuple[str, re.Pattern[str]]] = []

    def an(self, word: str) -> str:
        """Return ``word`` prefixed with "a" or "an"."""
        if not word:
            return ""
        fields = word.split()
        if not fields:
            return word
        first = fields[0]
        lower_first = first.lower()

        with self._lock:
            if lower_first in self._a_words:
                return "a " + word
            if lower_first in self._an_words:
                return "an " + word
            if any(p.fullmatch(lower_first) for _, p in self._a_patterns):
                return "a " + word
            if any(p.fullmatch(lower_first) for _, p in self._an_patterns):
                return "an " + word

        return ("an " if _needs_an(first) else "a ") + word

    def a(self, word: str) -> str:
        """Alias of :meth:`an`."""
        return self.an(word)

    def def_a(self, word: str) -> None:
        """Force "a" before ``word`` (case-insensitive)."""
        lower = word.lower()
        with self._lock:
            self._a_words.add(lower)
            self._an_words.discard(lower)

    def def_an(self, word: str) -> None:
        """Force "an" before ``word`` (case-insensitive)."""
        lower = word.lower()
        with self._lock:
            self._an_words.add(lower)
            self._a_words.discard(lower)

    def undef_a(self, word: str) -> bool:
        """Remove a forced "a" word; return True if it was defined."""
        lower = word.lower()
        with self._lock:
            if lower in self._a_words:
                self._a_words.remove(lower)
                return True
            return False

    def undef_an(self, word: str) -> bool:
        """Remove a forced "an" word; return True if it was defined."""
        lower = word.lower()
        with self._lock:
            if lower in self._an_words:
                self._an_words.remove(lower)
                return True
            return False

    def def_a_pattern(self, pattern: str) -> None:
        """Force "a" for first words fully matching ``pattern``.

        Raises :class:`re.error` if the pattern is not a valid expression.
        """
        compiled = re.compile(f"(?:{pattern})")
        with self._lock:
            self._a_patterns.append((pattern, compiled))

    def def_an_pattern(self, pattern: str) -> None:
        """Force "an" for first words fully matching ``pattern``.

        Raises :class:`re.error` if the pattern is not a valid expression.
        """
        compiled = re.compile(f"(?:{pattern})")
        with self._lock:
            self._an_patterns.append((pattern, compiled))

    def undef_a_pattern(self, pattern: str) -> bool:
        """Remove an "a" pattern defined with exactly this text."""
        with self._lock:
            return self._remove_pattern(self._a_patterns, pattern)

    def undef_an_pattern(self, pattern: str) -> bool:
        """Remove an "an" pattern defined with exactly this text."""
        with self._lock:
            return self._remove_pattern(self._an_patterns, pattern)

    def def_a_reset(self) -> None:
        """Drop every custom word and pattern."""
        with self._lock:
            self._a_words.clear()
            self._an_words.clear()
            self._a_patterns.clear()
            self._an_patterns.clear()

    @staticmethod
    def _remove_pattern(
        patterns: list[tuple[str, re.Pattern[str]]], pattern: str
    ) -> bool:
        for position, (text, _) in enumerate(patterns):
            if text == pattern:
                del patterns[position]
                return True
        return False


_default = ArticleEngine()


def an(word: str) -> str:
    """Return ``word`` prefixed with "a" or "an", using the shared engine."""
    return _default.an(word)


def a(word: str) -> str:
    """Alias of :func:`an`."""
    return _default.a(word)


def def_a(word: str) -> None:
    """Force "a" before ``word`` in the shared engine."""
    _default.def_a(word)


def def_an(word: str) -> None:
    """Force "an" before ``word`` in the shared engine."""
    _default.def_an(word)


def undef_a(word: str) -> bool:
    """Remove a forced "a" word from the shared engine."""
    return _default.undef_a(word)


def undef_an(word: str) -> bool:
    """Remove a forced "an" word from the shared engine."""
    return _default.undef_an(word)


def def_a_pattern(pattern: str) -> None:
    """Add an "a" pattern to the shared engine."""
    _default.def_a_pattern(pattern)


def def_an_pattern(pattern: str) -> None:
    """Add an "an" pattern to the shared engine."""
    _default.def_an_pattern(pattern)


def undef_a_pattern(pattern: str) -> bool:
    """Remove an "a" pattern from the shared engine."""
    return _default.undef_a_pattern(pattern)


def undef_an_pattern(pattern: str) -> bool:
    """Remove an "an" pattern from the shared engine."""
    return _default.undef_an_pattern(pattern)


def def_a_reset() -> None:
    """Drop every custom word and pattern from the shared engine."""
    _default.def_a_reset()
"""Comparative and superlative forms of English adjectives."""

from inflectkit.letters import (
    count_syllables,
    is_all_upper,
    is_vowel,
    match_case,
    match_suffix,
)

_IRREGULAR_COMPARATIVES = {
    "good": "better",
    "well": "better",
    "bad": "worse",
    "ill": "worse",
    "far": "farther",
    "little": "less",
    "much": "more",
    "many": "more",
}

_IRREGULAR_SUPERLATIVES = {
    "good": "best",
    "well": "best",
    "bad": "worst",
    "ill": "worst",
    "far": "farthest",
    "little": "least",
    "much": "most",
    "many": "most",
}

# Two-syllable adjectives that still take -er/-est.
_TWO_SYLLABLE_WITH_SUFFIX = frozenset(
    {
        "simple", "gentle", "narrow", "shallow", "quiet", "clever", "common",
        "hollow", "mellow", "yellow", "feeble", "humble", "noble", "able",
        "tender", "bitter", "slender",
    }
)

# One-syllable words whose only vowel is the final y: they keep it (shyer).
_Y_AS_VOWEL = frozenset({"shy", "sly", "spry", "wry"})

# Short adjectives that idiomatically take more/most.
_PREFER_MORE = frozenset(
    {
        "real", "right", "wrong", "just", "fun", "apt",
        "like", "prime", "fake",
        "key", "due", "worth", "loath", "void", "null", "male", "awry",
        "own", "main", "chief",
        "past", "next", "last", "first",
    }
)


def comparative(adj: str) -> str:
    """Return the comparative form of an adjective (big -> bigger, good -> better)."""
    if not adj:
        return ""
    lower = adj.lower()
    if lower in _IRREGULAR_COMPARATIVES:
        return match_case(adj, _IRREGULAR_COMPARATIVES[lower])
    if _should_use_suffix(lower):
        return _apply_suffix(adj, lower, "er")
    return _prefix_with(adj, "more")


def superlative(adj: str) -> str:
    """Return the superlative form of an adjective (big -> biggest, good -> best)."""
    if not adj:
        return ""
    lower = adj.lower()
    if lower in _IRREGULAR_SUPERLATIVES:
        return match_case(adj, _IRREGULAR_SUPERLATIVES[lower])
    if _should_use_suffix(lower):
        return _apply_suffix(adj, lower, "est")
    return _prefix_with(adj, "most")


def _should_use_suffix(lower: str) -> bool:
    if lower in _PREFER_MORE:
        return False
    syllables = count_syllables(lower)
    if syllables == 1:
        return True
    if syllables == 2 and lower.endswith("y"):
        return True
    return lower in _TWO_SYLLABLE_WITH_SUFFIX


def _apply_suffix(adj: str, lower: str, suffix: str) -> str:
    """Attach ``suffix`` ("er" or "est") with the usual spelling changes."""
    if lower.endswith("e"):
        return adj + match_suffix(adj, suffix[1:])

    if lower.endswith("y") and len(lower) > 1 and not is_vowel(lower[-2]):
        if lower in _Y_AS_VOWEL:
            return adj + match_suffix(adj, suffix)
        return adj[:-1] + match_suffix(adj, "i" + suffix)

    if _should_double_final_consonant(lower):
        return adj + match_suffix(adj, lower[-1] + suffix)

    return adj + match_suffix(adj, suffix)


def _should_double_final_consonant(lower: str) -> bool:
    """True for one-syllable words ending consonant-vowel-consonant."""
    if len(lower) < 2 or count_syllables(lower) != 1:
        return False
    last, second_last = lower[-1], lower[-2]
    if is_vowel(last) or last in "wxy":
        return False
    if not is_vowel(second_last):
        return False
    return not (len(lower) >= 3 and is_vowel(lower[-3]))


def _prefix_with(adj: str, word: str) -> str:
    if is_all_upper(adj):
        return f"{word.upper()} {adj}"
    if "A" <= adj[0] <= "Z":
        return f"{word.capitalize()} {adj[0].upper()}{adj[1:].lower()}"
    return f"{word} {adj}"
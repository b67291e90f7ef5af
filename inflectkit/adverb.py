"""Adverb forms of English adjectives."""

from inflectkit.letters import is_vowel, match_case, match_suffix

_IRREGULAR_ADVERBS = {
    "good": "well",
    "whole": "wholly",
    "day": "daily",
    "gay": "gaily",
}

# Flat adverbs and words that already work as adverbs.
_UNCHANGED_ADVERBS = frozenset(
    {
        "fast", "hard", "late", "early", "straight",
        "well", "ill", "just", "only", "still", "much", "far", "long",
        "likely", "even",
        "ahead", "away", "alone", "aloud", "apart", "abroad", "afoot",
        "afloat", "ashore", "asleep", "awake", "alive", "askew", "awry",
    }
)

# -le words that keep the e (sole -> solely).
_LE_KEEPS_E = frozenset({"sole"})

# Short consonant + y words that simply add -ly (shy -> shyly).
_SHORT_Y_ADVERBS = frozenset({"shy", "sly", "dry", "wry", "coy", "spry"})


def adverb(adj: str) -> str:
    """Return the adverb form of an adjective (quick -> quickly, good -> well)."""
    if not adj:
        return ""
    lower = adj.lower()
    if lower in _IRREGULAR_ADVERBS:
        return match_case(adj, _IRREGULAR_ADVERBS[lower])
    if lower in _UNCHANGED_ADVERBS:
        return adj
    return _apply_adverb_suffix(adj, lower)


def _apply_adverb_suffix(adj: str, lower: str) -> str:
    def add(stem: str, suffix: str) -> str:
        return stem + match_suffix(adj, suffix)

    if lower == "public":
        return add(adj, "ly")
    if lower.endswith("ic"):
        return add(adj, "ally")
    if lower.endswith("ll"):
        return add(adj, "y")
    if lower.endswith("ue"):
        return add(adj[:-1], "ly")
    if lower.endswith("ile"):
        return add(adj, "ly")
    if lower.endswith("le"):
        if lower in _LE_KEEPS_E:
            return add(adj, "ly")
        return add(adj[:-2], "ly")
    if lower.endswith("y") and len(lower) > 1 and not is_vowel(lower[-2]):
        if lower in _SHORT_Y_ADVERBS:
            return add(adj, "ly")
        return add(adj[:-1], "ily")
    return add(adj, "ly")
"""English word-form helpers: comparatives, superlatives, adverbs, indefinite articles and identifier case conversion."""

__version__ = "0.1.0"
__all__ = ["adjective", "adverb", "article", "case", "letters"]
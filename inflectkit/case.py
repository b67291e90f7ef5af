"""Conversions between snake_case, kebab-case, PascalCase and camelCase."""

from enum import Enum, auto
from itertools import zip_longest


class _Kind(Enum):
    NONE = auto()
    LOWER = auto()
    UPPER = auto()
    DIGIT = auto()
    SEPARATOR = auto()


def _is_separator(char: str) -> bool:
    return char in "_-" or char.isspace()


def _with_next(s: str):
    """Yield each character of ``s`` with the one after it ("" at the end)."""
    return zip_longest(s, s[1:], fillvalue="")


def _convert_case(s: str, separator: str) -> str:
    out: list[str] = []
    prev = _Kind.NONE

    for char, following in _with_next(s):
        if _is_separator(char):
            if out:
                prev = _Kind.SEPARATOR
            continue

        if char.isupper():
            needs_sep = prev in (_Kind.LOWER, _Kind.DIGIT, _Kind.SEPARATOR) or (
                prev is _Kind.UPPER and following.islower()
            )
            if out and needs_sep:
                out.append(separator)
            out.append(char.lower())
            prev = _Kind.UPPER
        elif char.islower():
            if out and prev in (_Kind.SEPARATOR, _Kind.DIGIT):
                out.append(separator)
            out.append(char)
            prev = _Kind.LOWER
        elif char.isdecimal():
            if out and prev in (_Kind.SEPARATOR, _Kind.LOWER, _Kind.UPPER):
                out.append(separator)
            out.append(char)
            prev = _Kind.DIGIT

    return "".join(out).strip(separator)


def _split_words(s: str) -> list[str]:
    words: list[str] = []
    current = ""

    for char, following in _with_next(s):
        if _is_separator(char):
            if current:
                words.append(current)
                current = ""
            continue

        last = current[-1:]
        if char.isupper():
            boundary = (
                last.islower()
                or (last.isupper() and following.islower())
                or last.isdecimal()
            )
        elif char.isdecimal():
            boundary = last.isalpha()
        elif char.isalpha():
            boundary = last.isdecimal()
        else:
            continue

        if boundary and current:
            words.append(current)
            current = ""
        current += char

    if current:
        words.append(current)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _camel_or_pascal(s: str, pascal: bool) -> str:
    words = [word.lower() for word in _split_words(s)]
    if not words:
        return ""
    head, *tail = words
    first = _capitalize(head) if pascal else head
    return first + "".join(_capitalize(word) for word in tail)


def underscore(s: str) -> str:
    """Convert ``s`` to snake_case, keeping runs of capitals (HTTP) together."""
    return _convert_case(s, "_")


def snake_case(s: str) -> str:
    """Alias of :func:`underscore`."""
    return underscore(s)


def dasherize(s: str) -> str:
    """Convert ``s`` to kebab-case, keeping runs of capitals (HTTP) together."""
    return _convert_case(s, "-")


def kebab_case(s: str) -> str:
    """Alias of :func:`dasherize`."""
    return dasherize(s)


def pascal_case(s: str) -> str:
    """Convert ``s`` to PascalCase."""
    return _camel_or_pascal(s, pascal=True)


def title_case(s: str) -> str:
    """Alias of :func:`pascal_case`."""
    return pascal_case(s)


def camel_case(s: str) -> str:
    """Convert ``s`` to camelCase."""
    return _camel_or_pascal(s, pascal=False)
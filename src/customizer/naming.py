"""Case conversion of human friendly project names."""

from __future__ import annotations

import re
import unicodedata

from .errors import InvalidNameError

__all__ = ["split_words", "to_kebab", "to_pascal", "to_snake"]


_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]+")
_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_END = re.compile(r"([A-Z]+)([A-Z][a-z])")


def split_words(name: str) -> list[str]:
    """Split ``name`` into the words used by every case convention.

    Words are separated by whitespace, hyphens, underscores and any other
    punctuation, and a new word starts wherever a lowercase letter or digit is
    followed by an uppercase letter. A run of capitals followed by a
    capitalised word (``HTTPServer``) is split before the last capital.

    Raises :class:`InvalidNameError` if no word is left or the name starts
    with a digit.
    """

    text = unicodedata.normalize("NFKD", str(name))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = _ACRONYM_END.sub(r"\1 \2", text)
    text = _LOWER_TO_UPPER.sub(r"\1 \2", text)

    words = [word for word in _NON_ALPHANUMERIC.split(text) if word]
    if not words:
        raise InvalidNameError(f"project name {name!r} contains no letters or digits")
    if words[0][0].isdigit():
        raise InvalidNameError(f"project name {name!r} must start with a letter")
    return words


def to_snake(name: str) -> str:
    """Return ``name`` as ``lower_snake_case``."""

    return "_".join(word.lower() for word in split_words(name))


def to_pascal(name: str) -> str:
    """Return ``name`` as ``PascalCase``."""

    return "".join(word.capitalize() for word in split_words(name))


def to_kebab(name: str) -> str:
    """Return ``name`` as ``kebab-case``."""

    return "-".join(word.lower() for word in split_words(name))

"""Word segmentation and case-style rendering for identifier-like strings."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from .errors import UnknownCaseStyleError

__all__ = [
    "CaseStyle",
    "capitalize",
    "render",
    "slugify",
    "to_camel",
    "to_kebab",
    "to_pascal",
    "to_scream",
    "to_snake",
    "tokenize",
]


_LOWER = "lower"
_UPPER = "upper"
_DIGIT = "digit"
_SEPARATOR = "separator"

_INVALID_SLUG_CHARACTERS = re.compile(r"[^a-z0-9-]")


def _classify(char: str) -> str:
    if "a" <= char <= "z":
        return _LOWER
    if "A" <= char <= "Z":
        return _UPPER
    if "0" <= char <= "9":
        return _DIGIT
    return _SEPARATOR


def _is_boundary(previous: str, current: str, following: str) -> bool:
    if previous == _LOWER and current == _UPPER:
        return True
    # start of a capitalised word inside an upper-case run: "HTMLParser"
    if previous == _UPPER and current == _UPPER and following == _LOWER:
        return True
    if previous == _DIGIT and current in (_LOWER, _UPPER):
        return True
    return previous in (_LOWER, _UPPER) and current == _DIGIT


def tokenize(value: str) -> list[str]:
    """Split ``value`` into ASCII alphanumeric word tokens.

    Separators (whitespace, ``-``, ``_`` and any other non alphanumeric
    character) are discarded. Runs of letters and digits are further split at
    ``aB``, ``ABc``, digit to letter and letter to digit transitions, so
    ``"HTMLParser"`` yields ``["HTML", "Parser"]`` and ``"v2Config"`` yields
    ``["v", "2", "Config"]``.
    """

    text = value.strip()
    kinds = [_classify(char) for char in text]
    tokens: list[str] = []
    start: int | None = None

    for index, kind in enumerate(kinds):
        if kind == _SEPARATOR:
            if start is not None:
                tokens.append(text[start:index])
                start = None
            continue

        if start is None:
            start = index
            continue

        following = kinds[index + 1] if index + 1 < len(kinds) else _SEPARATOR
        if _is_boundary(kinds[index - 1], kind, following):
            tokens.append(text[start:index])
            start = index

    if start is not None:
        tokens.append(text[start:])

    return tokens


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_kebab(value: str) -> str:
    return "-".join(word.lower() for word in tokenize(value))


def to_snake(value: str) -> str:
    return "_".join(word.lower() for word in tokenize(value))


def to_scream(value: str) -> str:
    return "_".join(word.upper() for word in tokenize(value))


def to_camel(value: str) -> str:
    """Return ``value`` as camelCase.

    Only the first character of each later word is touched, the rest of the
    word keeps its casing: ``"user HTTPServer"`` becomes ``"userHTTPServer"``.
    """

    words = tokenize(value)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_upper_first(word) for word in rest)


def to_pascal(value: str) -> str:
    return "".join(_upper_first(word) for word in tokenize(value))


def capitalize(value: str) -> str:
    """Title-case the first character of the trimmed ``value`` if it is lowercase."""

    text = value.strip()
    if text and text[0].islower():
        return text[0].title() + text[1:]
    return text


def slugify(value: str) -> str:
    """Create a URL friendly slug such as ``"foo-bar"`` from ``"Foo Bar!!"``."""

    words = (_INVALID_SLUG_CHARACTERS.sub("", word.lower()) for word in tokenize(value))
    return "-".join(word for word in words if word)


class CaseStyle(str, Enum):
    """Naming conventions understood by :func:`render`."""

    KEBAB = "kebab"
    SNAKE = "snake"
    SCREAM = "scream"
    CAMEL = "camel"
    PASCAL = "pascal"
    CAPITALIZE = "capitalize"
    SLUG = "slug"

    @classmethod
    def parse(cls, style: "CaseStyle | str") -> "CaseStyle":
        """Return the member named by ``style``; names are matched exactly."""

        if isinstance(style, cls):
            return style
        try:
            return cls(style)
        except ValueError as exc:
            raise UnknownCaseStyleError(style) from exc


_RENDERERS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.KEBAB: to_kebab,
    CaseStyle.SNAKE: to_snake,
    CaseStyle.SCREAM: to_scream,
    CaseStyle.CAMEL: to_camel,
    CaseStyle.PASCAL: to_pascal,
    CaseStyle.CAPITALIZE: capitalize,
    CaseStyle.SLUG: slugify,
}


def render(style: CaseStyle | str, value: str | None) -> str | None:
    """Render ``value`` in the given case ``style``.

    ``None`` is passed through untouched so callers can style optional values
    without checking for them first.
    """

    renderer = _RENDERERS[CaseStyle.parse(style)]
    if value is None:
        return None
    return renderer(value)

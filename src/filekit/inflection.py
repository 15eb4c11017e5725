"""Suffix based English pluralisation helpers.

The rules below cover regular nouns only. Irregular forms such as
``child``/``children`` are not recognised and words like ``series`` are
treated like any other word ending in ``s``. The rule order is part of the
templating contract and must not change.
"""

from __future__ import annotations

__all__ = ["pluralize", "singularize"]


_VOWELS = "aeiou"


def pluralize(value: str) -> str:
    """Return the plural form of ``value``.

    >>> pluralize("city"), pluralize("bus"), pluralize("boy")
    ('cities', 'buses', 'boys')
    """

    if value.lower().endswith("y") and len(value) > 1 and value[-2].lower() not in _VOWELS:
        return value[:-1] + "ies"
    if value.endswith(("s", "sh", "ch")):
        return value + "es"
    return value + "s"


def singularize(value: str) -> str:
    """Return the singular form of ``value``.

    >>> singularize("cities"), singularize("buses"), singularize("cats")
    ('city', 'bus', 'cat')
    """

    if value.endswith("ies"):
        return value[:-3] + "y"
    if value.endswith("es"):
        return value[:-2]
    if value.endswith("s") and len(value) > 1:
        return value[:-1]
    return value

"""Named filters and functions exposed to templates.

Filters receive the piped value and a mapping of named arguments, functions
receive only the named arguments. Both tables are built once at import time
and exposed as read-only mappings; the names are the vocabulary template
authors write, so renaming an entry breaks existing templates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Callable, Union
from uuid import uuid4

from .dates import DEFAULT_DATE_PATTERN, DEFAULT_NOW_PATTERN, format_datetime, parse_datetime
from .inflection import pluralize, singularize
from .naming import capitalize, slugify, to_camel, to_kebab, to_pascal, to_scream, to_snake

__all__ = [
    "ARGUMENT_NAMES",
    "DEFAULT_JOIN_SEPARATOR",
    "FILTERS",
    "FUNCTIONS",
    "Filter",
    "Function",
    "Operation",
    "resolve",
    "resolve_filter",
    "resolve_function",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_JOIN_SEPARATOR = ","

Filter = Callable[[Any, Mapping[str, Any]], Any]
Function = Callable[[Mapping[str, Any]], Any]
Operation = Union[Filter, Function]


def _text_filter(transform: Callable[[str], str]) -> Filter:
    def apply(value: Any, args: Mapping[str, Any]) -> Any:
        if value is None:
            return None
        return transform(str(value))

    apply.__name__ = f"{transform.__name__}_filter"
    apply.__doc__ = transform.__doc__
    return apply


def default_filter(value: Any, args: Mapping[str, Any]) -> Any:
    """Return ``value`` or the ``value`` argument when the input is ``None``."""

    return args.get("value") if value is None else value


def join_filter(value: Any, args: Mapping[str, Any]) -> Any:
    """Join the items of a collection with ``sep`` (``","`` by default)."""

    if value is None:
        return None
    separator = args.get("sep")
    separator = DEFAULT_JOIN_SEPARATOR if separator is None else str(separator)
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
        return separator.join(str(item) for item in value)
    return str(value)


def date_filter(value: Any, args: Mapping[str, Any]) -> Any:
    """Format a date, datetime or ISO-8601 string with ``pattern``."""

    pattern = args.get("pattern")
    pattern = DEFAULT_DATE_PATTERN if pattern is None else str(pattern)
    try:
        moment = parse_datetime(value)
    except ValueError:
        LOGGER.warning("Cannot parse %r as a date; leaving it unchanged", value)
        return value
    return format_datetime(moment, pattern)


def now_function(args: Mapping[str, Any]) -> str:
    """Return the current local time formatted with ``pattern``."""

    pattern = args.get("pattern")
    pattern = DEFAULT_NOW_PATTERN if pattern is None else str(pattern)
    return format_datetime(parse_datetime(None), pattern)


def uuid_function(args: Mapping[str, Any]) -> str:
    """Return a random UUID string."""

    return str(uuid4())


FILTERS: Mapping[str, Filter] = MappingProxyType(
    {
        "kebab": _text_filter(to_kebab),
        "snake": _text_filter(to_snake),
        "scream": _text_filter(to_scream),
        "camel": _text_filter(to_camel),
        "pascal": _text_filter(to_pascal),
        "capitalize": _text_filter(capitalize),
        "lower": _text_filter(str.lower),
        "upper": _text_filter(str.upper),
        "slug": _text_filter(slugify),
        "plural": _text_filter(pluralize),
        "singular": _text_filter(singularize),
        "default": default_filter,
        "join": join_filter,
        "date": date_filter,
    }
)

FUNCTIONS: Mapping[str, Function] = MappingProxyType(
    {
        "now": now_function,
        "uuid": uuid_function,
    }
)

# Positional arguments at a call site bind to these names in order.
ARGUMENT_NAMES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "default": ("value",),
        "join": ("sep",),
        "date": ("pattern",),
        "now": ("pattern",),
    }
)


def resolve_filter(name: str) -> Filter | None:
    return FILTERS.get(name)


def resolve_function(name: str) -> Function | None:
    return FUNCTIONS.get(name)


def resolve(name: str) -> Operation | None:
    """Look up ``name`` among the filters, then the functions.

    Lookup is exact and case-sensitive. ``None`` is returned for unknown
    names; reporting them is left to the template engine.
    """

    operation = resolve_filter(name)
    if operation is None:
        return resolve_function(name)
    return operation

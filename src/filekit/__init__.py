"""Utilities for generating source files from templates.

The package splits identifier-like strings into words and renders them in the
usual naming conventions (kebab, snake, camel, ...), pluralises nouns, and
exposes those helpers as Jinja2 filters alongside small helpers for creating
and editing the generated files.
"""

from __future__ import annotations

from .config import FileKitSettings
from .errors import (
    ConfigurationError,
    DatePatternError,
    FileKitError,
    TemplateNotFoundError,
    TemplateRenderingError,
    UnknownCaseStyleError,
)
from .files import (
    append_after_pattern,
    append_to_file,
    create_file,
    create_file_from_resource,
    create_file_from_template,
    delete_file,
    find_and_replace,
    render_template,
)
from .inflection import pluralize, singularize
from .naming import CaseStyle, render, slugify, tokenize
from .registry import FILTERS, FUNCTIONS, resolve
from .template import TemplateRenderer

__all__ = [
    "CaseStyle",
    "ConfigurationError",
    "DatePatternError",
    "FILTERS",
    "FUNCTIONS",
    "FileKitError",
    "FileKitSettings",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnknownCaseStyleError",
    "append_after_pattern",
    "append_to_file",
    "create_file",
    "create_file_from_resource",
    "create_file_from_template",
    "delete_file",
    "find_and_replace",
    "pluralize",
    "render",
    "render_template",
    "resolve",
    "singularize",
    "slugify",
    "tokenize",
]

__version__ = "0.1.0"

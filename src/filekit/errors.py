"""Custom exception types used by filekit."""

from __future__ import annotations


class FileKitError(RuntimeError):
    """Base class for errors raised by filekit."""


class ConfigurationError(FileKitError):
    """Raised when :class:`~filekit.config.FileKitSettings` cannot be built."""


class TemplateRenderingError(FileKitError):
    """Raised when the template engine cannot render a template."""


class TemplateNotFoundError(TemplateRenderingError):
    """Raised when a named template is missing from the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"template '{name}' not found")
        self.name = name


class UnknownCaseStyleError(FileKitError, ValueError):
    """Raised when a case style name is not recognised."""

    def __init__(self, style: object) -> None:
        super().__init__(f"unknown case style '{style}'")
        self.style = style


class DatePatternError(FileKitError, ValueError):
    """Raised for date patterns containing unsupported letters."""

    def __init__(self, pattern: str, letter: str) -> None:
        super().__init__(f"unsupported pattern letter '{letter}' in '{pattern}'")
        self.pattern = pattern
        self.letter = letter

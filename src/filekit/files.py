"""Small helpers for creating and editing generated text files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping

from .template import TemplateRenderer

__all__ = [
    "append_after_pattern",
    "append_to_file",
    "create_file",
    "create_file_from_resource",
    "create_file_from_template",
    "delete_file",
    "find_and_replace",
    "render_template",
]


LOGGER = logging.getLogger(__name__)


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def create_file(path: str | Path, content: str = "", *, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``path``, creating parent directories as needed."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    LOGGER.debug("Created %s", file_path)
    return file_path


def delete_file(path: str | Path) -> bool:
    """Delete ``path`` and return whether a file was removed."""

    file_path = Path(path)
    if not file_path.is_file():
        return False
    file_path.unlink()
    LOGGER.debug("Deleted %s", file_path)
    return True


def find_and_replace(
    path: str | Path,
    pattern: str | re.Pattern[str],
    replacement: str,
    *,
    encoding: str = "utf-8",
) -> int:
    """Replace every match of ``pattern`` in ``path``.

    Returns the number of replacements made. A missing file is left alone.
    """

    file_path = Path(path)
    if not file_path.is_file():
        return 0
    text = file_path.read_text(encoding=encoding)
    updated, count = _compile(pattern).subn(replacement, text)
    if count:
        file_path.write_text(updated, encoding=encoding)
        LOGGER.debug("Replaced %d match(es) in %s", count, file_path)
    return count


def append_to_file(path: str | Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Append ``content`` to ``path``, creating the file and its parents if needed."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("a", encoding=encoding) as handle:
        handle.write(content)
    LOGGER.debug("Appended %d character(s) to %s", len(content), file_path)
    return file_path


def append_after_pattern(
    path: str | Path,
    pattern: str | re.Pattern[str],
    content: str,
    *,
    encoding: str = "utf-8",
) -> bool:
    """Insert ``content`` as a new line after the first line matching ``pattern``.

    The file keeps its trailing newline if it had one. Returns ``False`` when
    the file does not exist or no line matches.
    """

    file_path = Path(path)
    if not file_path.is_file():
        return False

    original = file_path.read_text(encoding=encoding)
    matcher = _compile(pattern)
    # Only "\n" ends a line; form feeds and unicode separators stay in place.
    lines = original.split("\n")
    searchable = len(lines) - 1 if original.endswith("\n") or not original else len(lines)
    for index in range(searchable):
        if matcher.search(lines[index]):
            lines.insert(index + 1, content)
            break
    else:
        return False

    file_path.write_text("\n".join(lines), encoding=encoding)
    LOGGER.debug("Inserted content after line %d of %s", index + 1, file_path)
    return True


def render_template(
    template: str,
    context: Mapping[str, Any],
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a template string with the filekit filters available."""

    return (renderer or TemplateRenderer()).render_string(template, context)


def create_file_from_template(
    path: str | Path,
    template: str,
    context: Mapping[str, Any],
    *,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Render ``template`` and write the result to ``path``."""

    renderer = renderer or TemplateRenderer()
    rendered = renderer.render_string(template, context)
    return create_file(path, rendered, encoding=renderer.settings.encoding)


def create_file_from_resource(
    path: str | Path,
    name: str,
    context: Mapping[str, Any],
    *,
    renderer: TemplateRenderer,
) -> Path:
    """Render the named template from the renderer's search path into ``path``."""

    rendered = renderer.render_resource(name, context)
    return create_file(path, rendered, encoding=renderer.settings.encoding)

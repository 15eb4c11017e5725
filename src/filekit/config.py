"""Configuration shared by the template renderer, file helpers and CLI."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

__all__ = ["FileKitSettings"]


class FileKitSettings(BaseModel):
    """Options controlling how templates are loaded and rendered.

    Attributes
    ----------
    encoding:
        Text encoding used when reading templates and writing files.
    undefined:
        ``"empty"`` renders undefined variables as an empty string while
        ``"error"`` raises :class:`~filekit.errors.TemplateRenderingError`.
    template_dirs:
        Directories searched, in order, for named templates.
    keep_trailing_newline:
        Preserve the final newline of a template in the rendered output.
    trim_blocks:
        Remove the first newline after a block tag.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = Field("utf-8", min_length=1, description="Text encoding for template and output files.")
    undefined: Literal["empty", "error"] = Field("empty", description="Policy for undefined template variables.")
    template_dirs: tuple[Path, ...] = Field(default=(), description="Search path for named templates.")
    keep_trailing_newline: bool = Field(True, description="Keep a template's trailing newline.")
    trim_blocks: bool = Field(False, description="Strip the newline following a block tag.")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FileKitSettings":
        """Validate ``data`` and build settings from it."""

        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

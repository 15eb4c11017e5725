from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from filekit.config import FileKitSettings
from filekit.errors import ConfigurationError


def test_defaults():
    settings = FileKitSettings()
    assert settings.encoding == "utf-8"
    assert settings.undefined == "empty"
    assert settings.template_dirs == ()
    assert settings.keep_trailing_newline is True
    assert settings.trim_blocks is False


def test_from_mapping_coerces_paths():
    settings = FileKitSettings.from_mapping({"undefined": "error", "template_dirs": ["templates", "shared"]})
    assert settings.undefined == "error"
    assert settings.template_dirs == (Path("templates"), Path("shared"))
    assert isinstance(settings.template_dirs, tuple)


@pytest.mark.parametrize(
    "data",
    [
        {"undefined": "loud"},
        {"encoding": ""},
        {"unexpected": True},
    ],
)
def test_from_mapping_rejects_invalid_values(data):
    with pytest.raises(ConfigurationError):
        FileKitSettings.from_mapping(data)


def test_settings_are_frozen():
    settings = FileKitSettings()
    with pytest.raises(ValidationError):
        settings.encoding = "latin-1"  # type: ignore[misc]

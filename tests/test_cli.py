from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from filekit.cli import _parse_key_value_pairs, main


def test_parse_key_value_pairs():
    context = _parse_key_value_pairs(["name=demo", "version=1.0", "expr=a=b"])
    assert context == {"name": "demo", "version": "1.0", "expr": "a=b"}

    with pytest.raises(argparse.ArgumentTypeError):
        _parse_key_value_pairs(["invalid"])


def test_cli_render_writes_to_output(tmp_path: Path):
    template_path = tmp_path / "template.txt"
    template_path.write_text("Hello {{ name | pascal }}", encoding="utf-8")
    output_path = tmp_path / "output.txt"
    exit_code = main(["render", str(template_path), "-c", "name=big world", "-o", str(output_path), "--strict"])
    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "Hello BigWorld"


def test_cli_render_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    template_path = tmp_path / "template.txt"
    template_path.write_text("{{ items | default('none') }}", encoding="utf-8")
    assert main(["render", str(template_path)]) == 0
    assert capsys.readouterr().out == "none\n"


def test_cli_render_strict_missing_value(tmp_path: Path):
    template_path = tmp_path / "template.txt"
    template_path.write_text("Hello {{ name }}", encoding="utf-8")
    assert main(["render", str(template_path), "--strict"]) == 1


def test_cli_render_missing_template(tmp_path: Path):
    assert main(["render", str(tmp_path / "absent.txt")]) == 1


def test_cli_render_rejects_bad_context(tmp_path: Path):
    template_path = tmp_path / "template.txt"
    template_path.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["render", str(template_path), "-c", "novalue"])


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["case", "snake", "HTMLParser"], "html_parser"),
        (["case", "camel", "foo", "bar"], "fooBar"),
        (["plural", "city"], "cities"),
        (["singular", "buses"], "bus"),
    ],
)
def test_cli_text_commands(argv, expected, capsys: pytest.CaptureFixture[str]):
    assert main(argv) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_cli_rejects_unknown_style():
    with pytest.raises(SystemExit):
        main(["case", "train", "foo"])

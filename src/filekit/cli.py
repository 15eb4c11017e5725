"""Command line interface for the filekit utilities."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .config import FileKitSettings
from .errors import FileKitError
from .inflection import pluralize, singularize
from .naming import CaseStyle, render
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, str]:
    context: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid key/value pair '{pair}'. Expected KEY=VALUE syntax."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise argparse.ArgumentTypeError("keys must not be empty")
        context[key] = value
    return context


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Naming helpers and template rendering for code generation")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="render a Jinja2 template file")
    render_parser.add_argument("template", type=Path, help="Path to the template file")
    render_parser.add_argument(
        "-c",
        "--context",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Values exposed to the template renderer",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the template uses an undefined variable",
    )
    render_parser.add_argument("--encoding", default="utf-8", help="Template and output encoding")

    case_parser = subparsers.add_parser("case", help="convert text to a naming convention")
    case_parser.add_argument("style", choices=[style.value for style in CaseStyle], help="Target case style")
    case_parser.add_argument("text", nargs="+", help="Text to convert; multiple words are joined by spaces")

    plural_parser = subparsers.add_parser("plural", help="pluralise a noun")
    plural_parser.add_argument("word")

    singular_parser = subparsers.add_parser("singular", help="singularise a noun")
    singular_parser.add_argument("word")

    return parser


def _handle_render(args: argparse.Namespace) -> int:
    settings = FileKitSettings(
        encoding=args.encoding,
        undefined="error" if args.strict else "empty",
    )
    renderer = TemplateRenderer(settings)
    context = _parse_key_value_pairs(args.context)
    rendered = renderer.render_file(args.template, context, target=args.output)
    if args.output is None:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def _handle_case(args: argparse.Namespace) -> int:
    print(render(args.style, " ".join(args.text)))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "render":
            return _handle_render(args)
        if args.command == "case":
            return _handle_case(args)
        if args.command == "plural":
            print(pluralize(args.word))
            return 0
        if args.command == "singular":
            print(singularize(args.word))
            return 0
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except (FileKitError, FileNotFoundError) as exc:
        LOGGER.error("%s", exc)
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Template rendering backed by Jinja2 and the filekit registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, MutableMapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound, Undefined
from jinja2.exceptions import TemplateRuntimeError

from .config import FileKitSettings
from .errors import FileKitError, TemplateNotFoundError, TemplateRenderingError
from .registry import ARGUMENT_NAMES, FILTERS, FUNCTIONS, Filter, Function

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


LOGGER = logging.getLogger(__name__)


def _finalize(value: Any) -> Any:
    return "" if value is None else value


def _bind_arguments(name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    names = ARGUMENT_NAMES.get(name, ())
    if len(args) > len(names):
        raise TemplateRuntimeError(f"'{name}' takes at most {len(names)} positional argument(s)")
    bound = dict(zip(names, args))
    bound.update(kwargs)
    return bound


class TemplateRenderer:
    """Render Jinja2 templates with the filekit filters and functions installed.

    ``None`` values render as an empty string and undefined variables reaching
    a filter are treated as ``None``, so ``{{ missing | kebab }}`` renders
    nothing instead of failing. With ``undefined="error"`` in the settings,
    undefined variables raise unless they go through ``default``.
    """

    def __init__(
        self,
        settings: FileKitSettings | None = None,
        *,
        filters: Mapping[str, Filter] | None = None,
        functions: Mapping[str, Function] | None = None,
    ) -> None:
        self.settings = settings or FileKitSettings()
        self._strict = self.settings.undefined == "error"
        self.environment = Environment(
            loader=FileSystemLoader(list(self.settings.template_dirs)) if self.settings.template_dirs else None,
            undefined=StrictUndefined if self._strict else Undefined,
            autoescape=False,
            keep_trailing_newline=self.settings.keep_trailing_newline,
            trim_blocks=self.settings.trim_blocks,
            finalize=_finalize,
        )

        for name, operation in {**FILTERS, **(filters or {})}.items():
            self.environment.filters[name] = self._adapt_filter(name, operation)
        for name, operation in {**FUNCTIONS, **(functions or {})}.items():
            self.environment.globals[name] = self._adapt_function(name, operation)

    @property
    def filters(self) -> MutableMapping[str, Callable[..., Any]]:
        """Filters installed on the underlying Jinja2 environment."""

        return self.environment.filters

    def _adapt_filter(self, name: str, operation: Filter) -> Callable[..., Any]:
        strict = self._strict

        def apply(value: Any, /, *args: Any, **kwargs: Any) -> Any:
            if isinstance(value, Undefined):
                if strict and name != "default":
                    value._fail_with_undefined_error()
                value = None
            return operation(value, _bind_arguments(name, args, kwargs))

        apply.__name__ = name
        return apply

    def _adapt_function(self, name: str, operation: Function) -> Callable[..., Any]:
        def call(*args: Any, **kwargs: Any) -> Any:
            return operation(_bind_arguments(name, args, kwargs))

        call.__name__ = name
        return call

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render the ``template`` source using ``context``."""

        try:
            return self.environment.from_string(template).render(dict(context))
        except TemplateRenderingError:
            raise
        except (TemplateError, FileKitError) as exc:
            raise TemplateRenderingError(str(exc)) from exc

    def render_resource(self, name: str, context: Mapping[str, Any]) -> str:
        """Render the template called ``name`` from ``settings.template_dirs``."""

        if self.environment.loader is None:
            raise TemplateNotFoundError(name)
        try:
            return self.environment.get_template(name).render(dict(context))
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(name) from exc
        except TemplateRenderingError:
            raise
        except (TemplateError, FileKitError) as exc:
            raise TemplateRenderingError(str(exc)) from exc

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=self.settings.encoding)
        rendered = self.render_string(text, context)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=self.settings.encoding)
            LOGGER.debug("Rendered %s to %s", template_path, target_path)

        return rendered

    def render_directory(
        self,
        template_dir: str | Path,
        target_dir: str | Path,
        context: Mapping[str, Any],
        *,
        ignore: Iterable[str] | None = None,
    ) -> None:
        """Render every file inside ``template_dir`` into ``target_dir``.

        File and directory names are rendered too, so a template tree can
        contain entries such as ``{{ name | snake }}.py``.
        """

        template_dir = Path(template_dir)
        target_dir = Path(target_dir)
        if not template_dir.is_dir():
            raise FileNotFoundError(template_dir)

        ignore_patterns = set(ignore or [])
        for source in sorted(template_dir.rglob("*")):
            relative = source.relative_to(template_dir)
            if any(relative.match(pattern) for pattern in ignore_patterns):
                continue

            destination = target_dir / self.render_string(relative.as_posix(), context)
            if source.is_dir():
                destination.mkdir(parents=True, exist_ok=True)
                continue

            self.render_file(source, context, target=destination)

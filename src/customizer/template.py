"""Mustache style placeholder rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .errors import CustomizeError
from .naming import to_kebab, to_pascal, to_snake
from .rewrite import read_text, write_text_atomic

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")
_MISSING_POLICIES = frozenset({"keep", "empty", "error"})


class TemplateRenderingError(CustomizeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Values are inserted as plain text. Nothing is escaped since the rendered
    files are TOML, Markdown and source code rather than HTML.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "title": lambda value: str(value).title(),
                    "strip": lambda value: str(value).strip(),
                    "snake": lambda value: to_snake(str(value)),
                    "pascal": lambda value: to_pascal(str(value)),
                    "kebab": lambda value: to_kebab(str(value)),
                }
            )

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "empty",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Flat mapping providing values for placeholders.
        missing:
            Controls what happens when a placeholder names a key absent from
            ``context``: ``"empty"`` (the default) substitutes an empty string,
            ``"keep"`` leaves the placeholder unchanged and ``"error"`` raises
            :class:`TemplateRenderingError`.
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            parts = [part.strip() for part in match.group("expression").split("|")]
            parts = [part for part in parts if part]
            if not parts:
                return match.group(0)

            key, *filters = parts
            if key not in context:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        path: str | Path,
        context: Mapping[str, Any],
        *,
        missing: str = "empty",
    ) -> str:
        """Render the file at ``path`` in place and return the new content."""

        rendered = self.render_string(read_text(path), context, missing=missing)
        write_text_atomic(path, rendered)
        return rendered

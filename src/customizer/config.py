"""Identifiers derived from the project name and shared by every phase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .errors import InvalidNameError
from .naming import to_kebab, to_pascal, to_snake


class CaseStyle(str, Enum):
    """Case conventions a placeholder can be rewritten to."""

    SNAKE = "snake"
    PASCAL = "pascal"
    KEBAB = "kebab"


@dataclass(frozen=True, slots=True)
class CaseForms:
    """The project name rendered in each supported case convention.

    Attributes
    ----------
    name:
        The project name as given by the operator, with runs of whitespace
        collapsed.
    snake:
        ``lower_snake_case`` form, used for identifiers and file names.
    pascal:
        ``PascalCase`` form, used for type names.
    kebab:
        ``kebab-case`` form, used for package names.
    """

    name: str
    snake: str
    pascal: str
    kebab: str

    @classmethod
    def from_name(cls, name: str) -> "CaseForms":
        """Build :class:`CaseForms` from a human friendly project name."""

        normalized_name = " ".join(str(name).split())
        if not normalized_name:
            raise InvalidNameError("project name must not be empty")

        return cls(
            name=normalized_name,
            snake=to_snake(normalized_name),
            pascal=to_pascal(normalized_name),
            kebab=to_kebab(normalized_name),
        )

    def form(self, style: CaseStyle | str) -> str:
        """Return the form matching ``style``."""

        return getattr(self, CaseStyle(style).value)

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "snake": self.snake,
            "pascal": self.pascal,
            "kebab": self.kebab,
        }


__all__ = ["CaseForms", "CaseStyle"]

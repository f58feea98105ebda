"""Interactive collection of project metadata."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterable, Mapping

from rich.console import Console
from rich.markup import escape

from .errors import PromptError
from .manifest import PromptField

__all__ = [
    "AnswerProvider",
    "ConsoleAnswerProvider",
    "MappingAnswerProvider",
    "Metadata",
    "MetadataPrompter",
]


LOGGER = logging.getLogger(__name__)

Metadata = Mapping[str, str]


class AnswerProvider(ABC):
    """Source of answers for metadata prompts."""

    @abstractmethod
    def ask(self, field: PromptField) -> str:
        """Block until an answer for ``field`` is available and return it."""


class ConsoleAnswerProvider(AnswerProvider):
    """Read answers from standard input."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask(self, field: PromptField) -> str:
        try:
            return self._console.input(f"[bold cyan]?[/] {escape(field.prompt)} ")
        except EOFError as exc:
            raise PromptError(f"no answer for '{field.name}': input stream closed") from exc
        except UnicodeDecodeError as exc:
            raise PromptError(f"no answer for '{field.name}': input is not valid UTF-8") from exc


class MappingAnswerProvider(AnswerProvider):
    """Return canned answers keyed by field name."""

    def __init__(self, answers: Mapping[str, str]) -> None:
        self._answers = dict(answers)
        self.asked: list[str] = []

    def ask(self, field: PromptField) -> str:
        self.asked.append(field.name)
        try:
            return self._answers[field.name]
        except KeyError as exc:
            raise PromptError(f"no answer for '{field.name}'") from exc


class MetadataPrompter:
    """Ask for each field in turn and collect the answers."""

    def __init__(self, answers: AnswerProvider) -> None:
        self._answers = answers

    def collect(self, fields: Iterable[PromptField]) -> Metadata:
        """Return a read-only mapping of field name to answer.

        Answers are kept verbatim, including empty strings and surrounding
        whitespace.
        """

        values: dict[str, str] = {}
        for field in fields:
            values[field.name] = self._answers.ask(field)
            LOGGER.debug("Collected %s", field.name)
        return MappingProxyType(values)

"""Literal find-and-replace over whole files."""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .errors import (
    InvalidNameError,
    RenameCollisionError,
    TemplateFileNotFoundError,
    WriteError,
)

__all__ = [
    "SubstitutionRule",
    "apply_rules",
    "check_file_name",
    "read_text",
    "rename_in_place",
    "rewrite",
    "write_text_atomic",
]


LOGGER = logging.getLogger(__name__)

_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    """Replace every literal occurrence of ``pattern`` with ``replacement``."""

    pattern: str
    replacement: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("substitution pattern must not be empty")


def apply_rules(text: str, rules: Iterable[SubstitutionRule]) -> str:
    """Apply ``rules`` to ``text`` in a single pass.

    Every rule is matched against the original text only, so the replacement
    of one rule is never rewritten by another. When two patterns match at the
    same position the rule listed first wins.
    """

    rules = list(rules)
    if not rules:
        return text

    replacements: dict[str, str] = {}
    for rule in rules:
        replacements.setdefault(rule.pattern, rule.replacement)

    pattern = re.compile("|".join(re.escape(literal) for literal in replacements))
    return pattern.sub(lambda match: replacements[match.group(0)], text)


def read_text(path: str | Path) -> str:
    """Return the content of ``path`` without translating line endings."""

    path = Path(path)
    try:
        with path.open("r", encoding=_ENCODING, newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise TemplateFileNotFoundError(f"{path} does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise WriteError(f"could not read {path}: {exc}") from exc


def write_text_atomic(path: str | Path, text: str) -> None:
    """Replace the content of ``path`` with ``text``.

    The text goes to a temporary file in the same directory which is then
    moved over ``path``, so readers see either the old or the new content.
    """

    path = Path(path)
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=_ENCODING,
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
        if path.exists():
            shutil.copymode(path, temp_name)
        os.replace(temp_name, path)
    except (OSError, UnicodeError) as exc:
        if temp_name is not None and os.path.exists(temp_name):
            os.unlink(temp_name)
        raise WriteError(f"could not write {path}: {exc}") from exc


def check_file_name(name: str) -> str:
    """Return ``name`` if it is a bare file name without directory parts."""

    if name in {"", ".", ".."} or "/" in name or "\\" in name:
        raise InvalidNameError(f"{name!r} is not a plain file name")
    return name


def rename_in_place(path: str | Path, new_name: str) -> Path:
    """Rename ``path`` to ``new_name`` inside the same directory."""

    path = Path(path)
    if not path.is_file():
        raise TemplateFileNotFoundError(f"{path} does not exist")

    target = path.with_name(check_file_name(new_name))
    if target == path:
        return path
    if target.exists():
        raise RenameCollisionError(f"cannot rename {path} to {target}: target already exists")

    try:
        path.rename(target)
    except OSError as exc:
        raise WriteError(f"could not rename {path} to {target}: {exc}") from exc

    LOGGER.info("Renamed %s to %s", path, target.name)
    return target


def rewrite(
    path: str | Path,
    rules: Sequence[SubstitutionRule],
    rename_to: str | None = None,
) -> Path:
    """Rename ``path`` if requested, then apply ``rules`` to its content.

    Returns the path of the rewritten file.
    """

    path = Path(path)
    if rename_to is not None:
        path = rename_in_place(path, rename_to)

    original = read_text(path)
    updated = apply_rules(original, rules)
    write_text_atomic(path, updated)

    LOGGER.info("Updated %s", path)
    return path

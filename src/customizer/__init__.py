"""Customize a freshly cloned project template.

The package converts a project name into snake, pascal and kebab case forms,
rewrites the template's placeholder identifiers in a declared set of files,
asks the operator for project metadata and renders it into the template's
``{{ placeholder }}`` slots. Everything is usable programmatically through
:class:`ProjectCustomizer` or from the ``customize-project`` command.
"""

from __future__ import annotations

from .config import CaseForms, CaseStyle
from .errors import (
    CustomizeError,
    InvalidNameError,
    ManifestError,
    PromptError,
    RenameCollisionError,
    TemplateFileNotFoundError,
    UsageError,
    WriteError,
)
from .manifest import FileEntry, Manifest, PromptField, Replacement, TemplateTarget
from .naming import to_kebab, to_pascal, to_snake
from .orchestrator import CustomizeResult, ProjectCustomizer, Stage
from .prompt import AnswerProvider, ConsoleAnswerProvider, MappingAnswerProvider, MetadataPrompter
from .rewrite import SubstitutionRule, apply_rules, rewrite
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "AnswerProvider",
    "CaseForms",
    "CaseStyle",
    "ConsoleAnswerProvider",
    "CustomizeError",
    "CustomizeResult",
    "FileEntry",
    "InvalidNameError",
    "Manifest",
    "ManifestError",
    "MappingAnswerProvider",
    "MetadataPrompter",
    "ProjectCustomizer",
    "PromptError",
    "Replacement",
    "RenameCollisionError",
    "Stage",
    "SubstitutionRule",
    "TemplateFileNotFoundError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateTarget",
    "UsageError",
    "WriteError",
    "apply_rules",
    "rewrite",
    "to_kebab",
    "to_pascal",
    "to_snake",
]

__version__ = "0.1.0"

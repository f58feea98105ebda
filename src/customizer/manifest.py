"""Declarative description of the files a template customization touches."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .config import CaseForms, CaseStyle
from .errors import ManifestError
from .rewrite import SubstitutionRule, check_file_name

__all__ = [
    "FileEntry",
    "Manifest",
    "PromptField",
    "Replacement",
    "TemplateTarget",
]


DEFAULT_ADVISORY = "Don't forget to re-initialize the git repository!"


class Replacement(BaseModel):
    """Placeholder token replaced by one of the project's case forms."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: str = Field(..., min_length=1, description="Literal text to replace.")
    style: CaseStyle = Field(..., description="Case form substituted for the pattern.")


class FileEntry(BaseModel):
    """A file whose placeholder identifiers are rewritten."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., min_length=1, description="Path relative to the project root.")
    rename_to: str | None = Field(
        None,
        description="New file name, rendered against the case forms (e.g. '{{ snake }}.rs').",
    )
    replacements: List[Replacement] = Field(default_factory=list, description="Ordered replacements.")

    @field_validator("rename_to")
    @classmethod
    def check_rename_to(cls, value: str | None) -> str | None:
        return value if value is None else check_file_name(value)

    def rules(self, forms: CaseForms) -> list[SubstitutionRule]:
        """Resolve the replacements into concrete substitution rules."""

        return [SubstitutionRule(item.pattern, forms.form(item.style)) for item in self.replacements]


class PromptField(BaseModel):
    """A metadata field asked of the operator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Placeholder name the answer is bound to.")
    prompt: str = Field(..., description="Question displayed to the operator.")


class TemplateTarget(BaseModel):
    """A file whose ``{{ name }}`` placeholders are filled with metadata."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., min_length=1, description="Path relative to the project root.")
    fields: List[str] = Field(default_factory=list, description="Metadata fields exposed to the template.")
    derived: Dict[str, CaseStyle] = Field(
        default_factory=dict,
        description="Extra placeholder names bound to a case form of the project name.",
    )

    def context(self, metadata: Mapping[str, str], forms: CaseForms) -> dict[str, str]:
        """Return the values this target is rendered with."""

        values = {name: metadata[name] for name in self.fields if name in metadata}
        for name, style in self.derived.items():
            values[name] = forms.form(style)
        return values


class Manifest(BaseModel):
    """Everything a customization run rewrites, asks and renders."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files: List[FileEntry] = Field(default_factory=list, description="Files rewritten in order.")
    prompts: List[PromptField] = Field(default_factory=list, description="Metadata fields asked in order.")
    templates: List[TemplateTarget] = Field(default_factory=list, description="Files rendered with metadata.")
    advisory: str = Field(DEFAULT_ADVISORY, description="Message shown once the run succeeds.")

    @model_validator(mode="after")
    def check_prompt_names(self) -> "Manifest":
        names = [field.name for field in self.prompts]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate prompt names: {', '.join(duplicates)}")

        for target in self.templates:
            unknown = [name for name in target.fields if name not in names]
            if unknown:
                raise ValueError(f"template {target.path} uses undeclared fields: {', '.join(unknown)}")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str = "<mapping>") -> "Manifest":
        """Validate ``data`` and raise :class:`ManifestError` when it is invalid."""

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ManifestError(f"invalid manifest {source}: {exc}") from exc

    @classmethod
    def from_toml(cls, path: str | Path) -> "Manifest":
        """Load a manifest from a TOML file."""

        path = Path(path)
        try:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ManifestError(f"could not load manifest {path}: {exc}") from exc
        return cls.from_mapping(data, source=str(path))

    @classmethod
    def default(cls) -> "Manifest":
        """Return the manifest of the Rust command line quick start template."""

        return cls.from_mapping(DEFAULT_MANIFEST, source="<default>")


_SNAKE_TOKEN = "rust_cli_quickstart"
_PASCAL_TOKEN = "RustCliQuickStart"
_KEBAB_TOKEN = "rust-cli-quickstart"

DEFAULT_MANIFEST: Dict[str, Any] = {
    "files": [
        {
            "path": f"src/bin/{_SNAKE_TOKEN}.rs",
            "rename_to": "{{ snake }}.rs",
            "replacements": [
                {"pattern": _SNAKE_TOKEN, "style": "snake"},
                {"pattern": _PASCAL_TOKEN, "style": "pascal"},
            ],
        },
        {
            "path": "src/lib.rs",
            "replacements": [{"pattern": _PASCAL_TOKEN, "style": "pascal"}],
        },
        {
            "path": "benches/benchmarks.rs",
            "replacements": [
                {"pattern": _SNAKE_TOKEN, "style": "snake"},
                {"pattern": _PASCAL_TOKEN, "style": "pascal"},
            ],
        },
        {
            "path": "Cargo.toml",
            "replacements": [
                {"pattern": _SNAKE_TOKEN, "style": "snake"},
                {"pattern": _KEBAB_TOKEN, "style": "kebab"},
            ],
        },
        {
            "path": ".vscode/launch.json",
            "replacements": [{"pattern": _SNAKE_TOKEN, "style": "snake"}],
        },
    ],
    "prompts": [
        {"name": "description", "prompt": "Enter the description for the project:"},
        {"name": "firstName", "prompt": "Enter your first name:"},
        {"name": "lastName", "prompt": "Enter your last name:"},
        {"name": "email", "prompt": "Enter your email:"},
        {"name": "alias", "prompt": "Enter your GitHub alias:"},
    ],
    "templates": [
        {
            "path": "Cargo.toml",
            "fields": ["description", "firstName", "lastName", "email", "alias"],
        },
        {
            "path": "README.md",
            "fields": ["alias", "description"],
            "derived": {"projectName": "snake"},
        },
    ],
    "advisory": DEFAULT_ADVISORY,
}

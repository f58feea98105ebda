"""Sequencing of a customization run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import CaseForms
from .errors import (
    CustomizeError,
    RenameCollisionError,
    TemplateFileNotFoundError,
    UsageError,
)
from .manifest import Manifest
from .prompt import AnswerProvider, Metadata, MetadataPrompter
from .rewrite import check_file_name, rewrite
from .template import TemplateRenderer

__all__ = ["CustomizeResult", "ProjectCustomizer", "Stage"]


LOGGER = logging.getLogger(__name__)


class Stage(str, Enum):
    """States a customization run moves through."""

    START = "start"
    REWRITING_FILES = "rewriting_files"
    COLLECTING_METADATA = "collecting_metadata"
    RENDERING_TEMPLATES = "rendering_templates"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CustomizeResult:
    """Outcome of :meth:`ProjectCustomizer.run`.

    ``error`` and ``failed_stage`` are set only when the run failed.
    """

    stage: Stage
    forms: CaseForms | None = None
    metadata: Metadata | None = None
    rewritten: tuple[Path, ...] = ()
    rendered: tuple[Path, ...] = ()
    advisories: tuple[str, ...] = ()
    error: CustomizeError | None = None
    failed_stage: Stage | None = None

    @property
    def ok(self) -> bool:
        return self.stage is Stage.DONE


@dataclass(slots=True)
class _Progress:
    forms: CaseForms | None = None
    metadata: Metadata | None = None
    rewritten: list[Path] = field(default_factory=list)
    rendered: list[Path] = field(default_factory=list)


class ProjectCustomizer:
    """Rewrite, prompt and render a template checkout as described by a manifest."""

    def __init__(
        self,
        manifest: Manifest,
        answers: AnswerProvider,
        *,
        root: str | Path = ".",
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.manifest = manifest
        self.root = Path(root)
        self.renderer = renderer or TemplateRenderer()
        self.prompter = MetadataPrompter(answers)
        self._stage = Stage.START

    @property
    def stage(self) -> Stage:
        """Current state of the run."""

        return self._stage

    def run(self, project_name: str | None) -> CustomizeResult:
        """Customize the project under :attr:`root` for ``project_name``.

        Any :class:`CustomizeError` stops the run. Files already rewritten stay
        rewritten; the returned result names the stage that failed.
        """

        progress = _Progress()
        self._stage = Stage.START
        try:
            progress.forms = self._start(project_name)

            self._stage = Stage.REWRITING_FILES
            self._preflight(progress.forms)
            self._rewrite_files(progress.forms, progress.rewritten)

            self._stage = Stage.COLLECTING_METADATA
            progress.metadata = self.prompter.collect(self.manifest.prompts)

            self._stage = Stage.RENDERING_TEMPLATES
            self._render_templates(progress.forms, progress.metadata, progress.rendered)
        except CustomizeError as exc:
            failed_stage = self._stage
            self._stage = Stage.FAILED
            LOGGER.error("%s", exc)
            return CustomizeResult(
                stage=Stage.FAILED,
                forms=progress.forms,
                metadata=progress.metadata,
                rewritten=tuple(progress.rewritten),
                rendered=tuple(progress.rendered),
                error=exc,
                failed_stage=failed_stage,
            )

        self._stage = Stage.DONE
        advisories = (self.manifest.advisory,) if self.manifest.advisory else ()
        for advisory in advisories:
            LOGGER.warning("%s", advisory)

        return CustomizeResult(
            stage=Stage.DONE,
            forms=progress.forms,
            metadata=progress.metadata,
            rewritten=tuple(progress.rewritten),
            rendered=tuple(progress.rendered),
            advisories=advisories,
        )

    def _start(self, project_name: str | None) -> CaseForms:
        if not project_name:
            raise UsageError("a project name is required")

        forms = CaseForms.from_name(project_name)
        LOGGER.info("Customizing project '%s'", forms.name)
        LOGGER.debug("snake=%s pascal=%s kebab=%s", forms.snake, forms.pascal, forms.kebab)
        return forms

    def _rename_target(self, rename_to: str | None, forms: CaseForms) -> str | None:
        if rename_to is None:
            return None
        rendered = self.renderer.render_string(rename_to, forms.context(), missing="error")
        return check_file_name(rendered)

    def _preflight(self, forms: CaseForms) -> None:
        """Fail before the first write if the tree does not look like the template."""

        for entry in self.manifest.files:
            path = self.root / entry.path
            if not path.is_file():
                raise TemplateFileNotFoundError(
                    f"{path} does not exist; is this an uncustomized template checkout?"
                )
            new_name = self._rename_target(entry.rename_to, forms)
            if new_name is None:
                continue
            target = path.with_name(new_name)
            if target != path and target.exists():
                raise RenameCollisionError(f"cannot rename {path} to {target}: target already exists")

        for target in self.manifest.templates:
            path = self.root / target.path
            if not path.is_file():
                raise TemplateFileNotFoundError(f"{path} does not exist")

    def _rewrite_files(self, forms: CaseForms, rewritten: list[Path]) -> None:
        for entry in self.manifest.files:
            new_name = self._rename_target(entry.rename_to, forms)
            path = rewrite(self.root / entry.path, entry.rules(forms), rename_to=new_name)
            rewritten.append(path)

    def _render_templates(self, forms: CaseForms, metadata: Metadata, rendered: list[Path]) -> None:
        for target in self.manifest.templates:
            path = self.root / target.path
            self.renderer.render_file(path, target.context(metadata, forms))
            LOGGER.info("Rendered %s", path)
            rendered.append(path)

"""Exception types raised while customizing a project template."""

from __future__ import annotations


class CustomizeError(RuntimeError):
    """Base class for every failure that aborts a customization run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(CustomizeError):
    """Raised when the required project name was not supplied."""


class InvalidNameError(CustomizeError, ValueError):
    """Raised when a project name cannot be turned into identifiers."""


class TemplateFileNotFoundError(CustomizeError, FileNotFoundError):
    """Raised when a file listed in the manifest does not exist."""


class RenameCollisionError(CustomizeError, FileExistsError):
    """Raised when a rename would overwrite an existing file."""


class WriteError(CustomizeError, OSError):
    """Raised when reading, renaming or writing a file fails."""


class PromptError(CustomizeError):
    """Raised when an answer cannot be obtained from the operator."""


class ManifestError(CustomizeError):
    """Raised when a manifest file cannot be loaded or validated."""


__all__ = [
    "CustomizeError",
    "InvalidNameError",
    "ManifestError",
    "PromptError",
    "RenameCollisionError",
    "TemplateFileNotFoundError",
    "UsageError",
    "WriteError",
]

"""Exceptions raised by the generation stages."""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when a generation stage fails irrecoverably."""

    def __init__(self, message: str, stage: str = "") -> None:
        self.stage = stage
        prefix = f"[{stage}] " if stage else ""
        super().__init__(f"{prefix}{message}")


class PreconditionError(GenerationError):
    """A required input is missing: project name, template, catalog, export file."""


class InputError(GenerationError):
    """An export file exists but does not decode into the expected records."""

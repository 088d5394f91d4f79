"""Failure taxonomy for a pipeline invocation."""
from __future__ import annotations


class PipelineError(Exception):
    """Base class for failures that abort a whole ranking run."""


class ConfigurationError(PipelineError):
    pass


class DataUnavailableError(PipelineError):
    """An input the pipeline depends on could not be obtained."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source


class SnapshotUnavailableError(DataUnavailableError):
    """A holdings snapshot could not be fetched or was not a valid document."""


class ReferenceUnavailableError(DataUnavailableError):
    """The TP reference table could not be read."""

#!/usr/bin/env python3
"""
Exception hierarchy for the RDF import pipeline.

Definitive negative server answers (zero triples with an explanation) are not
exceptions; they are returned as failed results. Everything below signals a
fault the caller has to handle.
"""

from typing import Optional


class RDFImportError(Exception):
    """Base class for all import pipeline errors."""
    pass


class PathError(RDFImportError):
    """Raised when a local path cannot be turned into an absolute path."""
    pass


class ImportFailedError(RDFImportError):
    """
    Raised when a file could not be imported within the retry budget.

    Attributes:
        attempts: Number of attempts that were made
        last_error: The last driver/server error seen, if any
    """

    def __init__(self, message: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class ImportResultError(RDFImportError):
    """Raised when the import procedure returns an unexpected result shape."""
    pass


class DatabaseInitError(RDFImportError):
    """Raised when database initialization (wipe, n10s config, constraint) fails."""
    pass


class ShaclError(RDFImportError):
    """Base class for SHACL validation run failures."""
    pass


class ConstraintsLoadError(ShaclError):
    """Raised when the SHACL shapes file could not be fetched or parsed by the server."""

    def __init__(self, message: str = "failed to load constraints file"):
        super().__init__(message)


class ShaclValidationError(ShaclError):
    """
    Raised when the graph does not conform to the loaded shapes.

    Attributes:
        violations: Every violation record produced by the validation run
    """

    def __init__(self, violations: list, message: str = "SHACL validation failed"):
        super().__init__(message)
        self.violations = violations

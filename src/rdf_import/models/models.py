#!/usr/bin/env python3

from enum import Enum
from typing import Any

from pydantic import BaseModel

# Pydantic Models


class ImportStatus(str, Enum):
    SUCCESS = "success"  # triples were loaded
    FAILED = "failed"  # server answered definitively with zero triples
    ERROR = "error"  # no definitive answer (retries exhausted, bad result shape, bad path)


class FileImportResult(BaseModel):
    """Outcome of importing one Turtle file."""

    filename: str
    file_uri: str | None = None
    status: ImportStatus
    message: str
    triples_loaded: int = 0
    attempts: int = 0

    @property
    def success(self) -> bool:
        return self.status == ImportStatus.SUCCESS


class ShaclViolation(BaseModel):
    """One row yielded by n10s.validation.shacl.validate()."""

    focus_node: Any = None
    node_type: Any = None
    offending_value: Any = None
    result_path: Any = None
    message: Any = None
    severity: Any = None


class ValidationStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


class ValidationReport(BaseModel):
    """SHACL validation report for one run."""

    status: ValidationStatus
    message: str
    schema_file: str
    violations: list[ShaclViolation] = []

    @property
    def passed(self) -> bool:
        return self.status == ValidationStatus.PASS


class ImportRunReport(BaseModel):
    """Everything one run produced, in processing order."""

    input_dir: str
    results: list[FileImportResult] = []
    validation: ValidationReport | None = None

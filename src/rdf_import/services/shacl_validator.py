#!/usr/bin/env python3
"""
SHACL validation of the imported graph through the n10s validation procedures.

A run is three steps, each in its own session and none retried:

1. drop any shapes left over from a previous run
2. load the shapes from the schema file
3. validate, draining every violation row before deciding pass/fail
"""

import logging
from typing import Iterable, Iterator, Optional

from neo4j import Record, Session

from ..clients.neo4j_client import Neo4jClient
from ..core.exceptions import ConstraintsLoadError, ShaclValidationError
from ..models.models import ShaclViolation, ValidationReport, ValidationStatus
from .path_resolver import resolve_file_uri
from .rdf_loader import RDF_FORMAT

logger = logging.getLogger(__name__)

DROP_SHAPES_QUERY = "CALL n10s.validation.shacl.dropShapes()"
IMPORT_SHAPES_QUERY = "CALL n10s.validation.shacl.import.fetch($file_uri, $format)"
VALIDATE_QUERY = (
    "CALL n10s.validation.shacl.validate() "
    "YIELD focusNode, nodeType, offendingValue, resultPath, resultMessage, severity"
)


def iter_violations(records: Iterable[Record]) -> Iterator[ShaclViolation]:
    """Lazily convert validate() rows into ShaclViolation models."""
    for record in records:
        yield ShaclViolation(
            focus_node=record["focusNode"],
            node_type=record["nodeType"],
            offending_value=record["offendingValue"],
            result_path=record["resultPath"],
            message=record["resultMessage"],
            severity=record["severity"],
        )


def _drop_shapes(session: Session):
    session.run(DROP_SHAPES_QUERY).consume()


def _load_shapes(session: Session, file_uri: str) -> bool:
    """Returns False when the server produced no rows for the shapes import."""
    result = session.run(IMPORT_SHAPES_QUERY, {"file_uri": file_uri, "format": RDF_FORMAT})
    loaded = result.peek() is not None
    result.consume()
    return loaded


def _collect_violations(session: Session) -> list[ShaclViolation]:
    violations = []
    for violation in iter_violations(session.run(VALIDATE_QUERY)):
        logger.error(f"Validation error: {violation.message}")
        violations.append(violation)
    return violations


def validate_graph(
    client: Neo4jClient,
    schema_file: str,
    container_mount: Optional[str] = None
) -> ValidationReport:
    """
    Validate the current graph against the SHACL shapes in ``schema_file``.

    Args:
        client: Connected Neo4j client
        schema_file: Local path of the Turtle shapes file
        container_mount: Directory under which the server sees the file, if different

    Returns:
        ValidationReport with status PASS

    Raises:
        PathError: If the schema path cannot be resolved
        ConstraintsLoadError: If the server could not load the shapes file;
            validation is not run
        ShaclValidationError: If at least one violation was reported; carries
            every violation
        neo4j.exceptions.Neo4jError / DriverError: On connectivity or server
            errors, unretried
    """
    client.with_session(_drop_shapes)
    logger.info("Dropped previously loaded SHACL shapes")

    file_uri = resolve_file_uri(schema_file, container_mount)
    if not client.with_session(lambda session: _load_shapes(session, file_uri)):
        raise ConstraintsLoadError()
    logger.info(f"Loaded SHACL shapes from {file_uri}")

    violations = client.with_session(_collect_violations)
    if violations:
        raise ShaclValidationError(violations)

    return ValidationReport(
        status=ValidationStatus.PASS,
        message="Validation passed",
        schema_file=schema_file,
    )

#!/usr/bin/env python3
"""
Import a single Turtle file into Neo4j through n10s.rdf.import.fetch.

Each attempt runs in its own session and ends in one of three states:

- SUCCESS: the server loaded at least one triple
- DEFINITE_FAILURE: zero triples, and the server explained why (extraInfo)
- RETRYABLE: the call failed at the driver/server level, or the server
  answered with zero triples and no explanation

Only RETRYABLE consumes another attempt. Driver errors back off for a fixed
second between attempts; ambiguous answers retry immediately.
"""

import logging
import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from neo4j import Session
from neo4j.exceptions import DriverError, Neo4jError, ResultNotSingleError

from ..clients.neo4j_client import Neo4jClient
from ..core.exceptions import ImportFailedError, ImportResultError
from ..models.models import FileImportResult, ImportStatus
from .path_resolver import resolve_file_uri

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
RETRY_BACKOFF_SECONDS = 1.0
RDF_FORMAT = "Turtle"
NODE_CACHE_SIZE = 15000

IMPORT_QUERY = "CALL n10s.rdf.import.fetch($file_uri, $format, {nodeCacheSize: $node_cache_size})"


class AttemptStatus(Enum):
    SUCCESS = "success"
    DEFINITE_FAILURE = "definite_failure"
    RETRYABLE = "retryable"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of one import attempt."""

    status: AttemptStatus
    triples_loaded: int = 0
    message: str = ""
    error: Optional[BaseException] = None


def interpret_import_record(data: dict[str, Any]) -> AttemptOutcome:
    """Classify the single record returned by n10s.rdf.import.fetch.

    Args:
        data: Record fields, at least ``triplesLoaded`` and usually ``extraInfo``

    Returns:
        SUCCESS for a positive integer count, DEFINITE_FAILURE when an
        ``extraInfo`` value is present, RETRYABLE otherwise
    """
    triples_loaded = data.get("triplesLoaded")
    if isinstance(triples_loaded, int) and not isinstance(triples_loaded, bool) and triples_loaded > 0:
        return AttemptOutcome(
            status=AttemptStatus.SUCCESS,
            triples_loaded=triples_loaded,
            message=f"{triples_loaded} triples loaded",
        )

    if data.get("extraInfo") is not None:
        return AttemptOutcome(
            status=AttemptStatus.DEFINITE_FAILURE,
            message=f"No triples loaded. Extra info: {data['extraInfo']}",
        )

    return AttemptOutcome(status=AttemptStatus.RETRYABLE)


def _fetch_import_record(session: Session, file_uri: str) -> dict[str, Any]:
    result = session.run(
        IMPORT_QUERY,
        {"file_uri": file_uri, "format": RDF_FORMAT, "node_cache_size": NODE_CACHE_SIZE},
    )
    try:
        record = result.single(strict=True)
    except ResultNotSingleError as e:
        raise ImportResultError(f"Import of {file_uri} did not return exactly one record: {e}") from e
    return record.data()


def _attempt_import(client: Neo4jClient, file_uri: str) -> AttemptOutcome:
    try:
        data = client.with_session(lambda session: _fetch_import_record(session, file_uri))
    except (Neo4jError, DriverError) as e:
        return AttemptOutcome(status=AttemptStatus.RETRYABLE, error=e)
    return interpret_import_record(data)


def load_triples(client: Neo4jClient, file_path: str, container_mount: Optional[str] = None) -> FileImportResult:
    """
    Import one Turtle file, retrying transient failures.

    Args:
        client: Connected Neo4j client
        file_path: Local path of the Turtle file
        container_mount: Directory under which the server sees the file, if different

    Returns:
        FileImportResult with status SUCCESS (triples loaded) or FAILED
        (server explained why nothing was loaded)

    Raises:
        PathError: If the file path cannot be resolved (not retried)
        ImportResultError: If the server returned an unexpected result shape (not retried)
        ImportFailedError: If no definitive answer was obtained within MAX_RETRIES attempts
    """
    filename = os.path.basename(file_path)
    last_error: Optional[BaseException] = None

    for attempt in range(1, MAX_RETRIES + 1):
        log_extra = {"file_name": filename, "attempt": attempt}
        file_uri = resolve_file_uri(file_path, container_mount)
        logger.debug(f"Importing {file_uri}", extra=log_extra)

        outcome = _attempt_import(client, file_uri)

        if outcome.status == AttemptStatus.SUCCESS:
            return FileImportResult(
                filename=filename,
                file_uri=file_uri,
                status=ImportStatus.SUCCESS,
                message=outcome.message,
                triples_loaded=outcome.triples_loaded,
                attempts=attempt,
            )

        if outcome.status == AttemptStatus.DEFINITE_FAILURE:
            return FileImportResult(
                filename=filename,
                file_uri=file_uri,
                status=ImportStatus.FAILED,
                message=outcome.message,
                attempts=attempt,
            )

        if outcome.error is not None:
            last_error = outcome.error
            logger.warning(f"Attempt {attempt}/{MAX_RETRIES} failed: {outcome.error}", extra=log_extra)
            if attempt < MAX_RETRIES:
                time.sleep(RETRY_BACKOFF_SECONDS)
        else:
            logger.warning(
                f"Attempt {attempt}/{MAX_RETRIES} loaded no triples and returned no extra info",
                extra=log_extra,
            )

    reason = last_error if last_error is not None else "no definitive response from server"
    raise ImportFailedError(
        f"failed after {MAX_RETRIES} attempts: {reason}",
        attempts=MAX_RETRIES,
        last_error=last_error,
    ) from last_error

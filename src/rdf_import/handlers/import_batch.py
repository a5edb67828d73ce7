#!/usr/bin/env python3

import glob
import logging
import os

from neo4j.exceptions import DriverError, Neo4jError

from ..clients.neo4j_client import Neo4jClient
from ..core.config import ImportSettings
from ..core.exceptions import RDFImportError, ShaclValidationError
from ..models.models import (
    FileImportResult,
    ImportRunReport,
    ImportStatus,
    ValidationReport,
    ValidationStatus,
)
from ..services.graph_init import initialize_database
from ..services.rdf_loader import load_triples
from ..services.shacl_validator import validate_graph

logger = logging.getLogger(__name__)

TURTLE_GLOB = "*.ttl"


def discover_turtle_files(input_dir: str) -> list[str]:
    """Find the Turtle files directly under input_dir (non-recursive).

    Args:
        input_dir: Directory to scan

    Returns:
        Matching file paths, sorted by name
    """
    return sorted(glob.glob(os.path.join(glob.escape(input_dir), TURTLE_GLOB)))


def _import_single_file(client: Neo4jClient, file_path: str, container_mount: str | None) -> FileImportResult:
    """Import one file, turning any pipeline error into an ERROR result.

    Args:
        client: Connected Neo4j client
        file_path: Turtle file to import
        container_mount: Server-side mount directory, if any

    Returns:
        Result for this file; never raises for per-file failures
    """
    filename = os.path.basename(file_path)
    log_extra = {"file_name": filename}

    try:
        result = load_triples(client, file_path, container_mount)
    except RDFImportError as e:
        logger.error(f"❌ Error importing {filename}: {e}", extra=log_extra)
        return FileImportResult(filename=filename, status=ImportStatus.ERROR, message=str(e))

    if result.success:
        logger.info(f"✅ {filename}: {result.message}", extra=log_extra)
    else:
        logger.error(f"❌ {filename}: {result.message}", extra=log_extra)
    return result


def _run_validation(client: Neo4jClient, schema_file: str, container_mount: str | None) -> ValidationReport:
    """Run SHACL validation once and turn every failure into a report."""
    try:
        report = validate_graph(client, schema_file, container_mount)
    except ShaclValidationError as e:
        logger.error(f"❌ Validation failed: {e} ({len(e.violations)} violation(s))")
        return ValidationReport(
            status=ValidationStatus.FAIL,
            message=str(e),
            schema_file=schema_file,
            violations=e.violations,
        )
    except (RDFImportError, Neo4jError, DriverError) as e:
        logger.error(f"❌ Validation failed: {e}")
        return ValidationReport(status=ValidationStatus.ERROR, message=str(e), schema_file=schema_file)

    logger.info("✅ Validation passed")
    return report


def run_import(client: Neo4jClient, input_dir: str, settings: ImportSettings) -> ImportRunReport:
    """
    Import every Turtle file in input_dir, then optionally validate the graph.

    Files are imported one at a time. A failure on one file is logged and
    recorded, and the batch moves on to the next file. Validation runs at
    most once, after all imports.

    Args:
        client: Connected Neo4j client
        input_dir: Directory containing the .ttl files
        settings: Run settings (initialize flag, schema file, container mount)

    Returns:
        ImportRunReport with one result per discovered file and the
        validation report when a schema file was configured

    Raises:
        DatabaseInitError: If initialization was requested and failed
    """
    report = ImportRunReport(input_dir=input_dir)

    if settings.initialize:
        initialize_database(client)

    files = discover_turtle_files(input_dir)
    if not files:
        logger.info(f"No .ttl files found in {input_dir}")
        return report

    logger.info(f"Importing {len(files)} file(s) from {input_dir}")
    for file_path in files:
        report.results.append(_import_single_file(client, file_path, settings.container_mount))

    if settings.validation_enabled:
        report.validation = _run_validation(client, settings.schema_file, settings.container_mount)

    return report

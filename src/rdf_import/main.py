#!/usr/bin/env python3
"""
rdf-import command line entry point.

Usage:
    rdf-import [--neo4j-uri URI] [--username USER] [--password PASS]
               [--database NAME] [--schema-file SHAPES.ttl]
               [--container-mount DIR] [--no-initialize] INPUT_DIR

Only setup failures (bad arguments, unreachable database, failed
initialization) produce a non-zero exit status. Per-file import failures and
SHACL validation failures are logged and the process still exits 0.
"""

import argparse
import logging
import os
import sys

from neo4j.exceptions import DriverError, Neo4jError

from .clients.neo4j_client import Neo4jClient
from .core.config import ImportSettings
from .core.exceptions import DatabaseInitError
from .core.logging import setup_logging
from .handlers.import_batch import run_import

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdf-import",
        description="Import RDF/Turtle files into Neo4j",
    )
    parser.add_argument("input_dir", help="Directory containing the .ttl files to import")
    parser.add_argument("--neo4j-uri", help="Neo4j database URI (default: NEO4J_URI env or bolt://localhost:7687)")
    parser.add_argument("--username", help="Neo4j username (default: NEO4J_USER env or neo4j)")
    parser.add_argument("--password", help="Neo4j password (default: NEO4J_PASSWORD env or password)")
    parser.add_argument("--database", help="Neo4j database name (default: NEO4J_DATABASE env or server default)")
    parser.add_argument(
        "--schema-file",
        help="Path to SHACL constraints file for validation. If not provided, validation will be skipped",
    )
    parser.add_argument(
        "--container-mount",
        help="Path where the triples are mounted in the Neo4j container. "
             "If provided, this path will be used instead of the local file path",
    )
    parser.add_argument(
        "--initialize",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Initialize database before import (default: RDF_INITIALIZE env or true)",
    )
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL env or INFO)")
    return parser


def settings_from_args(args: argparse.Namespace) -> ImportSettings:
    """Build run settings, letting explicit flags win over the environment."""
    return ImportSettings(
        neo4j_uri=args.neo4j_uri,
        username=args.username,
        password=args.password,
        database=args.database,
        schema_file=args.schema_file,
        container_mount=args.container_mount,
        initialize=args.initialize,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Run one import; returns the process exit status."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings.log_level)
    logger.debug(f"Running with {settings!r}")

    if not os.path.isdir(args.input_dir):
        logger.critical(f"Input directory not found: {args.input_dir}")
        return 1

    try:
        client = Neo4jClient(settings.neo4j_uri, settings.username, settings.password, settings.database)
    except (ValueError, DriverError) as e:
        logger.critical(f"Invalid Neo4j connection settings: {e}")
        return 1

    with client:
        try:
            client.verify_connectivity()
        except (Neo4jError, DriverError) as e:
            logger.critical(f"Failed to connect to Neo4j at {settings.neo4j_uri}: {e}")
            return 1

        try:
            run_import(client, args.input_dir, settings)
        except DatabaseInitError as e:
            logger.critical(str(e))
            return 1

    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

#!/usr/bin/env python3
"""
Configuration settings for the RDF import run.

Every value can be supplied explicitly (the CLI does this for flags the user
passed) and otherwise falls back to an environment variable, then to a
built-in default.
"""

from typing import Optional

from .env_utils import getenv_bool, getenv_clean, getenv_optional


DEFAULT_NEO4J_URI = "bolt://localhost:7687"
DEFAULT_NEO4J_USER = "neo4j"
DEFAULT_NEO4J_PASSWORD = "password"
DEFAULT_LOG_LEVEL = "INFO"


class ImportSettings:
    """Connection and behaviour settings for one import run.

    Environment Variables:
        - NEO4J_URI: Database connection URI (default: bolt://localhost:7687)
        - NEO4J_USER: Authentication username (default: neo4j)
        - NEO4J_PASSWORD: Authentication password (default: password)
        - NEO4J_DATABASE: Target database name (default: server default)
        - RDF_SCHEMA_FILE: SHACL shapes file; validation is skipped when unset
        - RDF_CONTAINER_MOUNT: Directory under which the Neo4j server sees the
          input files; local absolute paths are used when unset
        - RDF_INITIALIZE: Wipe and configure the database before import (default: true)
        - LOG_LEVEL: Logging level (default: INFO)
    """

    def __init__(
        self,
        neo4j_uri: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        schema_file: Optional[str] = None,
        container_mount: Optional[str] = None,
        initialize: Optional[bool] = None,
        log_level: Optional[str] = None,
    ):
        self.neo4j_uri = neo4j_uri or getenv_clean("NEO4J_URI", DEFAULT_NEO4J_URI)
        self.username = username if username is not None else getenv_clean("NEO4J_USER", DEFAULT_NEO4J_USER)
        self.password = password if password is not None else getenv_clean("NEO4J_PASSWORD", DEFAULT_NEO4J_PASSWORD)
        self.database = database or getenv_optional("NEO4J_DATABASE")
        self.schema_file = schema_file or getenv_optional("RDF_SCHEMA_FILE")
        self.container_mount = container_mount or getenv_optional("RDF_CONTAINER_MOUNT")
        self.initialize = getenv_bool("RDF_INITIALIZE", True) if initialize is None else initialize
        self.log_level = (log_level or getenv_clean("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()

    @property
    def validation_enabled(self) -> bool:
        """True when a SHACL shapes file was configured."""
        return bool(self.schema_file)

    def __repr__(self) -> str:
        # password is never rendered
        return (
            f"ImportSettings(neo4j_uri={self.neo4j_uri!r}, username={self.username!r}, "
            f"database={self.database!r}, schema_file={self.schema_file!r}, "
            f"container_mount={self.container_mount!r}, initialize={self.initialize!r})"
        )

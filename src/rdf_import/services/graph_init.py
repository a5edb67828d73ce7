#!/usr/bin/env python3

import logging

from neo4j import Session
from neo4j.exceptions import DriverError, Neo4jError

from ..clients.neo4j_client import Neo4jClient
from ..core.exceptions import DatabaseInitError

logger = logging.getLogger(__name__)

# Executed in order, each one safe to repeat
INIT_STATEMENTS = [
    "MATCH (n) DETACH DELETE n",
    "CALL n10s.graphconfig.init({handleVocabUris: 'IGNORE'})",
    "CREATE CONSTRAINT n10s_unique_uri IF NOT EXISTS FOR (r:Resource) REQUIRE r.uri IS UNIQUE",
]


def _run_init_statements(session: Session):
    for statement in INIT_STATEMENTS:
        session.run(statement).consume()
        logger.debug(f"Executed init statement: {statement}")


def initialize_database(client: Neo4jClient):
    """
    Wipe the graph and prepare it for n10s RDF import.

    Deletes every node and relationship, initialises the n10s graph config
    with vocabulary URIs ignored, and ensures the Resource.uri uniqueness
    constraint n10s requires.

    Raises:
        DatabaseInitError: If any statement fails
    """
    try:
        client.with_session(_run_init_statements)
    except (Neo4jError, DriverError) as e:
        raise DatabaseInitError(f"failed to initialize database: {e}") from e
    logger.info("Database initialized")

#!/usr/bin/env python3
"""
Neo4j Database Client

A low-level client wrapper around a single Neo4j driver.
Handles connection management and scoped session execution.

This client is pure infrastructure - it contains no import or validation logic.
Use the services layer for the n10s procedure workflows built on top of it.
"""

import logging
from typing import Callable, Optional, TypeVar

from neo4j import GraphDatabase, Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Neo4jClient:
    """
    Neo4j database client owning one driver for the lifetime of a run.

    Every unit of work gets its own short-lived session through
    ``with_session``; sessions are never reused or shared.

    Example:
        ```python
        with Neo4jClient("bolt://localhost:7687", "neo4j", "password") as client:
            client.verify_connectivity()
            count = client.with_session(
                lambda session: session.run("MATCH (n) RETURN count(n) AS c").single()["c"]
            )
        ```
    """

    def __init__(self, uri: str, user: str = None, password: str = None, database: Optional[str] = None):
        """
        Initialize Neo4j client with connection parameters.

        Basic authentication is used only when both user and password are
        non-empty; otherwise the driver connects without credentials.

        Args:
            uri: Database connection URI
            user: Authentication username
            password: Authentication password
            database: Target database name, or None for the server default
        """
        self.uri = uri
        self.user = user
        self.password = password
        self.database = database

        auth = (user, password) if user and password else None
        self.driver = GraphDatabase.driver(self.uri, auth=auth)

    def verify_connectivity(self):
        """
        Check that the server is reachable with the configured credentials.

        Raises:
            neo4j.exceptions.ServiceUnavailable: If cannot connect to database
            neo4j.exceptions.AuthError: If the credentials are rejected
        """
        self.driver.verify_connectivity()
        logger.info(f"Connected to Neo4j at {self.uri}")

    def with_session(self, fn: Callable[[Session], T]) -> T:
        """
        Run ``fn`` against a fresh session and return its result.

        The session is closed on every exit path, including when ``fn`` raises.
        Results must be consumed inside ``fn``; a neo4j result is not usable
        once its session is closed.

        Args:
            fn: Callable receiving the open session

        Returns:
            Whatever ``fn`` returns

        Raises:
            Any exception raised by the driver or by ``fn``
        """
        if self.database:
            session_ctx = self.driver.session(database=self.database)
        else:
            session_ctx = self.driver.session()

        with session_ctx as session:
            return fn(session)

    def close(self):
        """Close the driver connection and release resources."""
        if self.driver:
            self.driver.close()

    def __enter__(self) -> "Neo4jClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

#!/usr/bin/env python3
"""Shared fixtures: a fake Neo4j client whose sessions are MagicMocks."""

from unittest.mock import MagicMock

import pytest

from rdf_import.clients.neo4j_client import Neo4jClient


def make_import_result(fields):
    """Mock neo4j Result whose single() record carries the given fields."""
    mock_record = MagicMock()
    mock_record.data.return_value = dict(fields)
    mock_result = MagicMock()
    mock_result.single.return_value = mock_record
    return mock_result


def make_violation_record(message, focus_node="http://example.org/a", severity="http://www.w3.org/ns/shacl#Violation"):
    """Row as yielded by n10s.validation.shacl.validate()."""
    return {
        "focusNode": focus_node,
        "nodeType": "Resource",
        "offendingValue": None,
        "resultPath": "http://example.org/name",
        "resultMessage": message,
        "severity": severity,
    }


@pytest.fixture
def mock_session():
    """Mock neo4j session"""
    return MagicMock()


@pytest.fixture
def mock_client(mock_session):
    """Neo4jClient stand-in that runs every unit of work on mock_session"""
    client = MagicMock(spec=Neo4jClient)
    client.with_session.side_effect = lambda fn: fn(mock_session)
    return client


@pytest.fixture
def import_result():
    """Factory fixture for import procedure results"""
    return make_import_result


@pytest.fixture
def violation_record():
    """Factory fixture for SHACL violation rows"""
    return make_violation_record

#!/usr/bin/env python3
"""Tests for import settings and environment helpers."""

import os
from unittest.mock import patch

from rdf_import.core.config import ImportSettings
from rdf_import.core.env_utils import getenv_bool, getenv_clean, getenv_optional


class TestImportSettings:
    """Test suite for import settings."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_values(self):
        """Test that default values are set correctly."""
        settings = ImportSettings()

        assert settings.neo4j_uri == "bolt://localhost:7687"
        assert settings.username == "neo4j"
        assert settings.password == "password"
        assert settings.database is None
        assert settings.schema_file is None
        assert settings.container_mount is None
        assert settings.initialize is True
        assert settings.log_level == "INFO"
        assert not settings.validation_enabled

    @patch.dict(os.environ, {
        'NEO4J_URI': 'neo4j://db:7687',
        'NEO4J_USER': 'loader',
        'NEO4J_PASSWORD': 'secret\r\n',
        'NEO4J_DATABASE': 'rdf',
        'RDF_SCHEMA_FILE': '/schemas/shapes.ttl',
        'RDF_CONTAINER_MOUNT': '/import',
        'RDF_INITIALIZE': 'false',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_environment_variable_override(self):
        """Test that environment variables override defaults."""
        settings = ImportSettings()

        assert settings.neo4j_uri == "neo4j://db:7687"
        assert settings.username == "loader"
        assert settings.password == "secret"
        assert settings.database == "rdf"
        assert settings.schema_file == "/schemas/shapes.ttl"
        assert settings.container_mount == "/import"
        assert settings.initialize is False
        assert settings.log_level == "DEBUG"
        assert settings.validation_enabled

    @patch.dict(os.environ, {'NEO4J_URI': 'neo4j://db:7687', 'RDF_INITIALIZE': 'false'}, clear=True)
    def test_explicit_values_win(self):
        """Test that explicit arguments override the environment."""
        settings = ImportSettings(neo4j_uri="bolt://other:7687", initialize=True)

        assert settings.neo4j_uri == "bolt://other:7687"
        assert settings.initialize is True

    @patch.dict(os.environ, {'NEO4J_USER': 'loader'}, clear=True)
    def test_empty_username_is_kept(self):
        """Test an explicit empty username is not replaced by the environment."""
        settings = ImportSettings(username="")

        assert settings.username == ""

    @patch.dict(os.environ, {'RDF_SCHEMA_FILE': '', 'RDF_CONTAINER_MOUNT': '  '}, clear=True)
    def test_empty_optional_paths_are_unset(self):
        """Test empty optional paths behave like absent ones."""
        settings = ImportSettings()

        assert settings.schema_file is None
        assert settings.container_mount is None

    @patch.dict(os.environ, {}, clear=True)
    def test_repr_hides_password(self):
        settings = ImportSettings(password="top-secret")

        assert "top-secret" not in repr(settings)


class TestEnvUtils:
    """Test suite for environment variable helpers."""

    @patch.dict(os.environ, {'KEY': 'value\r\n'}, clear=True)
    def test_getenv_clean_strips_line_endings(self):
        assert getenv_clean("KEY") == "value"

    @patch.dict(os.environ, {}, clear=True)
    def test_getenv_clean_default(self):
        assert getenv_clean("MISSING", "fallback") == "fallback"
        assert getenv_clean("MISSING") is None

    @patch.dict(os.environ, {'KEY': ''}, clear=True)
    def test_getenv_optional_empty_is_none(self):
        assert getenv_optional("KEY") is None

    @patch.dict(os.environ, {'YES': 'Yes', 'OFF': 'off', 'ODD': 'maybe'}, clear=True)
    def test_getenv_bool(self):
        assert getenv_bool("YES") is True
        assert getenv_bool("OFF", True) is False
        assert getenv_bool("ODD", True) is True
        assert getenv_bool("MISSING", True) is True

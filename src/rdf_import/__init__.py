"""Batch import of RDF/Turtle files into Neo4j with optional SHACL validation."""

__version__ = "0.1.0"

"""Day 1 exercises - small pure text and sequence utilities."""

__version__ = "0.1.0"

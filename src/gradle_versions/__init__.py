"""Gradle version parsing, ordering and published-version catalog lookup."""

__version__ = "0.1.0"

# hide/__init__.py

"""Redact configured sensitive fields from JSON documents."""

__version__ = "0.3.0"

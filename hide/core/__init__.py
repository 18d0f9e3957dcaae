# hide/core/__init__.py

"""Core domain models and utilities used across the hide tool.

This package provides domain types, exceptions, placeholder constants and
the persisted key configuration loader shared by the rest of the application.
"""

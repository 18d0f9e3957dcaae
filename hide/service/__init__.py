# hide/service/__init__.py

"""Service layer wiring settings, documents and the engine together."""

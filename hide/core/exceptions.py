# hide/core/exceptions.py

"""Custom exception hierarchy for the hide tool.

Key store errors are recoverable and reported per key. Configuration and
document errors are fatal to the run and surface at the command line.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class RedactionError(Exception):
    """Base exception for all application-specific errors."""

    pass


class KeyStorageError(RedactionError):
    """Raised when a single key cannot be added to or removed from storage."""

    pass


class KeyAlreadyExists(KeyStorageError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' already exists in storage")


class KeyNotFound(KeyStorageError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' not found in storage")


class EmptyKeyRejected(KeyStorageError):
    def __init__(self):
        self.key = ""
        super().__init__("Can't save empty key")


class ConfigurationError(RedactionError):
    """Raised when configuration loading or storing fails."""

    def __init__(self, message: str, path: PathLike):
        self.path = Path(path)
        super().__init__(message)


class ConfigLoadFailed(ConfigurationError):
    """Raised when the persisted key configuration cannot be read."""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"could not load config '{path}': {reason}", path)


class ConfigStoreFailed(ConfigurationError):
    """Raised when the key configuration cannot be written back."""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"could not store config '{path}': {reason}", path)


class DocumentError(RedactionError):
    """Raised when a JSON document cannot be read, parsed or written."""

    def __init__(self, message: str, path: PathLike):
        self.path = Path(path)
        super().__init__(message)


class InputReadFailed(DocumentError):
    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"could not read file '{path}': {reason}", path)


class InputParseFailed(DocumentError):
    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"could not parse file '{path}': {reason}", path)


class OutputWriteFailed(DocumentError):
    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"could not write file '{path}': {reason}", path)


class DocumentTooDeep(DocumentError):
    """Raised when a redacted document is nested too deeply to serialize."""

    def __init__(self, path: PathLike):
        super().__init__(
            f"could not serialize file '{path}': document is nested too deeply", path
        )

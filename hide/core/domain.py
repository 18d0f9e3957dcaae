# hide/core/domain.py

"""Domain models for key store mutations and redaction results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field, field_validator


class KeysConfig(BaseModel):
    """Persisted configuration record holding the keys to redact.

    Attributes:
        sensitive_keys: Key names whose values get hidden. A missing or
            null entry in the file is read as an empty set.
    """

    sensitive_keys: Set[str] = Field(default_factory=set)

    @field_validator("sensitive_keys", mode="before")
    @classmethod
    def default_when_null(cls, v: Any) -> Any:
        """Treat an explicit null as no keys configured."""
        return set() if v is None else v

    @field_validator("sensitive_keys")
    @classmethod
    def reject_empty_keys(cls, v: Set[str]) -> Set[str]:
        if "" in v:
            raise ValueError("empty key is not allowed")
        return v


@dataclass
class KeyChange:
    """Outcome of adding or removing a single key.

    Attributes:
        key: Key name the change was applied to
        action: Either "add" or "remove"
        error: Human-readable failure reason, None on success
    """

    key: str
    action: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RedactedField:
    """A single location whose value was replaced by a placeholder.

    Attributes:
        path: Slash-separated location of the value, e.g. /users/0/password
        key: Matched key name
        kind: JSON kind of the replaced value (see ValueKind)
    """

    path: str
    key: str
    kind: str


@dataclass
class RedactionResult:
    """Result object returned by the redaction engine.

    Attributes:
        original: Parsed input document, left untouched
        redacted: New document with matched values replaced
        fields: Every location that was redacted, in traversal order
        metadata: Additional processing information
    """

    original: Any
    redacted: Any
    fields: List[RedactedField] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

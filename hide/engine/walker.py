# hide/engine/walker.py

"""Redaction of sensitive keys in parsed JSON documents."""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from hide.core.definitions import Placeholder, ValueKind
from hide.core.domain import RedactedField, RedactionResult
from hide.engine.keys import KeysStorage

logger = logging.getLogger(__name__)


def value_kind(value: Any) -> str:
    """Returns the JSON kind name of a parsed value.

    bool is checked before numbers since it subclasses int.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


_PLACEHOLDERS = {
    ValueKind.BOOL: Placeholder.BOOL,
    ValueKind.NUMBER: Placeholder.NUMBER,
    ValueKind.STRING: Placeholder.STRING,
    ValueKind.ARRAY: Placeholder.ARRAY,
    ValueKind.OBJECT: Placeholder.OBJECT,
}


def placeholder_for(value: Any) -> Any:
    """Returns the marker that replaces a redacted value.

    null stays null; every other kind maps to a string tag.
    """
    if value is None:
        return None
    return _PLACEHOLDERS[value_kind(value)]


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def _entries(node: Any) -> Iterator[Tuple[Any, Any]]:
    return iter(node.items()) if isinstance(node, dict) else enumerate(node)


def _walk(
    document: Any,
    store: KeysStorage,
    found: Optional[List[RedactedField]],
) -> Any:
    # Explicit stack of open containers; nesting depth is not limited by the
    # interpreter recursion limit. Visiting order is depth-first, pre-order.
    if not isinstance(document, (dict, list)):
        return document

    root = {} if isinstance(document, dict) else []
    stack = [(_entries(document), root, "")]

    while stack:
        entries, out, path = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        key, value = entry
        child_path = f"{path}/{_escape(key) if isinstance(out, dict) else key}"

        if isinstance(out, dict) and store.contains(key):
            # Matched values are replaced wholesale, never descended into
            out[key] = placeholder_for(value)
            if found is not None and value is not None:
                found.append(
                    RedactedField(path=child_path, key=key, kind=value_kind(value))
                )
            continue

        if isinstance(value, (dict, list)):
            child = {} if isinstance(value, dict) else []
            stack.append((_entries(value), child, child_path))
            value = child

        if isinstance(out, dict):
            out[key] = value
        else:
            out.append(value)

    return root


def redact(document: Any, store: KeysStorage) -> Any:
    """Returns a copy of document with the values of stored keys hidden.

    Args:
        document: Parsed JSON value (dict, list or scalar)
        store: Keys whose values get replaced

    Returns:
        New value tree with the same shape and key order. The input is not
        modified. Top-level scalars are returned unchanged.
    """
    return _walk(document, store, None)


class RedactionEngine:
    """Applies a key store to documents and reports what was hidden."""

    def __init__(self, store: KeysStorage):
        self.store = store

    def process(self, document: Any) -> RedactionResult:
        """Redacts a document and records every replaced location.

        Args:
            document: Parsed JSON value

        Returns:
            RedactionResult holding both trees and the redacted fields
        """
        found: List[RedactedField] = []
        redacted = _walk(document, self.store, found)

        logger.debug(
            "Document walked",
            extra={
                "redacted_count": len(found),
                "root_kind": value_kind(document),
            },
        )

        return RedactionResult(
            original=document,
            redacted=redacted,
            fields=found,
            metadata={"redacted_count": len(found), "root_kind": value_kind(document)},
        )

# hide/engine/keys.py

"""Storage for the names of keys whose values must be hidden."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Set

from hide.core.domain import KeyChange
from hide.core.exceptions import (
    EmptyKeyRejected,
    KeyAlreadyExists,
    KeyNotFound,
    KeyStorageError,
)

logger = logging.getLogger(__name__)

ADD = "add"
REMOVE = "remove"

_PAST = {ADD: "added", REMOVE: "removed"}


class KeysStorage(ABC):
    """A set of case-sensitive key names with put/remove/contains/all."""

    @abstractmethod
    def put(self, key: str) -> None:
        """Stores a key.

        Raises:
            EmptyKeyRejected: If key is the empty string
            KeyAlreadyExists: If key is already stored
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Deletes a key.

        Raises:
            KeyNotFound: If key is not stored
        """
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Exact membership test, no normalization applied."""
        pass

    @abstractmethod
    def all(self) -> Set[str]:
        """Returns a snapshot of every stored key."""
        pass


class InMemoryKeysStorage(KeysStorage):
    """KeysStorage backed by a plain set."""

    def __init__(self, keys: Optional[Iterable[str]] = None):
        self._keys: Set[str] = set(keys) if keys else set()
        if "" in self._keys:
            raise EmptyKeyRejected()

    def put(self, key: str) -> None:
        if not key:
            raise EmptyKeyRejected()
        if key in self._keys:
            raise KeyAlreadyExists(key)
        self._keys.add(key)

    def remove(self, key: str) -> None:
        try:
            self._keys.remove(key)
        except KeyError:
            raise KeyNotFound(key) from None

    def contains(self, key: str) -> bool:
        return key in self._keys

    def all(self) -> Set[str]:
        return set(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._keys))

    def __repr__(self):
        return f"<InMemoryKeysStorage keys={len(self._keys)}>"


def _apply(store: KeysStorage, keys: Iterable[str], action: str) -> List[KeyChange]:
    operation = store.put if action == ADD else store.remove
    changes: List[KeyChange] = []

    for key in keys:
        try:
            operation(key)
        except KeyStorageError as e:
            logger.warning(f"Failed to {action} key: {e}", extra={"key": key})
            changes.append(KeyChange(key=key, action=action, error=str(e)))
        else:
            logger.info(f"Key '{key}' {_PAST[action]}", extra={"key": key})
            changes.append(KeyChange(key=key, action=action))

    return changes


def add_keys(store: KeysStorage, keys: Iterable[str]) -> List[KeyChange]:
    """Adds each key individually, collecting per-key outcomes.

    A failing key is logged and recorded; the rest of the batch still runs.
    """
    return _apply(store, keys, ADD)


def remove_keys(store: KeysStorage, keys: Iterable[str]) -> List[KeyChange]:
    """Removes each key individually, collecting per-key outcomes."""
    return _apply(store, keys, REMOVE)


def apply_key_changes(
    store: KeysStorage,
    add: Iterable[str] = (),
    remove: Iterable[str] = (),
) -> List[KeyChange]:
    """Applies all additions, then all removals."""
    return add_keys(store, add) + remove_keys(store, remove)

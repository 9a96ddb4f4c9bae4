"""Conversation state stores.

The navigator only needs a single slot per conversation, but stores are
plain key-value bags so hosts can share them with other per-conversation
data.
"""

import logging
import threading
from collections.abc import MutableMapping
from typing import Any

logger = logging.getLogger(__name__)


class DictStateStore:
    """IStateStore view over a host-owned mutable mapping."""

    def __init__(self, mapping: MutableMapping[str, Any] | None = None) -> None:
        self._data: MutableMapping[str, Any] = mapping if mapping is not None else {}

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the stored values."""
        return dict(self._data)


class InMemoryStateStore:
    """Process-local state for many conversations, keyed by conversation id.

    Each conversation gets its own bag. The registry of bags is guarded by a
    lock; access within a single conversation is expected to be serialized by
    the host.
    """

    def __init__(self) -> None:
        self._bags: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def for_conversation(self, conversation_id: str) -> DictStateStore:
        """Get the state store of a conversation, creating it on first use."""
        with self._lock:
            bag = self._bags.get(conversation_id)
            if bag is None:
                logger.debug(f"Creating state for conversation '{conversation_id}'")
                bag = {}
                self._bags[conversation_id] = bag
        return DictStateStore(bag)

    def drop(self, conversation_id: str) -> None:
        """Forget all state of a conversation."""
        with self._lock:
            self._bags.pop(conversation_id, None)

    def conversation_ids(self) -> list[str]:
        with self._lock:
            return list(self._bags)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bags)

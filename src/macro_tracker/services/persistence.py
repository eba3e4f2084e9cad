"""Key-value persistence for store state."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import TypeAdapter

_logger = logging.getLogger(__name__)


class StateStore(Protocol):
    """Persistence interface holding one serialized blob per key."""

    def load(self, key: str) -> bytes | None:
        """Return the blob stored under a key, if any."""

    def save(self, key: str, value: bytes) -> None:
        """Store a blob under a key, replacing any previous value."""


@dataclass
class InMemoryStateStore(StateStore):
    """Process-local state store."""

    _blobs: dict[str, bytes]

    def __init__(self) -> None:
        self._blobs = {}

    def load(self, key: str) -> bytes | None:
        """Return the stored blob for a key."""
        return self._blobs.get(key)

    def save(self, key: str, value: bytes) -> None:
        """Store a blob for a key."""
        self._blobs[key] = value


@dataclass(frozen=True)
class StateCodec:
    """JSON codec binding a state type to its storage key."""

    key: str
    adapter: TypeAdapter[Any]

    @classmethod
    def for_type(cls, key: str, state_type: type) -> "StateCodec":
        """Build a codec for a dataclass state type."""
        return cls(key=key, adapter=TypeAdapter(state_type))

    def read(self, store: StateStore) -> Any | None:
        """Load and decode state; None when nothing usable can be read."""
        try:
            blob = store.load(self.key)
        except Exception:
            _logger.exception("Failed to load state: key=%s", self.key)
            return None
        if blob is None:
            return None
        try:
            return self.adapter.validate_json(blob)
        except ValueError:
            _logger.warning("Discarding unreadable state: key=%s", self.key)
            return None

    def write(self, store: StateStore, state: object) -> None:
        """Encode and save state, logging and skipping a failed save."""
        blob = self.adapter.dump_json(state)
        try:
            store.save(self.key, blob)
        except Exception:
            _logger.exception("Failed to save state: key=%s", self.key)

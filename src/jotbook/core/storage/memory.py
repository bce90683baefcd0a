"""In-process storage backend. Nothing survives the process."""

from .base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dict-backed key-value storage."""

    def __init__(self, initial: dict[str, str] | None = None, **config):
        super().__init__(**config)
        self._slots: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = value

from typing import Protocol


class KeyValueStoreProtocol(Protocol):
    """Interface for raw string persistence (last write wins)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

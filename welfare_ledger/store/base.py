"""Interface shared by document store implementations."""

from typing import Any, Iterable, Protocol


class DocumentStore(Protocol):
    """Keyed documents grouped in named collections."""

    def commit(self, collection: str, documents: list[tuple[str, dict]]) -> None:
        """Upsert ``(key, body)`` pairs atomically; raise ``StoreError`` on failure."""
        ...

    def find(self, collection: str, filters: dict[str, Any] | None = None) -> list[dict]:
        """Documents matching every equality filter, in store order."""
        ...

    def find_in(self, collection: str, field_name: str, values: Iterable[Any]) -> list[dict]:
        """Documents whose ``field_name`` is one of ``values``."""
        ...

    def close(self) -> None:
        """Release connections."""
        ...

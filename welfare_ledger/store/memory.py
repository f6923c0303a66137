"""In-memory document store for tests and dry runs."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from welfare_ledger.exceptions import StoreError


@dataclass
class InMemoryDocumentStore:
    """Dictionary-backed store with the same contract as the Mongo store.

    Collections keep insertion order; overwriting an existing key keeps its
    original position, like an upsert. Commits are all-or-nothing.
    """

    collections: dict[str, dict[str, dict]] = field(default_factory=dict)
    commits: int = 0
    reads: int = 0

    def commit(self, collection: str, documents: list[tuple[str, dict]]) -> None:
        """Atomically upsert ``(key, body)`` pairs, stamping ``createdAt``."""
        staged: dict[str, dict] = {}
        now = datetime.now(timezone.utc)
        for key, body in documents:
            if not key:
                raise StoreError(f"empty document key in {collection}")
            doc = copy.deepcopy(body)
            doc["_id"] = key
            doc["createdAt"] = now
            staged[key] = doc

        self.collections.setdefault(collection, {}).update(staged)
        self.commits += 1

    def find(self, collection: str, filters: dict[str, Any] | None = None) -> list[dict]:
        """Documents whose fields equal every value in ``filters``."""
        self.reads += 1
        filters = filters or {}
        return [
            copy.deepcopy(doc)
            for doc in self.collections.get(collection, {}).values()
            if all(doc.get(k) == v for k, v in filters.items())
        ]

    def find_in(self, collection: str, field_name: str, values: Iterable[Any]) -> list[dict]:
        """Documents whose ``field_name`` is one of ``values``."""
        self.reads += 1
        wanted = set(values)
        return [
            copy.deepcopy(doc)
            for doc in self.collections.get(collection, {}).values()
            if doc.get(field_name) in wanted
        ]

    def count(self, collection: str) -> int:
        """Number of documents in a collection."""
        return len(self.collections.get(collection, {}))

    def close(self) -> None:
        """Nothing to release."""

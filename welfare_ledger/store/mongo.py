"""MongoDB-backed document store."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import pymongo
from pymongo import ASCENDING, UpdateOne
from pymongo.errors import PyMongoError

from welfare_ledger.config import MongoConfig
from welfare_ledger.exceptions import StoreError
from welfare_ledger.store.serialization import from_bson_value, to_bson_value

logger = logging.getLogger(__name__)


class MongoDocumentStore:
    """Document store on a MongoDB database.

    Each ``commit`` is one ordered ``bulk_write`` of upserts. With
    ``use_transactions`` (the default) it runs inside a session
    transaction, so a chunk lands entirely or not at all; that requires a
    replica set or sharded cluster. ``createdAt`` is set server-side.
    """

    def __init__(
        self,
        config: MongoConfig | None = None,
        client: pymongo.MongoClient | None = None,
    ) -> None:
        """Initialize the store.

        Parameters
        ----------
        config : MongoConfig | None
            Connection settings (default: ``MongoConfig()``).
        client : pymongo.MongoClient | None
            Existing client to reuse; one is created from ``config`` if omitted.
        """
        self.config = config or MongoConfig()
        self._owns_client = client is None
        self._client = client or pymongo.MongoClient(self.config.uri, **self.config.client_kwargs())
        self._db = self._client[self.config.database]

        if not self.config.use_transactions:
            logger.warning("MongoDB transactions disabled: chunk commits are not atomic")

    def commit(self, collection: str, documents: list[tuple[str, dict]]) -> None:
        """Upsert ``(key, body)`` pairs as one unit."""
        for key, _ in documents:
            if not key:
                raise StoreError(f"empty document key in {collection}")

        ops = [
            UpdateOne(
                {"_id": key},
                {"$set": to_bson_value(body), "$currentDate": {"createdAt": True}},
                upsert=True,
            )
            for key, body in documents
        ]
        coll = self._db[collection]

        try:
            if self.config.use_transactions:
                with self._client.start_session() as session:
                    session.with_transaction(
                        lambda s: coll.bulk_write(ops, ordered=True, session=s)
                    )
            else:
                coll.bulk_write(ops, ordered=True)
        except PyMongoError as exc:
            raise StoreError(f"commit to {collection} failed: {exc}") from exc

    def find(self, collection: str, filters: dict[str, Any] | None = None) -> list[dict]:
        """Documents matching equality ``filters``, in natural order."""
        try:
            cursor = self._db[collection].find(to_bson_value(filters or {}))
            return [from_bson_value(doc) for doc in cursor]
        except PyMongoError as exc:
            raise StoreError(f"read from {collection} failed: {exc}") from exc

    def find_in(self, collection: str, field_name: str, values: Iterable[Any]) -> list[dict]:
        """Documents whose ``field_name`` is one of ``values``."""
        try:
            cursor = self._db[collection].find({field_name: {"$in": list(values)}})
            return [from_bson_value(doc) for doc in cursor]
        except PyMongoError as exc:
            raise StoreError(f"read from {collection} failed: {exc}") from exc

    def ensure_indexes(self, transactions_collection: str, members_collection: str) -> None:
        """Create the indexes used by report filters, history reads and member lookups."""
        try:
            self._db[transactions_collection].create_index(
                [("lobby", ASCENDING), ("month", ASCENDING), ("year", ASCENDING)]
            )
            self._db[transactions_collection].create_index([("sfaId", ASCENDING)])
            self._db[members_collection].create_index([("sfa_id", ASCENDING)])
        except PyMongoError as exc:
            raise StoreError(f"index creation failed: {exc}") from exc

    def close(self) -> None:
        """Close the client if this store created it."""
        if self._owns_client:
            self._client.close()

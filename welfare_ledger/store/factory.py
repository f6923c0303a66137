"""Pick a store implementation for command-line runs."""

from __future__ import annotations

import logging

from welfare_ledger.config import ImportConfig, MongoConfig
from welfare_ledger.store.base import DocumentStore
from welfare_ledger.store.memory import InMemoryDocumentStore
from welfare_ledger.store.mongo import MongoDocumentStore

logger = logging.getLogger(__name__)


def open_store(
    config: MongoConfig,
    dry_run: bool = False,
    collections: ImportConfig | None = None,
) -> DocumentStore:
    """In-memory store for dry runs, MongoDB otherwise.

    When ``collections`` is given, the MongoDB store's indexes on those
    collections are created before it is returned.
    """
    if dry_run:
        logger.info("Dry run: using in-memory store, nothing is persisted")
        return InMemoryDocumentStore()
    logger.info("Connecting to MongoDB database %s", config.database)
    store = MongoDocumentStore(config)
    if collections is not None:
        try:
            store.ensure_indexes(collections.transactions_collection, collections.members_collection)
        except Exception:
            store.close()
            raise
    return store

"""Document stores for transactions and members."""

from welfare_ledger.store.base import DocumentStore
from welfare_ledger.store.factory import open_store
from welfare_ledger.store.memory import InMemoryDocumentStore
from welfare_ledger.store.mongo import MongoDocumentStore

__all__ = ["DocumentStore", "InMemoryDocumentStore", "MongoDocumentStore", "open_store"]

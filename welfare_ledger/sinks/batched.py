"""Chunked, sequential writes of documents into the store."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterator

from welfare_ledger.config import DEFAULT_CHUNK_SIZE
from welfare_ledger.exceptions import ConfigurationError, StoreError
from welfare_ledger.models.enums import ErrorKind
from welfare_ledger.models.results import ErrorInfo, ImportResult
from welfare_ledger.store.base import DocumentStore

logger = logging.getLogger(__name__)


def chunked(items: list[Any], size: int) -> Iterator[list[Any]]:
    """Contiguous slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BatchedWriter:
    """Write documents in fixed-size chunks, one atomic commit per chunk.

    Chunks are committed in order and never concurrently. The first failed
    commit stops the run: earlier chunks stay written, later chunks are not
    attempted.
    """

    def __init__(self, store: DocumentStore, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize the writer.

        Parameters
        ----------
        store : DocumentStore
            Target store.
        chunk_size : int
            Maximum documents per commit (default 500).
        """
        if chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be positive, got {chunk_size}")
        self.store = store
        self.chunk_size = chunk_size

    def write(self, collection: str, documents: list[tuple[str, dict]]) -> ImportResult:
        """Commit ``(key, body)`` pairs to ``collection``.

        Returns
        -------
        ImportResult
            ``imported_count`` counts documents in successfully committed
            chunks; on failure ``error`` carries the store's reason.
        """
        total = len(documents)
        imported = 0
        committed = 0
        t0 = time.perf_counter()

        for index, chunk in enumerate(chunked(documents, self.chunk_size), start=1):
            try:
                self.store.commit(collection, chunk)
            except StoreError as exc:
                logger.error(
                    "Chunk %d of %s failed after %d/%d documents: %s",
                    index, collection, imported, total, exc,
                    extra={"collection": collection, "chunk": index, "imported": imported, "total": total},
                )
                return ImportResult(
                    success=False,
                    imported_count=imported,
                    chunks_committed=committed,
                    error=ErrorInfo(ErrorKind.WRITE, f"chunk {index} failed: {exc}"),
                )
            imported += len(chunk)
            committed += 1
            logger.info(
                "Committed chunk %d to %s: %d/%d documents", index, collection, imported, total,
                extra={"collection": collection, "chunk": index, "imported": imported, "total": total},
            )

        logger.info(
            "Wrote %d documents to %s in %d chunk(s), %.1fs",
            imported, collection, committed, time.perf_counter() - t0,
        )
        return ImportResult(success=True, imported_count=imported, chunks_committed=committed)

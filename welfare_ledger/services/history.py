"""A member's own payment history."""

from __future__ import annotations

import logging

from welfare_ledger.config import ImportConfig
from welfare_ledger.exceptions import ValidationError
from welfare_ledger.models.payment import StoredTransaction
from welfare_ledger.store.base import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
SORT_BY_DATE = "date"
SORT_BY_AMOUNT = "amount"
HISTORY_SORTS = (SORT_BY_DATE, SORT_BY_AMOUNT)


def member_history(
    store: DocumentStore,
    sfa_id: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
    sort: str = SORT_BY_DATE,
    config: ImportConfig | None = None,
) -> list[StoredTransaction]:
    """Most recent transactions recorded for one member.

    Parameters
    ----------
    store : DocumentStore
        Store holding the transactions collection.
    sfa_id : str
        Member whose payments are listed.
    limit : int
        Maximum number of transactions returned (default 50).
    sort : str
        ``"date"`` for newest ``createdAt`` first, ``"amount"`` for
        largest amount first.

    Returns
    -------
    list[StoredTransaction]
        At most ``limit`` transactions. The newest ``limit`` are always the
        ones kept; ``sort`` only orders them. Transactions without
        ``createdAt`` count as oldest.

    Raises
    ------
    ValidationError
        If ``sfa_id`` is empty, ``limit`` is not positive or ``sort`` is unknown.
    """
    if not sfa_id.strip():
        raise ValidationError("SFA id is required")
    if limit < 1:
        raise ValidationError(f"limit must be positive, got {limit}")
    if sort not in HISTORY_SORTS:
        raise ValidationError(f"unknown sort {sort!r}; expected one of {', '.join(HISTORY_SORTS)}")
    config = config or ImportConfig()

    transactions = [
        StoredTransaction.from_document(doc)
        for doc in store.find(config.transactions_collection, {"sfaId": sfa_id.strip()})
    ]
    recent = _newest_first(transactions)[:limit]
    if sort == SORT_BY_AMOUNT:
        recent.sort(key=lambda t: t.amount, reverse=True)

    logger.debug("History for %s: %d of %d transactions", sfa_id, len(recent), len(transactions))
    return recent


def _newest_first(transactions: list[StoredTransaction]) -> list[StoredTransaction]:
    dated = [t for t in transactions if t.created_at is not None]
    undated = [t for t in transactions if t.created_at is None]
    dated.sort(key=lambda t: t.created_at, reverse=True)
    return dated + undated

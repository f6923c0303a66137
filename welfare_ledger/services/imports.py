"""CSV import entry points: parse eagerly, then write in chunks."""

from __future__ import annotations

import logging
from datetime import date

from welfare_ledger.config import ImportConfig
from welfare_ledger.exceptions import ParseError
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.models.payment import PartitionKey, PaymentRecord, StoredTransaction
from welfare_ledger.models.results import ErrorInfo, ImportResult
from welfare_ledger.parsing.dates import derive_partition, document_key
from welfare_ledger.parsing.members import parse_members
from welfare_ledger.parsing.payments import parse_payments
from welfare_ledger.sinks.batched import BatchedWriter
from welfare_ledger.store.base import DocumentStore

logger = logging.getLogger(__name__)


def to_stored_transaction(record: PaymentRecord, partition: PartitionKey) -> StoredTransaction:
    """Stored form of a parsed payment under the import's partition."""
    return StoredTransaction(
        doc_id=document_key(record.sfa_id, record.pay_date),
        sfa_id=record.sfa_id,
        lobby=record.lobby,
        amount=record.amount,
        date=record.pay_date,
        mode=record.payment_mode,
        receiver=record.receiver,
        month=partition.month,
        year=partition.year,
        remarks=record.remarks,
        sr_no=record.sr_no,
    )


def import_payments(
    records: list[PaymentRecord],
    partition: PartitionKey,
    store: DocumentStore,
    config: ImportConfig | None = None,
) -> ImportResult:
    """Write parsed payments into one partition.

    Every record is tagged with ``partition`` whatever its own pay date:
    callers are expected to import single-month sheets.
    """
    config = config or ImportConfig()
    transactions = [to_stored_transaction(r, partition) for r in records]
    documents = [(t.doc_id, t.to_document()) for t in transactions]

    logger.info(
        "Importing %d payments into %s (%s %s)",
        len(documents), config.transactions_collection, partition.month, partition.year,
    )
    writer = BatchedWriter(store, chunk_size=config.chunk_size)
    return writer.write(config.transactions_collection, documents)


def import_payments_csv(
    text: str,
    store: DocumentStore,
    config: ImportConfig | None = None,
    today: date | None = None,
) -> ImportResult:
    """Parse a payment sheet and import it.

    The partition comes from the first record's pay date (falling back to
    ``today``). A parse error aborts before anything is written.
    """
    try:
        records = parse_payments(text)
    except ParseError as exc:
        logger.error("Payment sheet rejected: %s", exc)
        return ImportResult(success=False, imported_count=0, error=ErrorInfo.from_exception(exc))

    first_date = records[0].pay_date if records else ""
    partition = derive_partition(first_date, today=today)
    return import_payments(records, partition, store, config)


def import_members(
    members: list[MemberRecord],
    store: DocumentStore,
    config: ImportConfig | None = None,
) -> ImportResult:
    """Write member records keyed by SFA ID."""
    config = config or ImportConfig()
    documents = [(m.sfa_id, m.to_document()) for m in members]
    logger.info("Importing %d members into %s", len(documents), config.members_collection)
    writer = BatchedWriter(store, chunk_size=config.chunk_size)
    return writer.write(config.members_collection, documents)


def import_members_csv(
    text: str,
    store: DocumentStore,
    config: ImportConfig | None = None,
) -> ImportResult:
    """Parse a member roster and import it."""
    try:
        members = parse_members(text)
    except ParseError as exc:
        logger.error("Member roster rejected: %s", exc)
        return ImportResult(success=False, imported_count=0, error=ErrorInfo.from_exception(exc))
    return import_members(members, store, config)


def load_members(store: DocumentStore, config: ImportConfig | None = None) -> list[MemberRecord]:
    """Every member in the roster collection, in store order."""
    config = config or ImportConfig()
    return [MemberRecord.from_document(doc) for doc in store.find(config.members_collection)]

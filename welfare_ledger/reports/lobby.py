"""Lobby payment reports: filtered transactions joined with member names."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from welfare_ledger.config import ImportConfig, ReportConfig
from welfare_ledger.exceptions import ValidationError
from welfare_ledger.models.enums import ALL_LOBBIES
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.models.payment import LobbyReportRow, StoredTransaction
from welfare_ledger.parsing.dates import PARTITION_MONTHS, parse_pay_date
from welfare_ledger.sinks.batched import chunked
from welfare_ledger.store.base import DocumentStore

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"
UNKNOWN_CMS_ID = "-"


class LobbyReport:
    """Build denormalized payment rows for one lobby or all lobbies.

    One filtered read fetches the transactions. Members are then resolved
    in bounded ``$in`` batches over the distinct SFA IDs instead of one read
    per row, so a report costs ``1 + ceil(ids / lookup_batch_size)`` reads.
    With ``lookup_workers > 1`` the batches run on a thread pool; rows are
    joined by position, so completion order never affects the output.
    """

    def __init__(
        self,
        store: DocumentStore,
        config: ReportConfig | None = None,
        collections: ImportConfig | None = None,
    ) -> None:
        self.store = store
        self.config = config or ReportConfig()
        collections = collections or ImportConfig()
        self.transactions_collection = collections.transactions_collection
        self.members_collection = collections.members_collection

    def load(
        self,
        lobby: str = ALL_LOBBIES,
        month: str | None = None,
        year: str | None = None,
        sort: bool = False,
    ) -> list[LobbyReportRow]:
        """Report rows matching every given filter.

        Parameters
        ----------
        lobby : str
            Lobby code, or ``"All Lobbies"`` for no lobby filter.
        month : str | None
            Partition month token (``jan`` .. ``dec``, ``sept``).
        year : str | None
            Year exactly as stored, usually four digits.
        sort : bool
            Order by pay date then stored ``srNo`` instead of store order.

        Returns
        -------
        list[LobbyReportRow]
            Rows numbered 1..n in output order.
        """
        filters = build_filters(lobby, month, year)
        transactions = [
            StoredTransaction.from_document(doc)
            for doc in self.store.find(self.transactions_collection, filters)
        ]
        if sort:
            transactions.sort(key=_sort_key)

        members = self.resolve_members([t.sfa_id for t in transactions])

        rows = []
        for position, txn in enumerate(transactions, start=1):
            member = members.get(txn.sfa_id)
            if member is None:
                logger.debug("No member for SFA id %r", txn.sfa_id)
            rows.append(
                LobbyReportRow(
                    sr_no=position,
                    pay_date=txn.date,
                    lobby=txn.lobby or lobby,
                    sfa_id=txn.sfa_id,
                    name=(member.full_name if member else "") or UNKNOWN_NAME,
                    cms_id=(member.cms_id if member else "") or UNKNOWN_CMS_ID,
                    receiver=txn.receiver,
                    amount=txn.amount,
                    payment_mode=txn.mode,
                    remarks=txn.remarks,
                )
            )

        logger.info(
            "Lobby report %s %s/%s: %d rows", lobby, month or "*", year or "*", len(rows),
            extra={"lobby": lobby, "total": len(rows)},
        )
        return rows

    def resolve_members(self, sfa_ids: list[str]) -> dict[str, MemberRecord]:
        """Members for the given SFA IDs, keyed by SFA ID. Misses are absent."""
        distinct = list(dict.fromkeys(i for i in sfa_ids if i))
        batches = list(chunked(distinct, self.config.lookup_batch_size))
        if not batches:
            return {}

        if self.config.lookup_workers > 1 and len(batches) > 1:
            with ThreadPoolExecutor(max_workers=self.config.lookup_workers) as executor:
                results = list(executor.map(self._lookup, batches))
        else:
            results = [self._lookup(batch) for batch in batches]

        members: dict[str, MemberRecord] = {}
        for docs in results:
            for doc in docs:
                member = MemberRecord.from_document(doc)
                members.setdefault(member.sfa_id, member)
        return members

    def _lookup(self, batch: list[str]) -> list[dict]:
        return self.store.find_in(self.members_collection, "sfa_id", batch)


def build_filters(lobby: str, month: str | None, year: str | None) -> dict[str, str]:
    """Equality filters for the transaction read, combined with AND."""
    filters: dict[str, str] = {}
    if lobby and lobby != ALL_LOBBIES:
        filters["lobby"] = lobby
    if month:
        if month not in PARTITION_MONTHS:
            raise ValidationError(f"unknown month {month!r}; expected one of {', '.join(PARTITION_MONTHS)}")
        filters["month"] = month
    if year:
        # years are stored as written in the sheet, so match them verbatim
        filters["year"] = year
    return filters


def _sort_key(txn: StoredTransaction) -> tuple[date, int]:
    return (parse_pay_date(txn.date) or date.max, txn.sr_no or 0)

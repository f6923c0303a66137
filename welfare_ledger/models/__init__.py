"""Domain models for the welfare ledger."""

from welfare_ledger.models.enums import (
    ALL_LOBBIES,
    LOBBIES,
    ErrorKind,
    MemberRole,
    PaymentMode,
)
from welfare_ledger.models.member import MemberRecord, Nominee
from welfare_ledger.models.payment import (
    LobbyReportRow,
    PartitionKey,
    PaymentRecord,
    StoredTransaction,
)
from welfare_ledger.models.results import ErrorInfo, ImportResult

__all__ = [
    "ALL_LOBBIES",
    "LOBBIES",
    "ErrorInfo",
    "ErrorKind",
    "ImportResult",
    "LobbyReportRow",
    "MemberRecord",
    "MemberRole",
    "Nominee",
    "PartitionKey",
    "PaymentMode",
    "PaymentRecord",
    "StoredTransaction",
]

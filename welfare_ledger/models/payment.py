"""Payment models: parsed CSV rows, stored transactions and report rows."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PaymentRecord:
    """One payment row parsed from an import CSV."""

    sr_no: int
    pay_date: str  # DD-Mon-YYYY, kept verbatim
    lobby: str
    sfa_id: str
    name: str
    cms_id: str
    receiver: str
    amount: Decimal
    payment_mode: str
    remarks: str = ""
    line: int | None = None  # source line, for error reporting


@dataclass(frozen=True)
class PartitionKey:
    """Month/year pair routing a batch of payments."""

    month: str  # jan .. dec, with "sept" for September
    year: str


@dataclass
class StoredTransaction:
    """Transaction document as persisted in the ``transactions`` collection."""

    doc_id: str
    sfa_id: str
    lobby: str
    amount: Decimal
    date: str
    mode: str
    receiver: str
    month: str
    year: str
    remarks: str = ""
    sr_no: int | None = None
    created_at: datetime | None = None  # assigned by the store

    def to_document(self) -> dict:
        """Document body, without ``_id`` and ``createdAt``."""
        return {
            "sfaId": self.sfa_id,
            "lobby": self.lobby,
            "amount": self.amount,
            "date": self.date,
            "mode": self.mode,
            "remarks": self.remarks,
            "receiver": self.receiver,
            "month": self.month,
            "year": self.year,
            "srNo": self.sr_no,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "StoredTransaction":
        """Build from a stored document, tolerating missing optional fields."""
        return cls(
            doc_id=str(doc.get("_id", "")),
            sfa_id=doc.get("sfaId") or "",
            lobby=doc.get("lobby") or "",
            amount=doc.get("amount", Decimal("0")),
            date=doc.get("date") or "",
            mode=doc.get("mode") or "",
            receiver=doc.get("receiver") or "",
            month=doc.get("month") or "",
            year=doc.get("year") or "",
            remarks=doc.get("remarks") or "",
            sr_no=doc.get("srNo"),
            created_at=doc.get("createdAt"),
        )


@dataclass(frozen=True)
class LobbyReportRow:
    """Denormalized payment row for lobby reports."""

    sr_no: int
    pay_date: str
    lobby: str
    sfa_id: str
    name: str
    cms_id: str
    receiver: str
    amount: Decimal
    payment_mode: str
    remarks: str = ""

"""Member models."""

from dataclasses import dataclass, field
from datetime import date, datetime

from welfare_ledger.models.enums import MemberRole


@dataclass
class Nominee:
    """Beneficiary nominated by a member."""

    name: str = ""
    relationship: str = ""
    phone_number: str = ""
    share_percentage: float | None = None


@dataclass
class MemberRecord:
    """Member document from the ``users`` collection, keyed by ``sfa_id``."""

    sfa_id: str
    full_name: str
    cms_id: str = ""
    lobby_id: str = ""
    email: str = ""
    phone_number: str = ""
    emergency_number: str = ""
    role: str = MemberRole.MEMBER.value
    designation: str = ""
    date_of_birth: date | None = None
    blood_group: str = ""
    present_status: str = ""
    pf_number: str = ""
    registration_date: date | None = None
    nominees: list[Nominee] = field(default_factory=list)

    def to_document(self) -> dict:
        """Document body, without ``_id`` and ``createdAt``."""
        return {
            "sfa_id": self.sfa_id,
            "full_name": self.full_name,
            "cms_id": self.cms_id,
            "lobby_id": self.lobby_id,
            "email": self.email,
            "phone_number": self.phone_number,
            "emergency_number": self.emergency_number,
            "role": self.role,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "MemberRecord":
        """Build from a stored document."""
        nominees = [
            Nominee(
                name=n.get("name") or "",
                relationship=n.get("relationship") or "",
                phone_number=n.get("phone_number") or "",
                share_percentage=n.get("share_percentage"),
            )
            for n in doc.get("nominees") or []
        ]
        return cls(
            sfa_id=doc.get("sfa_id") or str(doc.get("_id", "")),
            full_name=doc.get("full_name") or "",
            cms_id=doc.get("cms_id") or "",
            lobby_id=doc.get("lobby_id") or "",
            email=doc.get("email") or "",
            phone_number=doc.get("phone_number") or "",
            emergency_number=doc.get("emergency_number") or "",
            role=doc.get("role") or MemberRole.MEMBER.value,
            designation=doc.get("designation") or "",
            date_of_birth=_as_date(doc.get("date_of_birth")),
            blood_group=doc.get("blood_group") or "",
            present_status=doc.get("present_status") or "",
            pf_number=doc.get("pf_number") or "",
            registration_date=_as_date(doc.get("registration_date")),
            nominees=nominees,
        )


def _as_date(value: object) -> date | None:
    # BSON has no date-only type; datetimes come back from the driver
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None

"""Fully quoted CSV exports of lobby reports and member rosters."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Sequence

from welfare_ledger.models.enums import ALL_LOBBIES
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.models.payment import LobbyReportRow

logger = logging.getLogger(__name__)

LOBBY_REPORT_HEADERS = (
    "Sr. No",
    "Pay Date",
    "Lobby",
    "SFA ID",
    "Name",
    "CMS ID",
    "Receiver",
    "Amount (₹)",
    "Payment Mode",
    "Remarks",
)

MEMBER_HEADERS = (
    "Name",
    "SFA ID",
    "CMS ID",
    "Lobby",
    "Email",
    "Phone Number",
    "Emergency Number",
    "Designation",
    "Date of Birth",
    "Blood Group",
    "Present Status",
    "PF Number",
    "Registration Date",
) + tuple(
    f"Nominee {n} {label}"
    for n in (1, 2, 3)
    for label in ("Name", "Relationship", "Phone", "Share %")
)

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"


@dataclass(frozen=True)
class CsvExport:
    """A named CSV document ready to be saved or served as a download."""

    filename: str
    content: str
    row_count: int
    media_type: str = CSV_MEDIA_TYPE

    def save(self, directory: str | Path) -> Path:
        """Write the export into ``directory`` and return its path."""
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / self.filename
        path.write_text(self.content, encoding="utf-8", newline="")
        logger.info("Saved %d rows to %s", self.row_count, path)
        return path


def to_csv(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Header line, then one fully quoted line per row, joined by ``\\n``.

    Every value is wrapped in double quotes with embedded quotes doubled,
    so commas, quotes and newlines survive a quote-aware re-read.
    """
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if value is None else str(value) for value in row])
    body = buffer.getvalue()
    return ",".join(headers) + ("\n" + body.rstrip("\n") if body else "")


def report_row_values(row: LobbyReportRow) -> list[Any]:
    """Project a report row in ``LOBBY_REPORT_HEADERS`` order."""
    return [
        row.sr_no,
        row.pay_date,
        row.lobby,
        row.sfa_id,
        row.name,
        row.cms_id,
        row.receiver,
        row.amount,
        row.payment_mode,
        row.remarks,
    ]


def member_row_values(member: MemberRecord) -> list[Any]:
    """Project a member in ``MEMBER_HEADERS`` order."""
    values: list[Any] = [
        member.full_name,
        member.sfa_id,
        member.cms_id,
        member.lobby_id,
        member.email,
        member.phone_number,
        member.emergency_number,
        member.designation,
        _iso(member.date_of_birth),
        member.blood_group,
        member.present_status,
        member.pf_number,
        _iso(member.registration_date),
    ]
    for i in range(3):
        nominee = member.nominees[i] if i < len(member.nominees) else None
        if nominee is None:
            values.extend(["", "", "", ""])
            continue
        share = nominee.share_percentage
        values.extend([
            nominee.name,
            nominee.relationship,
            nominee.phone_number,
            "" if share is None else f"{share:g}",
        ])
    return values


def export_lobby_report(
    rows: Sequence[LobbyReportRow],
    lobby: str = ALL_LOBBIES,
    today: date | None = None,
) -> CsvExport:
    """Build ``{Lobby}_Payments_{ISODate}.csv`` from report rows."""
    today = today or date.today()
    filename = f"{lobby.replace(' ', '_')}_Payments_{today.isoformat()}.csv"
    content = to_csv(LOBBY_REPORT_HEADERS, (report_row_values(r) for r in rows))
    return CsvExport(filename=filename, content=content, row_count=len(rows))


def export_members(members: Sequence[MemberRecord], today: date | None = None) -> CsvExport:
    """Build ``SFA_Members_{ISODate}.csv`` from member records."""
    today = today or date.today()
    filename = f"SFA_Members_{today.isoformat()}.csv"
    content = to_csv(MEMBER_HEADERS, (member_row_values(m) for m in members))
    return CsvExport(filename=filename, content=content, row_count=len(members))


def _iso(value: date | None) -> str:
    return value.isoformat() if value else ""

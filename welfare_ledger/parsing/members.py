"""Map member-roster CSV text to member records."""

from __future__ import annotations

from welfare_ledger.exceptions import ParseError
from welfare_ledger.models.enums import MemberRole
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.parsing.reader import read_table

MEMBER_HEADERS = (
    "cmsid",
    "email",
    "emergency_number",
    "full_name",
    "lobby_id",
    "phone_number",
    "role",
    "sfa_id",
)
REQUIRED_MEMBER_HEADERS = ("sfa_id", "full_name")

_ROLES = {role.value for role in MemberRole}


def parse_members(text: str, delimiter: str = ",") -> list[MemberRecord]:
    """Parse a member roster into records, in file order.

    Raises
    ------
    ParseError
        On unknown or missing headers, an empty ``sfa_id``/``full_name``,
        or an unrecognised role.
    """
    table = read_table(text, delimiter)
    if not table.headers and not table.rows:
        return []

    labels = [h for h in table.headers if h]
    unknown = [h for h in labels if h not in MEMBER_HEADERS]
    if unknown:
        raise ParseError(f"unknown header(s): {', '.join(unknown)}", line=table.header_line)
    missing = [h for h in REQUIRED_MEMBER_HEADERS if h not in labels]
    if missing:
        raise ParseError(f"missing required header(s): {', '.join(missing)}", line=table.header_line)

    members = []
    for row in table.rows:
        if row.is_empty():
            continue
        values = {k: v.strip() for k, v in row.values.items()}
        for header in REQUIRED_MEMBER_HEADERS:
            if not values.get(header):
                raise ParseError(f"empty {header!r}", line=row.line)

        role = values.get("role") or MemberRole.MEMBER.value
        if role not in _ROLES:
            raise ParseError(f"unknown role {role!r}", line=row.line)

        members.append(
            MemberRecord(
                sfa_id=values["sfa_id"],
                full_name=values["full_name"],
                cms_id=values.get("cmsid", ""),
                lobby_id=values.get("lobby_id", ""),
                email=values.get("email", ""),
                phone_number=values.get("phone_number", ""),
                emergency_number=values.get("emergency_number", ""),
                role=role,
            )
        )
    return members

"""Map payment-sheet CSV text to typed payment records."""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from welfare_ledger.exceptions import ParseError
from welfare_ledger.models.payment import PaymentRecord
from welfare_ledger.parsing.reader import CsvRow, read_table

logger = logging.getLogger(__name__)

# Header labels, matched exactly (case-sensitive) after trimming.
SR_NO = "Sr.no"
PAY_DATE = "Pay Date"
LOBBY = "Lobby"
SFA_ID = "SFA id"
NAME = "name"
CMS_ID = "cms id"
RECEIVER = "receiver"
AMOUNT = "amount"
PAYMENT_MODE = "payment mode"
REMARKS = "remarks"

PAYMENT_HEADERS = (
    SR_NO,
    PAY_DATE,
    LOBBY,
    SFA_ID,
    NAME,
    CMS_ID,
    RECEIVER,
    AMOUNT,
    PAYMENT_MODE,
    REMARKS,
)
REQUIRED_HEADERS = frozenset({PAY_DATE, LOBBY, SFA_ID, RECEIVER, AMOUNT, PAYMENT_MODE})
REQUIRED_VALUES = (PAY_DATE, SFA_ID, AMOUNT)

_AMOUNT_NOISE = ("₹", ",", " ", "\u00a0")
# Plain decimal notation; rejects exponents ("1e3") and underscores ("1_000")
_AMOUNT_PATTERN = re.compile(r"-?(\d+(\.\d*)?|\.\d+)")


def parse_payments(text: str, delimiter: str = ",") -> list[PaymentRecord]:
    """Parse a payment sheet into records, in file order.

    The whole sheet is rejected on the first bad row so that nothing is
    written from a partially valid file.

    Parameters
    ----------
    text : str
        CSV content; first non-blank line is the header.
    delimiter : str
        Field separator.

    Returns
    -------
    list[PaymentRecord]
        One record per non-blank data row.

    Raises
    ------
    ParseError
        On unknown or missing headers, an empty required value, a
        non-numeric amount or a non-integer ``Sr.no``.
    """
    table = read_table(text, delimiter)
    if not table.headers and not table.rows:
        return []
    check_headers(table.headers, line=table.header_line)

    rows = [row for row in table.rows if not row.is_empty()]
    records = [_to_record(row, position) for position, row in enumerate(rows, start=1)]
    logger.debug("Parsed %d payment rows", len(records))
    return records


def check_headers(headers: list[str], line: int = 1) -> None:
    """Reject header rows with unknown labels or missing required ones."""
    labels = [h for h in headers if h]
    unknown = [h for h in labels if h not in PAYMENT_HEADERS]
    if unknown:
        raise ParseError(f"unknown header(s): {', '.join(unknown)}", line=line)
    missing = sorted(REQUIRED_HEADERS.difference(labels))
    if missing:
        raise ParseError(f"missing required header(s): {', '.join(missing)}", line=line)


def parse_amount(raw: str, line: int | None = None) -> Decimal:
    """Parse a currency-formatted amount such as ``"₹1,234.50"``."""
    cleaned = raw or ""
    for noise in _AMOUNT_NOISE:
        cleaned = cleaned.replace(noise, "")
    if not _AMOUNT_PATTERN.fullmatch(cleaned):
        raise ParseError(f"invalid amount {raw!r}", line=line)
    return Decimal(cleaned)


def _to_record(row: CsvRow, position: int) -> PaymentRecord:
    values = {k: v.strip() for k, v in row.values.items()}

    for header in REQUIRED_VALUES:
        if not values.get(header):
            raise ParseError(f"empty {header!r}", line=row.line)

    return PaymentRecord(
        sr_no=_parse_sr_no(values.get(SR_NO, ""), position, row.line),
        pay_date=values[PAY_DATE],
        lobby=values.get(LOBBY, ""),
        sfa_id=values[SFA_ID],
        name=values.get(NAME, ""),
        cms_id=values.get(CMS_ID, ""),
        receiver=values.get(RECEIVER, ""),
        amount=parse_amount(values[AMOUNT], row.line),
        payment_mode=values.get(PAYMENT_MODE, ""),
        remarks=values.get(REMARKS, ""),
        line=row.line,
    )


def _parse_sr_no(raw: str, position: int, line: int) -> int:
    if not raw:
        return position
    try:
        return int(raw)
    except ValueError:
        raise ParseError(f"invalid {SR_NO!r} {raw!r}", line=line) from None

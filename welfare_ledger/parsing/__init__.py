"""CSV parsing and pay-date partitioning."""

from welfare_ledger.parsing.dates import (
    current_partition,
    date_digits,
    derive_partition,
    document_key,
    format_pay_date,
)
from welfare_ledger.parsing.members import parse_members
from welfare_ledger.parsing.payments import parse_amount, parse_payments
from welfare_ledger.parsing.reader import preview, read_rows, read_table

__all__ = [
    "current_partition",
    "date_digits",
    "derive_partition",
    "document_key",
    "format_pay_date",
    "parse_amount",
    "parse_members",
    "parse_payments",
    "preview",
    "read_rows",
    "read_table",
]

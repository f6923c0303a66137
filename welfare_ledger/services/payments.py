"""Manual payment submission by a signed-in member."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from welfare_ledger.config import ImportConfig
from welfare_ledger.exceptions import ParseError, ValidationError
from welfare_ledger.models.enums import PaymentMode
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.models.payment import StoredTransaction
from welfare_ledger.parsing.dates import derive_partition, document_key, format_pay_date
from welfare_ledger.parsing.payments import parse_amount
from welfare_ledger.store.base import DocumentStore

logger = logging.getLogger(__name__)


def validate_payment(amount: str, collector_name: str, mode: str) -> tuple[Decimal, PaymentMode]:
    """Check form input; return the parsed amount and mode.

    Raises
    ------
    ValidationError
        If a required field is empty, the amount is not a positive number,
        or the mode is not a known payment mode.
    """
    if not str(amount).strip() or not collector_name.strip() or not mode.strip():
        raise ValidationError("Please fill in all required fields")

    try:
        value = parse_amount(str(amount).strip())
    except ParseError:
        raise ValidationError("Please enter a valid amount") from None
    if value <= 0:
        raise ValidationError("Please enter a valid amount")

    try:
        payment_mode = PaymentMode(mode.strip())
    except ValueError:
        raise ValidationError(f"Unknown payment mode {mode!r}") from None

    return value, payment_mode


def record_payment(
    store: DocumentStore,
    member: MemberRecord,
    amount: str,
    collector_name: str,
    mode: str,
    description: str = "",
    today: date | None = None,
    config: ImportConfig | None = None,
) -> StoredTransaction:
    """Validate and store one payment dated ``today``.

    The transaction is keyed and partitioned exactly like imported rows, so
    a later import of the same member and day overwrites it.
    """
    value, payment_mode = validate_payment(amount, collector_name, mode)
    config = config or ImportConfig()

    pay_date = format_pay_date(today or date.today())
    partition = derive_partition(pay_date)
    txn = StoredTransaction(
        doc_id=document_key(member.sfa_id, pay_date),
        sfa_id=member.sfa_id,
        lobby=member.lobby_id,
        amount=value,
        date=pay_date,
        mode=payment_mode.value,
        receiver=collector_name.strip(),
        month=partition.month,
        year=partition.year,
        remarks=description.strip(),
    )

    store.commit(config.transactions_collection, [(txn.doc_id, txn.to_document())])
    logger.info("Recorded %s payment of %s for %s", payment_mode.value, value, member.sfa_id)
    return txn

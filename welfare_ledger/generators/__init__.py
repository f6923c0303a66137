"""Sample data generators."""

from welfare_ledger.generators.sample import (
    MemberGenerator,
    PaymentGenerator,
    member_roster,
    payment_sheet,
)

__all__ = ["MemberGenerator", "PaymentGenerator", "member_roster", "payment_sheet"]

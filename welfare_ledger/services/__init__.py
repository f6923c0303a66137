"""Import, export and payment entry points."""

from welfare_ledger.services.history import member_history
from welfare_ledger.services.imports import (
    import_members,
    import_members_csv,
    import_payments,
    import_payments_csv,
    load_members,
)
from welfare_ledger.services.payments import record_payment, validate_payment

__all__ = [
    "import_members",
    "import_members_csv",
    "import_payments",
    "import_payments_csv",
    "load_members",
    "member_history",
    "record_payment",
    "validate_payment",
]

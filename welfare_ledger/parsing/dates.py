"""Partition keys and document-key fragments derived from pay-date strings.

Pay dates arrive as free text in ``D[D]-Mon-YYYY`` form (``14-Sep-2025``).
They are never re-validated: the year is taken verbatim and the month is
matched by prefix, so ``14-September-2025`` and ``14-Sep-2025`` land in the
same partition.
"""

from __future__ import annotations

from datetime import date

from welfare_ledger.models.payment import PartitionKey

# Declaration order matters: first prefix match wins.
MONTH_TOKENS: dict[str, str] = {
    "jan": "jan",
    "feb": "feb",
    "mar": "mar",
    "apr": "apr",
    "may": "may",
    "jun": "jun",
    "jul": "jul",
    "aug": "aug",
    "sep": "sept",
    "oct": "oct",
    "nov": "nov",
    "dec": "dec",
}

# Calendar order, indexed by ``date.month - 1``
PARTITION_MONTHS: tuple[str, ...] = tuple(MONTH_TOKENS.values())

_DISPLAY_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def derive_partition(date_string: str, today: date | None = None) -> PartitionKey:
    """Map a pay-date string to its ``(month, year)`` partition.

    If either the month or the year cannot be extracted, both come from
    ``today`` (default: the current date). Never raises.

    Parameters
    ----------
    date_string : str
        Date in ``D[D]-Mon-YYYY`` form.
    today : date | None
        Fallback date.

    Returns
    -------
    PartitionKey
        The derived partition.
    """
    month = ""
    year = ""

    parts = (date_string or "").split("-")
    if len(parts) >= 3:
        month_part = parts[1].lower()
        year = parts[2]
        for prefix, token in MONTH_TOKENS.items():
            if month_part.startswith(prefix):
                month = token
                break

    if not month or not year:
        return current_partition(today)
    return PartitionKey(month=month, year=year)


def current_partition(today: date | None = None) -> PartitionKey:
    """Partition for ``today`` (default: the current date)."""
    today = today or date.today()
    return PartitionKey(month=PARTITION_MONTHS[today.month - 1], year=str(today.year))


def date_digits(date_string: str) -> str:
    """Day and year substrings concatenated, e.g. ``"14-Sep-2025"`` -> ``"142025"``.

    Returns an empty string when the date has fewer than three fields.
    """
    parts = (date_string or "").split("-")
    if len(parts) >= 3:
        return f"{parts[0]}{parts[2]}"
    return ""


def document_key(sfa_id: str, date_string: str) -> str:
    """Deterministic transaction key ``{sfaId}_{DD}{YYYY}``."""
    return f"{sfa_id}_{date_digits(date_string)}"


def format_pay_date(value: date) -> str:
    """Render a date in the ``DD-Mon-YYYY`` form used by payment sheets."""
    return f"{value.day:02d}-{_DISPLAY_MONTHS[value.month - 1]}-{value.year}"


def parse_pay_date(date_string: str) -> date | None:
    """Best-effort calendar date for sorting; ``None`` when unparseable."""
    parts = (date_string or "").split("-")
    if len(parts) < 3:
        return None
    month_part = parts[1].lower()
    for index, prefix in enumerate(MONTH_TOKENS):
        if month_part.startswith(prefix):
            try:
                return date(int(parts[2]), index + 1, int(parts[0]))
            except ValueError:
                return None
    return None

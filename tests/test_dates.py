"""Tests for pay-date partitioning and document keys."""

from datetime import date

import pytest

from welfare_ledger.models.payment import PartitionKey
from welfare_ledger.parsing.dates import (
    PARTITION_MONTHS,
    current_partition,
    date_digits,
    derive_partition,
    document_key,
    format_pay_date,
    parse_pay_date,
)


class TestDerivePartition:
    """Tests for derive_partition."""

    @pytest.mark.parametrize(
        ("date_string", "month"),
        [
            ("01-Jan-2025", "jan"),
            ("14-Feb-2025", "feb"),
            ("3-Mar-2025", "mar"),
            ("30-Apr-2025", "apr"),
            ("05-May-2025", "may"),
            ("05-Jun-2025", "jun"),
            ("05-Jul-2025", "jul"),
            ("05-Aug-2025", "aug"),
            ("14-Sep-2025", "sept"),
            ("05-Oct-2025", "oct"),
            ("05-Nov-2025", "nov"),
            ("25-Dec-2025", "dec"),
        ],
    )
    def test_month_table(self, date_string: str, month: str) -> None:
        assert derive_partition(date_string) == PartitionKey(month=month, year="2025")

    def test_september_uses_sept_token(self) -> None:
        assert derive_partition("14-Sep-2025") == PartitionKey("sept", "2025")

    def test_prefix_match_accepts_long_names(self) -> None:
        assert derive_partition("14-September-2025").month == "sept"
        assert derive_partition("14-SEPT-2025").month == "sept"

    def test_year_is_taken_verbatim(self) -> None:
        assert derive_partition("14-Sep-25").year == "25"

    @pytest.mark.parametrize("date_string", ["", "14-Sep", "14/Sep/2025", "2025"])
    def test_fewer_than_three_fields_falls_back_to_today(self, date_string: str, today: date) -> None:
        assert derive_partition(date_string, today=today) == PartitionKey("oct", "2026")

    def test_unknown_month_replaces_both_values(self, today: date) -> None:
        # valid year is discarded too
        assert derive_partition("14-Foo-2025", today=today) == PartitionKey("oct", "2026")

    def test_empty_year_falls_back(self, today: date) -> None:
        assert derive_partition("14-Sep-", today=today) == PartitionKey("oct", "2026")

    def test_none_falls_back(self, today: date) -> None:
        assert derive_partition(None, today=today) == PartitionKey("oct", "2026")  # type: ignore[arg-type]

    def test_default_today(self) -> None:
        assert derive_partition("") == current_partition()


class TestCurrentPartition:
    """Tests for current_partition."""

    def test_september(self) -> None:
        assert current_partition(date(2025, 9, 1)) == PartitionKey("sept", "2025")

    def test_tokens_follow_calendar_order(self) -> None:
        assert len(PARTITION_MONTHS) == 12
        assert PARTITION_MONTHS[0] == "jan"
        assert PARTITION_MONTHS[8] == "sept"
        assert PARTITION_MONTHS[11] == "dec"


class TestDocumentKey:
    """Tests for date_digits and document_key."""

    def test_date_digits(self) -> None:
        assert date_digits("14-Sep-2025") == "142025"

    def test_date_digits_keeps_raw_substrings(self) -> None:
        assert date_digits("4-Sep-2025") == "42025"

    def test_date_digits_short_date(self) -> None:
        assert date_digits("Sep-2025") == ""

    def test_document_key(self) -> None:
        assert document_key("SFA001", "14-Sep-2025") == "SFA001_142025"

    def test_document_key_without_date(self) -> None:
        assert document_key("SFA001", "") == "SFA001_"


class TestPayDateFormatting:
    """Tests for format_pay_date and parse_pay_date."""

    def test_format(self) -> None:
        assert format_pay_date(date(2025, 9, 4)) == "04-Sep-2025"

    def test_parse(self) -> None:
        assert parse_pay_date("14-Sep-2025") == date(2025, 9, 14)

    def test_parse_invalid_day(self) -> None:
        assert parse_pay_date("31-Feb-2025") is None

    def test_parse_garbage(self) -> None:
        assert parse_pay_date("soon") is None
        assert parse_pay_date("xx-Sep-2025") is None

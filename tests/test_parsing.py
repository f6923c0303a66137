"""Tests for CSV reading and the payment/member row mappers."""

from decimal import Decimal

import pytest

from welfare_ledger.exceptions import ParseError
from welfare_ledger.parsing.members import parse_members
from welfare_ledger.parsing.payments import parse_amount, parse_payments
from welfare_ledger.parsing.reader import preview, read_rows, read_table

HEADER = "Sr.no,Pay Date,Lobby,SFA id,name,cms id,receiver,amount,payment mode,remarks"


class TestReadTable:
    """Tests for the quote-aware reader."""

    def test_quoted_delimiter(self) -> None:
        rows = read_rows('a,b\n"x, y",z\n')
        assert rows == [{"a": "x, y", "b": "z"}]

    def test_doubled_quotes(self) -> None:
        rows = read_rows('a\n"say ""hi"""\n')
        assert rows == [{"a": 'say "hi"'}]

    def test_embedded_newline_and_line_numbers(self) -> None:
        table = read_table('a,b\n"line1\nline2",x\nlast,y\n')

        assert table.rows[0].values["a"] == "line1\nline2"
        assert table.rows[0].line == 2
        assert table.rows[1].line == 4

    def test_headers_are_trimmed(self) -> None:
        table = read_table("\ufeff a , b \n1,2\n")
        assert table.headers == ["a", "b"]

    def test_values_are_not_trimmed(self) -> None:
        assert read_rows("a\n  padded  \n") == [{"a": "  padded  "}]

    def test_blank_lines_skipped(self) -> None:
        table = read_table("\n\na\n\n1\n   \n2\n")
        assert [r.values["a"] for r in table.rows] == ["1", "2"]
        assert [r.line for r in table.rows] == [5, 7]

    def test_short_rows_padded(self) -> None:
        assert read_rows("a,b,c\n1\n") == [{"a": "1", "b": "", "c": ""}]

    def test_crlf_line_endings(self) -> None:
        assert read_rows("a,b\r\n1,2\r\n") == [{"a": "1", "b": "2"}]

    def test_empty_text(self) -> None:
        table = read_table("")
        assert table.headers == []
        assert table.rows == []

    def test_duplicate_header(self) -> None:
        with pytest.raises(ParseError, match="duplicate header"):
            read_table("a,a\n1,2\n")

    def test_malformed_quoting(self) -> None:
        with pytest.raises(ParseError, match="malformed CSV"):
            read_table('a,b\n"open"junk,2\n')

    def test_quoted_empty_record_kept(self) -> None:
        assert read_rows('a,b\n"",""\n1,2\n') == [{"a": "", "b": ""}, {"a": "1", "b": "2"}]

    def test_header_line_after_leading_blanks(self) -> None:
        table = read_table("\n\na\n1\n")
        assert table.header_line == 3
        assert table.rows[0].line == 4

    def test_preview_limits_rows(self) -> None:
        text = "n\n" + "\n".join(str(i) for i in range(10))
        assert preview(text) == [{"n": str(i)} for i in range(5)]
        assert len(preview(text, limit=2)) == 2


class TestParseAmount:
    """Tests for currency amount parsing."""

    def test_rupee_with_thousands(self) -> None:
        assert parse_amount("₹1,234.50") == Decimal("1234.50")

    def test_plain_number(self) -> None:
        assert parse_amount("200") == Decimal("200")

    def test_non_breaking_space(self) -> None:
        assert parse_amount("₹\u00a01,000") == Decimal("1000")

    @pytest.mark.parametrize("raw", ["abc", "", "₹", "NaN", "Infinity", "1.2.3", "1e3", "1_000", "-", "."])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError, match="invalid amount"):
            parse_amount(raw, line=7)


class TestParsePayments:
    """Tests for the payment row mapper."""

    def test_parses_sheet(self, payment_sheet: str) -> None:
        records = parse_payments(payment_sheet)

        assert len(records) == 3
        first = records[0]
        assert first.sr_no == 1
        assert first.pay_date == "14-Sep-2025"
        assert first.lobby == "ANVT"
        assert first.sfa_id == "SFA001"
        assert first.cms_id == "CMS9001"
        assert first.amount == Decimal("1234.50")
        assert first.payment_mode == "UPI"
        assert first.remarks == ""
        assert first.line == 2

    def test_quoted_fields(self, payment_sheet: str) -> None:
        second = parse_payments(payment_sheet)[1]

        assert second.name == "Sharma, Anil"
        assert second.remarks == 'late, paid in "cash"'
        assert second.amount == Decimal("500")

    def test_line_numbers_skip_blank_lines(self, payment_sheet: str) -> None:
        assert parse_payments(payment_sheet)[2].line == 5

    def test_missing_sr_no_uses_position(self) -> None:
        text = (
            "Pay Date,Lobby,SFA id,receiver,amount,payment mode\n"
            "14-Sep-2025,ANVT,SFA001,Suresh,100,UPI\n"
            "15-Sep-2025,ANVT,SFA002,Suresh,100,UPI\n"
        )
        assert [r.sr_no for r in parse_payments(text)] == [1, 2]

    def test_empty_sr_no_uses_position(self) -> None:
        text = HEADER + "\n,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,\n"
        assert parse_payments(text)[0].sr_no == 1

    def test_values_are_trimmed(self) -> None:
        text = HEADER + "\n1, 14-Sep-2025 ,ANVT, SFA001 ,A,C1,R, 100 ,UPI,\n"
        record = parse_payments(text)[0]
        assert record.pay_date == "14-Sep-2025"
        assert record.sfa_id == "SFA001"

    def test_non_numeric_amount_rejects_sheet(self) -> None:
        text = (
            HEADER + "\n"
            "1,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,\n"
            "2,14-Sep-2025,ANVT,SFA002,B,C2,R,abc,UPI,\n"
        )
        with pytest.raises(ParseError) as exc_info:
            parse_payments(text)
        assert exc_info.value.line == 3
        assert "abc" in str(exc_info.value)

    def test_empty_amount_rejected(self) -> None:
        text = HEADER + "\n1,14-Sep-2025,ANVT,SFA001,A,C1,R,,UPI,\n"
        with pytest.raises(ParseError, match="'amount'"):
            parse_payments(text)

    def test_empty_sfa_id_rejected(self) -> None:
        text = HEADER + "\n1,14-Sep-2025,ANVT,,A,C1,R,100,UPI,\n"
        with pytest.raises(ParseError, match="'SFA id'"):
            parse_payments(text)

    def test_invalid_sr_no(self) -> None:
        text = HEADER + "\none,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,\n"
        with pytest.raises(ParseError, match="Sr.no"):
            parse_payments(text)

    def test_headers_are_case_sensitive(self) -> None:
        text = HEADER.replace("SFA id", "SFA ID") + "\n1,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,\n"
        with pytest.raises(ParseError, match="unknown header"):
            parse_payments(text)

    def test_missing_required_header(self) -> None:
        text = "Pay Date,Lobby,SFA id,receiver,payment mode\n14-Sep-2025,ANVT,SFA001,R,UPI\n"
        with pytest.raises(ParseError, match="missing required header.*amount"):
            parse_payments(text)

    def test_trailing_empty_column_ignored(self) -> None:
        text = HEADER + ",\n1,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,,\n"
        assert len(parse_payments(text)) == 1

    def test_header_only(self) -> None:
        assert parse_payments(HEADER + "\n") == []

    def test_filler_rows_skipped(self) -> None:
        text = HEADER + "\n,,,,,,,,,\n1,14-Sep-2025,ANVT,SFA001,A,C1,R,100,UPI,\n"
        records = parse_payments(text)
        assert [(r.sr_no, r.line) for r in records] == [(1, 3)]

    def test_header_error_reports_header_line(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_payments("\n\n" + HEADER.replace("SFA id", "SFA ID") + "\n")
        assert excinfo.value.line == 3

    def test_empty_text(self) -> None:
        assert parse_payments("") == []


class TestParseMembers:
    """Tests for the member roster mapper."""

    ROSTER = (
        "cmsid,email,emergency_number,full_name,lobby_id,phone_number,role,sfa_id\n"
        "CMS1,a@x.in,9000000001,\"Kumar, Ravi\",ANVT,9000000000,member,SFA001\n"
        "CMS2,b@x.in,,Meena,DLI,,admin,SFA002\n"
    )

    def test_parses_roster(self) -> None:
        members = parse_members(self.ROSTER)

        assert [m.sfa_id for m in members] == ["SFA001", "SFA002"]
        assert members[0].full_name == "Kumar, Ravi"
        assert members[0].cms_id == "CMS1"
        assert members[1].role == "admin"

    def test_role_defaults_to_member(self) -> None:
        text = "full_name,sfa_id\nMeena,SFA009\n"
        assert parse_members(text)[0].role == "member"

    def test_missing_sfa_id_value(self) -> None:
        text = "full_name,sfa_id\nMeena,\n"
        with pytest.raises(ParseError, match="'sfa_id'"):
            parse_members(text)

    def test_unknown_role(self) -> None:
        text = "full_name,sfa_id,role\nMeena,SFA1,boss\n"
        with pytest.raises(ParseError, match="unknown role"):
            parse_members(text)

    def test_unknown_header(self) -> None:
        with pytest.raises(ParseError, match="unknown header"):
            parse_members("full_name,sfa_id,shoe_size\nA,B,9\n")

    def test_missing_header(self) -> None:
        with pytest.raises(ParseError, match="missing required header"):
            parse_members("full_name\nA\n")

    def test_header_error_line_skips_leading_blanks(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_members("\n   \nfull_name\nA\n")
        assert excinfo.value.line == 3

    def test_filler_rows_skipped(self) -> None:
        assert [m.sfa_id for m in parse_members("full_name,sfa_id\n,\nMeena,SFA9\n")] == ["SFA9"]

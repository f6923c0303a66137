"""Quote-aware CSV reading shared by every importer and by preview."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field

from welfare_ledger.exceptions import ParseError

DEFAULT_PREVIEW_ROWS = 5


@dataclass
class CsvRow:
    """One data row keyed by header, with its 1-based starting line."""

    line: int
    values: dict[str, str]

    def is_empty(self) -> bool:
        """True when every field is empty or whitespace, e.g. a ``,,,`` filler row."""
        return all(not v.strip() for v in self.values.values())


@dataclass
class CsvTable:
    """Header labels plus the data rows below them."""

    headers: list[str]
    rows: list[CsvRow] = field(default_factory=list)
    header_line: int = 1


def read_table(text: str, delimiter: str = ",") -> CsvTable:
    """Parse CSV text whose first non-blank line is the header.

    Quoted fields may contain the delimiter, doubled quotes and newlines.
    Header labels are stripped of surrounding whitespace (and a UTF-8 BOM);
    field values are returned exactly as written. Empty lines and lines
    holding only whitespace are skipped; a record of quoted empty fields is
    kept, so exported rows survive a re-read. Short rows are padded with
    empty strings.

    Parameters
    ----------
    text : str
        Raw CSV content.
    delimiter : str
        Single-character field separator.

    Returns
    -------
    CsvTable
        Parsed headers and rows.

    Raises
    ------
    ParseError
        On malformed quoting or duplicate header labels.
    """
    reader = csv.reader(io.StringIO(text or "", newline=""), delimiter=delimiter, strict=True)
    headers: list[str] | None = None
    table = CsvTable(headers=[])
    line = 1

    try:
        for fields in reader:
            start, line = line, reader.line_num + 1
            if _is_blank(fields):
                continue

            if headers is None:
                headers = [h.strip().lstrip("\ufeff").strip() for h in fields]
                _check_duplicates(headers, start)
                table.headers = headers
                table.header_line = start
                continue

            padded = fields + [""] * (len(headers) - len(fields))
            values = {h: v for h, v in zip(headers, padded) if h}
            table.rows.append(CsvRow(line=start, values=values))
    except csv.Error as exc:
        raise ParseError(f"malformed CSV: {exc}", line=reader.line_num) from exc

    return table


def read_rows(text: str, delimiter: str = ",") -> list[dict[str, str]]:
    """Parse CSV text into header-keyed dictionaries."""
    return [row.values for row in read_table(text, delimiter).rows]


def preview(text: str, limit: int = DEFAULT_PREVIEW_ROWS, delimiter: str = ",") -> list[dict[str, str]]:
    """First ``limit`` parsed rows, for inspection before an import."""
    return read_rows(text, delimiter)[:limit]


def _is_blank(fields: list[str]) -> bool:
    # csv yields [] for an empty line and one field for a whitespace-only line
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _check_duplicates(headers: list[str], line: int) -> None:
    seen: set[str] = set()
    for header in headers:
        if header and header in seen:
            raise ParseError(f"duplicate header {header!r}", line=line)
        seen.add(header)

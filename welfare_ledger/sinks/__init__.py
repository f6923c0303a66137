"""Output sinks: chunked store writes and CSV exports."""

from welfare_ledger.sinks.batched import BatchedWriter
from welfare_ledger.sinks.csv_export import CsvExport, export_lobby_report, export_members

__all__ = ["BatchedWriter", "CsvExport", "export_lobby_report", "export_members"]

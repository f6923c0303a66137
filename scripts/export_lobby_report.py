#!/usr/bin/env python3
"""Export a lobby payment report as CSV."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from welfare_ledger.config import LedgerConfig
from welfare_ledger.exceptions import LedgerError
from welfare_ledger.logging import setup_logging
from welfare_ledger.models.enums import ALL_LOBBIES, LOBBIES
from welfare_ledger.reports.lobby import LobbyReport
from welfare_ledger.sinks.csv_export import export_lobby_report
from welfare_ledger.store import MongoDocumentStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Export lobby payments to CSV")
    parser.add_argument(
        "--lobby",
        type=str,
        default=ALL_LOBBIES,
        choices=(ALL_LOBBIES,) + LOBBIES,
        help=f"Lobby code (default: {ALL_LOBBIES})",
    )
    parser.add_argument("--month", type=str, help="Partition month (jan..dec, sept for September)")
    parser.add_argument("--year", type=str, help="Year as stored, usually four digits")
    parser.add_argument("--sort", action="store_true", help="Order rows by pay date then Sr.no")
    parser.add_argument("--output-dir", type=Path, default=config.output.export_dir)
    parser.add_argument("--lookup-workers", type=int, default=config.report.lookup_workers)
    parser.add_argument("--mongodb-uri", type=str, default=config.mongo.uri)
    parser.add_argument("--database", type=str, default=config.mongo.database)
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    config.mongo.uri = args.mongodb_uri
    config.mongo.database = args.database
    config.report.lookup_workers = args.lookup_workers

    try:
        store = MongoDocumentStore(config.mongo)
        try:
            report = LobbyReport(store, config.report, config.imports)
            rows = report.load(args.lobby, month=args.month, year=args.year, sort=args.sort)
        finally:
            store.close()
        path = export_lobby_report(rows, args.lobby).save(args.output_dir)
    except LedgerError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

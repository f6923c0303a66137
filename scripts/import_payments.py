#!/usr/bin/env python3
"""Import a monthly payment sheet into the transactions collection.

All rows of one sheet land in the month/year partition of the first row's
pay date, so import one month per file.
"""

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
from welfare_ledger.parsing.reader import preview
from welfare_ledger.services.imports import import_payments_csv
from welfare_ledger.store import open_store

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Import a payment sheet CSV")
    parser.add_argument("csv_file", type=Path, help="Payment sheet to import")
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=config.imports.chunk_size,
        help=f"Documents per atomic commit (default: {config.imports.chunk_size})",
    )
    parser.add_argument("--mongodb-uri", type=str, default=config.mongo.uri, help="MongoDB connection string")
    parser.add_argument("--database", type=str, default=config.mongo.database, help="MongoDB database name")
    parser.add_argument("--preview", action="store_true", help="Print the first rows and exit")
    parser.add_argument("--dry-run", action="store_true", help="Parse and write to an in-memory store")
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    config.mongo.uri = args.mongodb_uri
    config.mongo.database = args.database
    config.imports.chunk_size = args.chunk_size

    text = args.csv_file.read_text(encoding="utf-8-sig")

    try:
        if args.preview:
            for row in preview(text):
                print(row)
            return 0

        store = open_store(config.mongo, dry_run=args.dry_run, collections=config.imports)
        try:
            result = import_payments_csv(text, store, config.imports)
        finally:
            store.close()
        result.raise_for_error()
    except LedgerError as exc:
        logger.error("Import failed: %s", exc)
        return 1

    logger.info("Imported %d payments in %d chunk(s)", result.imported_count, result.chunks_committed)
    return 0


if __name__ == "__main__":
    sys.exit(main())

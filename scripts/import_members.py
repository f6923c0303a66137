#!/usr/bin/env python3
"""Import a member roster CSV into the members collection."""

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
from welfare_ledger.services.imports import import_members_csv
from welfare_ledger.store import open_store

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Import a member roster CSV")
    parser.add_argument("csv_file", type=Path, help="Roster with cmsid,email,...,sfa_id columns")
    parser.add_argument("--chunk-size", type=int, default=config.imports.chunk_size)
    parser.add_argument("--mongodb-uri", type=str, default=config.mongo.uri)
    parser.add_argument("--database", type=str, default=config.mongo.database)
    parser.add_argument("--dry-run", action="store_true", help="Write to an in-memory store")
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    config.mongo.uri = args.mongodb_uri
    config.mongo.database = args.database
    config.imports.chunk_size = args.chunk_size

    try:
        store = open_store(config.mongo, dry_run=args.dry_run, collections=config.imports)
        try:
            result = import_members_csv(args.csv_file.read_text(encoding="utf-8-sig"), store, config.imports)
        finally:
            store.close()
        result.raise_for_error()
    except LedgerError as exc:
        logger.error("Import failed: %s", exc)
        return 1

    logger.info("Imported %d members", result.imported_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Export the member roster as CSV."""

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
from welfare_ledger.services.imports import load_members
from welfare_ledger.sinks.csv_export import export_members
from welfare_ledger.store import MongoDocumentStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Export members to CSV")
    parser.add_argument("--output-dir", type=Path, default=config.output.export_dir)
    parser.add_argument("--mongodb-uri", type=str, default=config.mongo.uri)
    parser.add_argument("--database", type=str, default=config.mongo.database)
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    config.mongo.uri = args.mongodb_uri
    config.mongo.database = args.database

    try:
        store = MongoDocumentStore(config.mongo)
        try:
            members = load_members(store, config.imports)
        finally:
            store.close()
        path = export_members(members).save(args.output_dir)
    except LedgerError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

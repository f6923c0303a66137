#!/usr/bin/env python3
"""Print one member's recent payments, newest first."""

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
from welfare_ledger.services.history import DEFAULT_HISTORY_LIMIT, HISTORY_SORTS, member_history
from welfare_ledger.store import MongoDocumentStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Show a member's payment history")
    parser.add_argument("sfa_id", type=str, help="Member SFA id")
    parser.add_argument("--limit", type=int, default=DEFAULT_HISTORY_LIMIT)
    parser.add_argument("--sort", type=str, default=HISTORY_SORTS[0], choices=HISTORY_SORTS)
    parser.add_argument("--mongodb-uri", type=str, default=config.mongo.uri)
    parser.add_argument("--database", type=str, default=config.mongo.database)
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    config.mongo.uri = args.mongodb_uri
    config.mongo.database = args.database

    try:
        store = MongoDocumentStore(config.mongo)
        try:
            transactions = member_history(store, args.sfa_id, args.limit, args.sort, config.imports)
        finally:
            store.close()
    except LedgerError as exc:
        logger.error("History lookup failed: %s", exc)
        return 1

    print(f"{'Date':<12} {'Amount':>10}  {'Mode':<14} Receiver")
    print("-" * 50)
    for txn in transactions:
        print(f"{txn.date:<12} {txn.amount:>10}  {txn.mode:<14} {txn.receiver}")
    print(f"\n{len(transactions)} transaction(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

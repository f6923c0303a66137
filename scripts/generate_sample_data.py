#!/usr/bin/env python3
"""Generate a sample member roster and one month of payments.

Writes ``members.csv`` and ``payments_{mon}_{year}.csv`` in the import
layouts, for demos and for exercising the import scripts.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from welfare_ledger.generators import MemberGenerator, PaymentGenerator, member_roster, payment_sheet
from welfare_ledger.parsing.dates import current_partition


def main() -> None:
    """Main entry point."""
    today = date.today()
    parser = argparse.ArgumentParser(description="Generate sample welfare ledger CSVs")
    parser.add_argument("--members", type=int, default=200, help="Number of members (default: 200)")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month, help="Month number 1-12")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--output-dir", type=Path, default=Path("local"))
    args = parser.parse_args()

    members = list(MemberGenerator(seed=args.seed).generate_batch(args.members))
    payments = PaymentGenerator(seed=args.seed).generate_month(members, args.year, args.month)

    partition = current_partition(date(args.year, args.month, 1))
    args.output_dir.mkdir(parents=True, exist_ok=True)

    members_path = args.output_dir / "members.csv"
    members_path.write_text(member_roster(members), encoding="utf-8")
    print(f"Saved {len(members)} members to {members_path}")

    payments_path = args.output_dir / f"payments_{partition.month}_{partition.year}.csv"
    payments_path.write_text(payment_sheet(payments), encoding="utf-8")
    print(f"Saved {len(payments)} payments to {payments_path}")


if __name__ == "__main__":
    main()

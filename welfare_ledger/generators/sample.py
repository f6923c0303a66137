"""Synthetic member rosters and payment sheets for demos and load tests."""

from __future__ import annotations

import csv
import io
from datetime import date
from decimal import Decimal
from typing import Iterator

from welfare_ledger.generators.base import BaseGenerator
from welfare_ledger.models.enums import LOBBIES, MemberRole, PaymentMode
from welfare_ledger.models.member import MemberRecord
from welfare_ledger.models.payment import PaymentRecord
from welfare_ledger.parsing.dates import format_pay_date
from welfare_ledger.parsing.members import MEMBER_HEADERS
from welfare_ledger.parsing.payments import PAYMENT_HEADERS


class MemberGenerator(BaseGenerator):
    """Generate synthetic members spread across the known lobbies."""

    ROLES = [MemberRole.MEMBER, MemberRole.COLLECTION_MEMBER, MemberRole.ADMIN]
    ROLE_WEIGHTS = [0.90, 0.08, 0.02]

    def generate_batch(self, count: int) -> Iterator[MemberRecord]:
        """Generate ``count`` members with unique SFA and CMS IDs.

        Yields
        ------
        MemberRecord
            Generated members.
        """
        for n in range(1, count + 1):
            role = self.random.choices(self.ROLES, weights=self.ROLE_WEIGHTS, k=1)[0]
            yield MemberRecord(
                sfa_id=f"SFA{n:05d}",
                cms_id=f"CMS{self.random.randint(100000, 999999)}{n:03d}",
                full_name=self.fake.name(),
                lobby_id=self.random.choice(LOBBIES),
                email=self.fake.email(),
                phone_number=self.fake.msisdn()[:10],
                emergency_number=self.fake.msisdn()[:10],
                role=role.value,
            )


class PaymentGenerator(BaseGenerator):
    """Generate one month of contributions from a member list."""

    MODES = [PaymentMode.UPI, PaymentMode.CASH, PaymentMode.BANK_TRANSFER]
    MODE_WEIGHTS = [0.6, 0.3, 0.1]
    AMOUNTS = [Decimal("100"), Decimal("200"), Decimal("500"), Decimal("1000")]

    def generate_month(
        self,
        members: list[MemberRecord],
        year: int,
        month: int,
        coverage: float = 0.8,
    ) -> list[PaymentRecord]:
        """Payments for roughly ``coverage`` of ``members`` in one month.

        Each payer pays once, on a random day 1-28, so document keys stay
        unique within the month.
        """
        collectors = [m.full_name for m in members if m.role == MemberRole.COLLECTION_MEMBER.value]
        collectors = collectors or [self.fake.name()]

        records = []
        for member in members:
            if self.random.random() > coverage:
                continue
            pay_date = date(year, month, self.random.randint(1, 28))
            records.append(
                PaymentRecord(
                    sr_no=len(records) + 1,
                    pay_date=format_pay_date(pay_date),
                    lobby=member.lobby_id,
                    sfa_id=member.sfa_id,
                    name=member.full_name,
                    cms_id=member.cms_id,
                    receiver=self.random.choice(collectors),
                    amount=self.random.choice(self.AMOUNTS),
                    payment_mode=self.random.choices(self.MODES, weights=self.MODE_WEIGHTS, k=1)[0].value,
                    remarks="" if self.random.random() > 0.1 else self.fake.sentence(nb_words=4),
                )
            )
        return records


def payment_sheet(records: list[PaymentRecord]) -> str:
    """Render payments in the import sheet layout (amounts with ``₹``)."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(PAYMENT_HEADERS)
    for r in records:
        writer.writerow([
            r.sr_no,
            r.pay_date,
            r.lobby,
            r.sfa_id,
            r.name,
            r.cms_id,
            r.receiver,
            f"₹{r.amount:,}",
            r.payment_mode,
            r.remarks,
        ])
    return buffer.getvalue()


def member_roster(members: list[MemberRecord]) -> str:
    """Render members in the roster import layout."""
    buffer = io.StringIO(newline="")
    writer = csv.DictWriter(buffer, fieldnames=MEMBER_HEADERS, lineterminator="\n")
    writer.writeheader()
    for m in members:
        writer.writerow({
            "cmsid": m.cms_id,
            "email": m.email,
            "emergency_number": m.emergency_number,
            "full_name": m.full_name,
            "lobby_id": m.lobby_id,
            "phone_number": m.phone_number,
            "role": m.role,
            "sfa_id": m.sfa_id,
        })
    return buffer.getvalue()

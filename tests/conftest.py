"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from welfare_ledger.exceptions import StoreError
from welfare_ledger.store.memory import InMemoryDocumentStore

PAYMENT_SHEET = (
    "Sr.no,Pay Date,Lobby,SFA id,name,cms id,receiver,amount,payment mode,remarks\n"
    "1,14-Sep-2025,ANVT,SFA001,Ravi Kumar,CMS9001,Suresh,\"₹1,234.50\",UPI,\n"
    "2,15-Sep-2025,DLI,SFA002,\"Sharma, Anil\",CMS9002,Suresh,₹500,Cash,\"late, paid in \"\"cash\"\"\"\n"
    "\n"
    "3,16-Sep-2025,ANVT,SFA003,Meena,CMS9003,Priya,200,Bank Transfer,\n"
)


class FailingStore(InMemoryDocumentStore):
    """In-memory store whose Nth commit (1-based) raises."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.attempts = 0
        self.chunk_sizes: list[int] = []

    def commit(self, collection: str, documents: list[tuple[str, dict]]) -> None:
        self.attempts += 1
        self.chunk_sizes.append(len(documents))
        if self.attempts == self.fail_on:
            raise StoreError("simulated outage")
        super().commit(collection, documents)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed 'today' for fallback partitions."""
    return date(2026, 10, 19)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def payment_sheet() -> str:
    """Three-row September 2025 payment sheet."""
    return PAYMENT_SHEET


@pytest.fixture
def member_docs() -> list[tuple[str, dict]]:
    """Members for SFA001 and SFA002 (SFA003 is deliberately absent)."""
    return [
        ("SFA001", {"sfa_id": "SFA001", "full_name": "Ravi Kumar", "cms_id": "CMS9001", "lobby_id": "ANVT"}),
        ("SFA002", {"sfa_id": "SFA002", "full_name": "Anil Sharma", "cms_id": "CMS9002", "lobby_id": "DLI"}),
    ]

"""Enumeration types for ledger entities."""

from enum import Enum


class PaymentMode(str, Enum):
    CASH = "Cash"
    UPI = "UPI"
    NET_BANKING = "Net Banking"
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    CHEQUE = "Cheque"
    NEFT_RTGS = "NEFT/RTGS"
    BANK_TRANSFER = "Bank Transfer"


class MemberRole(str, Enum):
    MEMBER = "member"
    COLLECTION_MEMBER = "collection_member"
    ADMIN = "admin"
    FOUNDER = "founder"


class ErrorKind(str, Enum):
    PARSE = "parse"
    WRITE = "write"
    VALIDATION = "validation"


ALL_LOBBIES = "All Lobbies"

LOBBIES = (
    "ANVT",
    "DEE",
    "DLI",
    "GHH",
    "JIND",
    "KRJNDD",
    "MTC",
    "NZM",
    "PNP",
    "ROK",
    "SSB",
)

"""
Common enumerations used across the Hedera Agent Kit.
"""
from enum import Enum


class ExecutionMode(str, Enum):
    """How a constructed transaction is completed."""
    EXECUTE = "execute"
    RETURN_BYTES = "return_bytes"


class TransactionStatus(str, Enum):
    """Ledger status codes surfaced in raw transaction responses."""
    SUCCESS = "SUCCESS"
    PENDING_SIGNATURE = "PENDING_SIGNATURE"
    INVALID_TRANSACTION = "INVALID_TRANSACTION"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    INSUFFICIENT_PAYER_BALANCE = "INSUFFICIENT_PAYER_BALANCE"
    RECEIPT_NOT_FOUND = "RECEIPT_NOT_FOUND"
    UNKNOWN = "UNKNOWN"

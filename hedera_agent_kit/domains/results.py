"""
Result models for ledger transactions and tool invocations.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from hedera_agent_kit.domains.enums import TransactionStatus

_SUCCESS_STATUSES = {
    TransactionStatus.SUCCESS.value,
    TransactionStatus.PENDING_SIGNATURE.value,
}


class TransactionReceipt(BaseModel):
    """Receipt returned by a ledger client after a submitted transaction reaches consensus."""

    status: str = TransactionStatus.SUCCESS.value
    transaction_id: Optional[str] = None
    account_id: Optional[str] = None
    token_id: Optional[str] = None
    topic_id: Optional[str] = None
    schedule_id: Optional[str] = None
    contract_id: Optional[str] = None
    serial_numbers: List[int] = Field(default_factory=list)


class RawTransactionResponse(BaseModel):
    """Mode-agnostic outcome of a transaction attempt.

    Only the fields relevant to the completed operation are populated;
    all others stay ``None``.
    """

    status: str = Field(..., description="Ledger status code")
    transaction_id: Optional[str] = Field(
        None, description="Set for every submitted transaction"
    )
    account_id: Optional[str] = Field(
        None, description="Set by account creation"
    )
    token_id: Optional[str] = Field(
        None, description="Set by fungible and non-fungible token creation"
    )
    topic_id: Optional[str] = Field(None, description="Set by topic creation")
    schedule_id: Optional[str] = Field(
        None, description="Set when a scheduled transaction is created or signed"
    )
    contract_id: Optional[str] = Field(
        None, description="Set by contract deployment"
    )
    bytes: Optional[str] = Field(
        None, description="Base64 unsigned transaction, set in return-bytes mode only"
    )
    error: Optional[str] = Field(
        None, description="Failure detail when the status is not a success"
    )

    @property
    def succeeded(self) -> bool:
        """Whether the transaction was accepted or prepared for signing."""
        return self.status in _SUCCESS_STATUSES


class ToolResult(BaseModel):
    """Caller-facing result of a tool invocation."""

    raw: Any = Field(..., description="Raw operation result")
    human_message: str = Field(..., description="Human readable outcome")

    @property
    def succeeded(self) -> bool:
        if isinstance(self.raw, dict):
            status = self.raw.get("status")
        else:
            status = getattr(self.raw, "status", None)
        return status in _SUCCESS_STATUSES

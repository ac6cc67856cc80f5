from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TransferHbarEntry(BaseModel):
    account_id: str = Field(..., description="Recipient account ID")
    amount: Decimal = Field(..., description="Amount of HBAR to send")

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Transfer amount must be positive")
        return v


class TransferHbarParameters(BaseModel):
    transfers: List[TransferHbarEntry] = Field(
        ..., min_length=1, description="Recipients and HBAR amounts"
    )
    source_account_id: Optional[str] = Field(
        None, description="Sender account, defaults to the operator account"
    )
    transaction_memo: Optional[str] = Field(None, description="Optional memo")


class HbarTransfer(BaseModel):
    account_id: str
    # signed tinybars
    amount: int


class TransferHbarParametersNormalised(BaseModel):
    # sums to zero
    hbar_transfers: List[HbarTransfer] = Field(default_factory=list)
    transaction_memo: Optional[str] = None


class CreateAccountParameters(BaseModel):
    public_key: Optional[str] = Field(
        None, description="Key for the new account, defaults to the operator key"
    )
    account_memo: Optional[str] = Field(None, description="Account memo")
    initial_balance: Decimal = Field(
        Decimal(0), ge=0, description="Initial HBAR balance"
    )
    max_automatic_token_associations: int = Field(
        -1, ge=-1, description="-1 for unlimited associations"
    )


class CreateAccountParametersNormalised(BaseModel):
    public_key: str
    account_memo: Optional[str] = None
    initial_balance: int = 0
    max_automatic_token_associations: int = -1


class DeleteAccountParameters(BaseModel):
    account_id: str = Field(..., description="Account to delete")
    transfer_account_id: Optional[str] = Field(
        None, description="Account receiving the remaining balance"
    )


class DeleteAccountParametersNormalised(BaseModel):
    account_id: str
    transfer_account_id: str


class SignScheduleTransactionParameters(BaseModel):
    schedule_id: str = Field(
        ..., description="The ID of the scheduled transaction to sign"
    )

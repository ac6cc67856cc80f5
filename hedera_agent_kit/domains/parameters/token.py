from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CreateFungibleTokenParameters(BaseModel):
    token_name: str = Field(..., min_length=1, description="Token name")
    token_symbol: str = Field(..., min_length=1, description="Token symbol")
    initial_supply: Decimal = Field(
        Decimal(0), ge=0, description="Initial supply in display units"
    )
    decimals: int = Field(0, ge=0, le=18, description="Number of decimals")
    supply_type: Literal["finite", "infinite"] = Field(
        "infinite", description="Supply type"
    )
    max_supply: Optional[Decimal] = Field(
        None, gt=0, description="Max supply in display units, finite tokens only"
    )
    treasury_account_id: Optional[str] = Field(
        None, description="Treasury account, defaults to the operator account"
    )
    is_supply_key: bool = Field(
        False, description="Whether the operator key becomes the supply key"
    )


class CreateFungibleTokenParametersNormalised(BaseModel):
    token_name: str
    token_symbol: str
    decimals: int
    initial_supply: int
    supply_type: str
    max_supply: Optional[int] = None
    treasury_account_id: str
    supply_key: Optional[str] = None


class CreateNonFungibleTokenParameters(BaseModel):
    token_name: str = Field(..., min_length=1, description="Token name")
    token_symbol: str = Field(..., min_length=1, description="Token symbol")
    max_supply: int = Field(100, gt=0, description="Maximum number of NFTs")
    treasury_account_id: Optional[str] = Field(
        None, description="Treasury account, defaults to the operator account"
    )


class CreateNonFungibleTokenParametersNormalised(BaseModel):
    token_name: str
    token_symbol: str
    max_supply: int
    treasury_account_id: str
    supply_key: Optional[str] = None


class MintFungibleTokenParameters(BaseModel):
    token_id: str = Field(..., description="Token to mint")
    amount: Decimal = Field(..., gt=0, description="Amount in display units")
    decimals: int = Field(0, ge=0, le=18, description="Token decimals")


class MintFungibleTokenParametersNormalised(BaseModel):
    token_id: str
    amount: int


class AssociateTokenParameters(BaseModel):
    token_ids: List[str] = Field(..., min_length=1, description="Tokens to associate")
    account_id: Optional[str] = Field(
        None, description="Account to associate, defaults to the operator account"
    )


class AssociateTokenParametersNormalised(BaseModel):
    account_id: str
    token_ids: List[str]


class DeleteTokenParameters(BaseModel):
    token_id: str = Field(..., description="Token to delete")


class TransferFungibleTokenParameters(BaseModel):
    token_id: str = Field(..., description="Token to transfer")
    to_account_id: str = Field(..., description="Recipient account")
    amount: Decimal = Field(..., gt=0, description="Amount in display units")
    decimals: int = Field(0, ge=0, le=18, description="Token decimals")
    from_account_id: Optional[str] = Field(
        None, description="Sender account, defaults to the operator account"
    )


class TransferFungibleTokenParametersNormalised(BaseModel):
    token_id: str
    from_account_id: str
    to_account_id: str
    amount: int


class TransferNftParameters(BaseModel):
    token_id: str = Field(..., description="Non-fungible token to transfer")
    serial_number: int = Field(..., gt=0, description="Serial number of the NFT")
    to_account_id: str = Field(..., description="Recipient account")
    from_account_id: Optional[str] = Field(
        None, description="Current owner, defaults to the operator account"
    )
    transaction_memo: Optional[str] = Field(None, description="Optional memo")


class TransferNftParametersNormalised(BaseModel):
    token_id: str
    serial_number: int
    from_account_id: str
    to_account_id: str
    transaction_memo: Optional[str] = None

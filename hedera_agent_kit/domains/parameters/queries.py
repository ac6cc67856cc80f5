from typing import Optional

from pydantic import BaseModel, Field


class AccountQueryParameters(BaseModel):
    account_id: Optional[str] = Field(
        None, description="Account to query, defaults to the operator account"
    )


class AccountQueryParametersNormalised(BaseModel):
    account_id: str


class AccountTokenBalancesQueryParameters(BaseModel):
    account_id: Optional[str] = Field(
        None, description="Account to query, defaults to the operator account"
    )
    token_id: Optional[str] = Field(
        None, description="Restrict the result to a single token"
    )


class AccountTokenBalancesQueryParametersNormalised(BaseModel):
    account_id: str
    token_id: Optional[str] = None


class TokenInfoQueryParameters(BaseModel):
    token_id: str = Field(..., description="Token to describe")


class TopicInfoQueryParameters(BaseModel):
    topic_id: str = Field(..., description="Topic to describe")

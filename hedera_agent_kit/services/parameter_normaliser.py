"""
Parameter normalisation for ledger tools.

Raw tool parameters are validated against the tool's pydantic model and
converted into the normalised form transaction builders consume: operator
defaults applied, HBAR amounts in tinybars, token amounts in base units.
"""
from decimal import Decimal
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.exceptions import ParameterValidationError
from hedera_agent_kit.domains.parameters.account import (
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    HbarTransfer,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
)
from hedera_agent_kit.domains.parameters.consensus import (
    CreateTopicParameters,
    CreateTopicParametersNormalised,
)
from hedera_agent_kit.domains.parameters.token import (
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    TransferFungibleTokenParameters,
    TransferFungibleTokenParametersNormalised,
    TransferNftParameters,
    TransferNftParametersNormalised,
)
from hedera_agent_kit.domains.parameters.queries import (
    AccountQueryParameters,
    AccountQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
)

TINYBARS_PER_HBAR = 100_000_000

M = TypeVar("M", bound=BaseModel)


def to_base_units(amount: Decimal, decimals: int) -> int:
    """Convert a display amount to the smallest unit, rejecting fractions."""
    scaled = Decimal(amount) * (Decimal(10) ** decimals)
    if scaled != scaled.to_integral_value():
        raise ParameterValidationError(
            f"Amount {amount} has more than {decimals} decimal places"
        )
    return int(scaled)


def hbar_to_tinybars(amount: Decimal) -> int:
    return to_base_units(amount, 8)


def from_base_units(amount: int, decimals: int) -> Decimal:
    """Convert an amount in the smallest unit back to display units."""
    return Decimal(amount) / (Decimal(10) ** decimals)


def tinybars_to_hbar(tinybars: int) -> Decimal:
    return from_base_units(tinybars, 8)


class ParameterNormaliser:
    """Validates and normalises raw tool parameters."""

    @staticmethod
    def parse(model: Type[M], params: Optional[Dict[str, Any]]) -> M:
        """Validate raw parameters against a schema.

        Raises:
            ParameterValidationError: if the parameters do not match
        """
        try:
            return model.model_validate(params or {})
        except ValidationError as e:
            errors = e.errors(include_url=False)
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'params'}: {err['msg']}"
                for err in errors
            )
            raise ParameterValidationError(
                f"Invalid parameters: {details}", errors=errors
            ) from e

    @staticmethod
    def _operator(context: Context, value: Optional[str], field: str) -> str:
        account_id = value or context.account_id
        if not account_id:
            raise ParameterValidationError(
                f"{field} is required when no operator account is configured"
            )
        return account_id

    @classmethod
    def transfer_hbar(
        cls, params: Dict[str, Any], context: Context
    ) -> TransferHbarParametersNormalised:
        parsed = cls.parse(TransferHbarParameters, params)
        source = cls._operator(context, parsed.source_account_id, "source_account_id")

        transfers = []
        total = 0
        for entry in parsed.transfers:
            tinybars = hbar_to_tinybars(entry.amount)
            transfers.append(HbarTransfer(account_id=entry.account_id, amount=tinybars))
            total += tinybars
        transfers.append(HbarTransfer(account_id=source, amount=-total))

        return TransferHbarParametersNormalised(
            hbar_transfers=transfers, transaction_memo=parsed.transaction_memo
        )

    @classmethod
    def create_account(
        cls, params: Dict[str, Any], context: Context
    ) -> CreateAccountParametersNormalised:
        parsed = cls.parse(CreateAccountParameters, params)
        public_key = parsed.public_key or context.account_public_key
        if not public_key:
            raise ParameterValidationError(
                "public_key is required when no operator key is configured"
            )
        return CreateAccountParametersNormalised(
            public_key=public_key,
            account_memo=parsed.account_memo,
            initial_balance=hbar_to_tinybars(parsed.initial_balance),
            max_automatic_token_associations=parsed.max_automatic_token_associations,
        )

    @classmethod
    def delete_account(
        cls, params: Dict[str, Any], context: Context
    ) -> DeleteAccountParametersNormalised:
        parsed = cls.parse(DeleteAccountParameters, params)
        return DeleteAccountParametersNormalised(
            account_id=parsed.account_id,
            transfer_account_id=cls._operator(
                context, parsed.transfer_account_id, "transfer_account_id"
            ),
        )

    @classmethod
    def create_fungible_token(
        cls, params: Dict[str, Any], context: Context
    ) -> CreateFungibleTokenParametersNormalised:
        parsed = cls.parse(CreateFungibleTokenParameters, params)
        if parsed.supply_type == "finite" and parsed.max_supply is None:
            raise ParameterValidationError("max_supply is required for finite tokens")
        if parsed.max_supply is not None and parsed.max_supply < parsed.initial_supply:
            raise ParameterValidationError("initial_supply cannot exceed max_supply")

        return CreateFungibleTokenParametersNormalised(
            token_name=parsed.token_name,
            token_symbol=parsed.token_symbol,
            decimals=parsed.decimals,
            initial_supply=to_base_units(parsed.initial_supply, parsed.decimals),
            supply_type=parsed.supply_type,
            max_supply=(
                to_base_units(parsed.max_supply, parsed.decimals)
                if parsed.supply_type == "finite"
                else None
            ),
            treasury_account_id=cls._operator(
                context, parsed.treasury_account_id, "treasury_account_id"
            ),
            supply_key=context.account_public_key if parsed.is_supply_key else None,
        )

    @classmethod
    def create_non_fungible_token(
        cls, params: Dict[str, Any], context: Context
    ) -> CreateNonFungibleTokenParametersNormalised:
        parsed = cls.parse(CreateNonFungibleTokenParameters, params)
        if not context.account_public_key:
            raise ParameterValidationError(
                "An operator public key is required to act as the NFT supply key"
            )
        return CreateNonFungibleTokenParametersNormalised(
            token_name=parsed.token_name,
            token_symbol=parsed.token_symbol,
            max_supply=parsed.max_supply,
            treasury_account_id=cls._operator(
                context, parsed.treasury_account_id, "treasury_account_id"
            ),
            supply_key=context.account_public_key,
        )

    @classmethod
    def mint_fungible_token(
        cls, params: Dict[str, Any], context: Context
    ) -> MintFungibleTokenParametersNormalised:
        parsed = cls.parse(MintFungibleTokenParameters, params)
        return MintFungibleTokenParametersNormalised(
            token_id=parsed.token_id,
            amount=to_base_units(parsed.amount, parsed.decimals),
        )

    @classmethod
    def transfer_nft(
        cls, params: Dict[str, Any], context: Context
    ) -> TransferNftParametersNormalised:
        parsed = cls.parse(TransferNftParameters, params)
        from_account_id = cls._operator(context, parsed.from_account_id, "from_account_id")
        if from_account_id == parsed.to_account_id:
            raise ParameterValidationError(
                "from_account_id and to_account_id must be different accounts"
            )
        return TransferNftParametersNormalised(
            token_id=parsed.token_id,
            serial_number=parsed.serial_number,
            from_account_id=from_account_id,
            to_account_id=parsed.to_account_id,
            transaction_memo=parsed.transaction_memo,
        )

    @classmethod
    def associate_token(
        cls, params: Dict[str, Any], context: Context
    ) -> AssociateTokenParametersNormalised:
        parsed = cls.parse(AssociateTokenParameters, params)
        return AssociateTokenParametersNormalised(
            account_id=cls._operator(context, parsed.account_id, "account_id"),
            token_ids=parsed.token_ids,
        )

    @classmethod
    def transfer_fungible_token(
        cls, params: Dict[str, Any], context: Context
    ) -> TransferFungibleTokenParametersNormalised:
        parsed = cls.parse(TransferFungibleTokenParameters, params)
        return TransferFungibleTokenParametersNormalised(
            token_id=parsed.token_id,
            from_account_id=cls._operator(
                context, parsed.from_account_id, "from_account_id"
            ),
            to_account_id=parsed.to_account_id,
            amount=to_base_units(parsed.amount, parsed.decimals),
        )

    @classmethod
    def create_topic(
        cls, params: Dict[str, Any], context: Context
    ) -> CreateTopicParametersNormalised:
        parsed = cls.parse(CreateTopicParameters, params)
        if parsed.is_submit_key and not context.account_public_key:
            raise ParameterValidationError(
                "An operator public key is required to set a submit key"
            )
        return CreateTopicParametersNormalised(
            topic_memo=parsed.topic_memo,
            admin_key=context.account_public_key,
            submit_key=context.account_public_key if parsed.is_submit_key else None,
        )

    @classmethod
    def account_query(
        cls, params: Dict[str, Any], context: Context
    ) -> AccountQueryParametersNormalised:
        parsed = cls.parse(AccountQueryParameters, params)
        return AccountQueryParametersNormalised(
            account_id=cls._operator(context, parsed.account_id, "account_id")
        )

    @classmethod
    def account_token_balances_query(
        cls, params: Dict[str, Any], context: Context
    ) -> AccountTokenBalancesQueryParametersNormalised:
        parsed = cls.parse(AccountTokenBalancesQueryParameters, params)
        return AccountTokenBalancesQueryParametersNormalised(
            account_id=cls._operator(context, parsed.account_id, "account_id"),
            token_id=parsed.token_id,
        )

from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    TransferFungibleTokenParameters,
    TransferFungibleTokenParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

TRANSFER_FUNGIBLE_TOKEN_TOOL = "transfer_fungible_token_tool"


class TransferFungibleTokenTool(LedgerTool):
    method_name = TRANSFER_FUNGIBLE_TOKEN_TOOL
    display_name = "Transfer Fungible Token"
    failure_label = "Failed to transfer fungible token"
    parameters_model = TransferFungibleTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool transfers a fungible token between accounts.

Parameters:
- token_id (string, required): The token to transfer
- to_account_id (string, required): The recipient account
- amount (number, required): Amount in display units
- decimals (number, optional): Decimals of the token, defaults to 0
- {PromptGenerator.get_account_parameter_description("from_account_id", context)}
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> TransferFungibleTokenParametersNormalised:
        return ParameterNormaliser.transfer_fungible_token(params, context)

    def build(self, params: TransferFungibleTokenParametersNormalised) -> Any:
        return self.builder.transfer_fungible_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Fungible token successfully transferred.\nTransaction ID: {raw.transaction_id}"

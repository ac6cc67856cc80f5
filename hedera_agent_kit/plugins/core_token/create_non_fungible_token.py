from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

CREATE_NON_FUNGIBLE_TOKEN_TOOL = "create_non_fungible_token_tool"


class CreateNonFungibleTokenTool(LedgerTool):
    method_name = CREATE_NON_FUNGIBLE_TOKEN_TOOL
    display_name = "Create Non-Fungible Token"
    failure_label = "Failed to create non-fungible token"
    parameters_model = CreateNonFungibleTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool creates a non-fungible token (NFT) collection on Hedera.

Parameters:
- token_name (string, required): The name of the collection
- token_symbol (string, required): The symbol of the collection
- max_supply (number, optional): Maximum number of NFTs, defaults to 100
- {PromptGenerator.get_account_parameter_description("treasury_account_id", context)}
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> CreateNonFungibleTokenParametersNormalised:
        return ParameterNormaliser.create_non_fungible_token(params, context)

    def build(self, params: CreateNonFungibleTokenParametersNormalised) -> Any:
        return self.builder.create_non_fungible_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return (
            f"Token created successfully.\n"
            f"Transaction ID: {raw.transaction_id}\n"
            f"Token ID: {raw.token_id}"
        )

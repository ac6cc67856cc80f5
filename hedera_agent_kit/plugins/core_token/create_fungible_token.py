from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

CREATE_FUNGIBLE_TOKEN_TOOL = "create_fungible_token_tool"


class CreateFungibleTokenTool(LedgerTool):
    method_name = CREATE_FUNGIBLE_TOKEN_TOOL
    display_name = "Create Fungible Token"
    failure_label = "Failed to create fungible token"
    parameters_model = CreateFungibleTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool creates a fungible token on Hedera.

Parameters:
- token_name (string, required): The name of the token
- token_symbol (string, required): The symbol of the token
- initial_supply (number, optional): Initial supply in display units, defaults to 0
- decimals (number, optional): Number of decimals, defaults to 0
- supply_type (string, optional): "finite" or "infinite", defaults to "infinite"
- max_supply (number, optional): Maximum supply, required for finite tokens
- {PromptGenerator.get_account_parameter_description("treasury_account_id", context)}
- is_supply_key (boolean, optional): Whether the operator key can mint more supply
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> CreateFungibleTokenParametersNormalised:
        return ParameterNormaliser.create_fungible_token(params, context)

    def build(self, params: CreateFungibleTokenParametersNormalised) -> Any:
        return self.builder.create_fungible_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return (
            f"Token created successfully.\n"
            f"Transaction ID: {raw.transaction_id}\n"
            f"Token ID: {raw.token_id}"
        )

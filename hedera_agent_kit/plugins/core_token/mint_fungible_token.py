from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

MINT_FUNGIBLE_TOKEN_TOOL = "mint_fungible_token_tool"


class MintFungibleTokenTool(LedgerTool):
    method_name = MINT_FUNGIBLE_TOKEN_TOOL
    display_name = "Mint Fungible Token"
    failure_label = "Failed to mint fungible token"
    parameters_model = MintFungibleTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool mints additional supply of an existing fungible token.

Parameters:
- token_id (string, required): The token to mint
- amount (number, required): Amount to mint in display units
- decimals (number, optional): Decimals of the token, defaults to 0
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> MintFungibleTokenParametersNormalised:
        return ParameterNormaliser.mint_fungible_token(params, context)

    def build(self, params: MintFungibleTokenParametersNormalised) -> Any:
        return self.builder.mint_fungible_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Tokens successfully minted.\nTransaction ID: {raw.transaction_id}"

from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

ASSOCIATE_TOKEN_TOOL = "associate_token_tool"


class AssociateTokenTool(LedgerTool):
    method_name = ASSOCIATE_TOKEN_TOOL
    display_name = "Associate Token"
    failure_label = "Failed to associate token"
    parameters_model = AssociateTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool associates one or more tokens with an account.

Parameters:
- token_ids (array of strings, required): The tokens to associate
- {PromptGenerator.get_account_parameter_description("account_id", context)}
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> AssociateTokenParametersNormalised:
        return ParameterNormaliser.associate_token(params, context)

    def build(self, params: AssociateTokenParametersNormalised) -> Any:
        return self.builder.associate_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Tokens successfully associated.\nTransaction ID: {raw.transaction_id}"

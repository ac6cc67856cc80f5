from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.account import (
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

DELETE_ACCOUNT_TOOL = "delete_account_tool"


class DeleteAccountTool(LedgerTool):
    method_name = DELETE_ACCOUNT_TOOL
    display_name = "Delete Account"
    failure_label = "Failed to delete account"
    parameters_model = DeleteAccountParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will delete an existing Hedera account and transfer its remaining balance.

Parameters:
- account_id (string, required): The account to delete
- {PromptGenerator.get_account_parameter_description("transfer_account_id", context)}
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> DeleteAccountParametersNormalised:
        return ParameterNormaliser.delete_account(params, context)

    def build(self, params: DeleteAccountParametersNormalised) -> Any:
        return self.builder.delete_account(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Account successfully deleted.\nTransaction ID: {raw.transaction_id}"

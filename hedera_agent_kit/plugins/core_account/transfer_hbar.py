from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.account import (
    TransferHbarParameters,
    TransferHbarParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

TRANSFER_HBAR_TOOL = "transfer_hbar_tool"


class TransferHbarTool(LedgerTool):
    method_name = TRANSFER_HBAR_TOOL
    display_name = "Transfer HBAR"
    failure_label = "Failed to transfer HBAR"
    parameters_model = TransferHbarParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will transfer HBAR to one or more accounts.

Parameters:
- transfers (array of objects, required): each with account_id (string) and amount (number, in HBAR)
- {PromptGenerator.get_account_parameter_description("source_account_id", context)}
- transaction_memo (string, optional): Memo for the transfer
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> TransferHbarParametersNormalised:
        return ParameterNormaliser.transfer_hbar(params, context)

    def build(self, params: TransferHbarParametersNormalised) -> Any:
        return self.builder.transfer_hbar(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"HBAR successfully transferred.\nTransaction ID: {raw.transaction_id}"

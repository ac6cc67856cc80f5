from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.account import (
    SignScheduleTransactionParameters,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

SIGN_SCHEDULE_TRANSACTION_TOOL = "sign_schedule_transaction_tool"


def post_process(response: RawTransactionResponse) -> str:
    return f"Transaction successfully signed. Transaction ID: {response.transaction_id}"


class SignScheduleTransactionTool(LedgerTool):
    method_name = SIGN_SCHEDULE_TRANSACTION_TOOL
    display_name = "Sign Scheduled Transaction"
    failure_label = "Failed to sign scheduled transaction"
    parameters_model = SignScheduleTransactionParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will sign a scheduled transaction and return the transaction ID.

Parameters:
- schedule_id (string, required): The ID of the scheduled transaction to sign
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def build(self, params: SignScheduleTransactionParameters) -> Any:
        return self.builder.sign_schedule_transaction(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return post_process(raw)

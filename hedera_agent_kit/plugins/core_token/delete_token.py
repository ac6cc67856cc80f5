from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import DeleteTokenParameters
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

DELETE_TOKEN_TOOL = "delete_token_tool"


class DeleteTokenTool(LedgerTool):
    method_name = DELETE_TOKEN_TOOL
    display_name = "Delete Token"
    failure_label = "Failed to delete token"
    parameters_model = DeleteTokenParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool deletes a token. The token's admin key must sign the transaction.

Parameters:
- token_id (string, required): The token to delete
"""

    def build(self, params: DeleteTokenParameters) -> Any:
        return self.builder.delete_token(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Token successfully deleted.\nTransaction ID: {raw.transaction_id}"

from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.consensus import DeleteTopicParameters
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

DELETE_TOPIC_TOOL = "delete_topic_tool"


class DeleteTopicTool(LedgerTool):
    method_name = DELETE_TOPIC_TOOL
    display_name = "Delete Topic"
    failure_label = "Failed to delete the topic"
    parameters_model = DeleteTopicParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will delete a given Hedera network topic.

Parameters:
- topic_id (string, required): ID of the topic to delete
"""

    def build(self, params: DeleteTopicParameters) -> Any:
        return self.builder.delete_topic(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Topic successfully deleted.\nTransaction ID: {raw.transaction_id}"

from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.consensus import SubmitTopicMessageParameters
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

SUBMIT_TOPIC_MESSAGE_TOOL = "submit_topic_message_tool"


class SubmitTopicMessageTool(LedgerTool):
    method_name = SUBMIT_TOPIC_MESSAGE_TOOL
    display_name = "Submit Topic Message"
    failure_label = "Failed to submit message to topic"
    parameters_model = SubmitTopicMessageParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will submit a message to a topic on the Hedera network.

Parameters:
- topic_id (string, required): The ID of the topic to submit the message to
- message (string, required): The message to submit to the topic
"""

    def build(self, params: SubmitTopicMessageParameters) -> Any:
        return self.builder.submit_topic_message(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Message submitted successfully with transaction id {raw.transaction_id}"

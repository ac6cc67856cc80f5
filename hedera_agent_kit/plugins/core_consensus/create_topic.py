from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.consensus import (
    CreateTopicParameters,
    CreateTopicParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

CREATE_TOPIC_TOOL = "create_topic_tool"


class CreateTopicTool(LedgerTool):
    method_name = CREATE_TOPIC_TOOL
    display_name = "Create Topic"
    failure_label = "Failed to create topic"
    parameters_model = CreateTopicParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will create a new topic on the Hedera Consensus Service.

Parameters:
- topic_memo (string, optional): A memo for the topic
- is_submit_key (boolean, optional): Whether to restrict submissions to the operator key, defaults to false
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> CreateTopicParametersNormalised:
        return ParameterNormaliser.create_topic(params, context)

    def build(self, params: CreateTopicParametersNormalised) -> Any:
        return self.builder.create_topic(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"Topic created successfully with topic id {raw.topic_id} and transaction id {raw.transaction_id}"

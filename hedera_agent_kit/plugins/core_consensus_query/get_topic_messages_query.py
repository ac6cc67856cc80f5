"""
Topic message query tool.

Reads historical messages through the mirror node; no transaction is
built, so no execution strategy is involved.
"""
from typing import Any, Dict, List

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.parameters.consensus import GetTopicMessagesParameters
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

GET_TOPIC_MESSAGES_QUERY_TOOL = "get_topic_messages_query_tool"


def post_process(topic_id: str, messages: List[Dict[str, Any]]) -> str:
    if not messages:
        return f"No messages found for topic {topic_id}."
    lines = [f"Messages for topic {topic_id}:"]
    for message in messages:
        lines.append(
            f"- #{message.get('sequence_number')} "
            f"({message.get('consensus_timestamp')}): {message.get('message')}"
        )
    return "\n".join(lines)


class GetTopicMessagesQueryTool(MirrorNodeQueryTool):
    method_name = GET_TOPIC_MESSAGES_QUERY_TOOL
    display_name = "Get Topic Messages"
    failure_label = "Failed to get topic messages"
    parameters_model = GetTopicMessagesParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will return the messages for a given Hedera topic.

Parameters:
- topic_id (string, required): The topic ID to query
- start_time (string, optional): ISO 8601 timestamp to start from
- end_time (string, optional): ISO 8601 timestamp to end at
- limit (number, optional): Maximum number of messages, defaults to 100
{PromptGenerator.get_parameter_usage_instructions()}
"""

    async def fetch(self, params: GetTopicMessagesParameters) -> List[Dict[str, Any]]:
        return await self.mirrornode.get_topic_messages(params)

    def to_raw(
        self, params: GetTopicMessagesParameters, messages: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        return {
            "status": TransactionStatus.SUCCESS.value,
            "topic_id": params.topic_id,
            "messages": messages,
        }

    def format_result(
        self, params: GetTopicMessagesParameters, messages: List[Dict[str, Any]]
    ) -> str:
        return post_process(params.topic_id, messages)

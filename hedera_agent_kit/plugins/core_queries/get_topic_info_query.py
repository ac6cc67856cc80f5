from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.parameters.queries import TopicInfoQueryParameters
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

GET_TOPIC_INFO_QUERY_TOOL = "get_topic_info_query_tool"


def post_process(topic_id: str, topic: Dict[str, Any]) -> str:
    lines = [
        f"Details for topic {topic_id}:",
        f"- Memo: {topic.get('memo') or 'none'}",
        f"- Admin key: {topic.get('admin_key') or 'none'}",
        f"- Submit key: {topic.get('submit_key') or 'none'}",
        f"- Created: {topic.get('created_timestamp')}",
    ]
    return "\n".join(lines)


class GetTopicInfoQueryTool(MirrorNodeQueryTool):
    method_name = GET_TOPIC_INFO_QUERY_TOOL
    display_name = "Get Topic Info"
    failure_label = "Failed to get topic info"
    parameters_model = TopicInfoQueryParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the details of a Hedera consensus topic.

Parameters:
- topic_id (string, required): The topic ID to query
{PromptGenerator.get_parameter_usage_instructions()}
"""

    async def fetch(self, params: TopicInfoQueryParameters) -> Dict[str, Any]:
        return await self.mirrornode.get_topic_info(params.topic_id)

    def to_raw(
        self, params: TopicInfoQueryParameters, topic: Dict[str, Any]
    ) -> Dict[str, Any]:
        return {
            "status": TransactionStatus.SUCCESS.value,
            "topic_id": params.topic_id,
            "topic": topic,
        }

    def format_result(self, params: TopicInfoQueryParameters, topic: Dict[str, Any]) -> str:
        return post_process(params.topic_id, topic)

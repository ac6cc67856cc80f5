from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .get_topic_messages_query import (
    GET_TOPIC_MESSAGES_QUERY_TOOL,
    GetTopicMessagesQueryTool,
)


class CoreConsensusQueryPlugin(BasePlugin):
    def __init__(self):
        super().__init__(
            id="core-consensus-query-plugin",
            name="Core Consensus Query Plugin",
            description="A plugin for Hedera Consensus Service queries",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        return [GetTopicMessagesQueryTool(context.context, context.config.get("mirrornode"))]


core_consensus_query_plugin_tool_names = {
    "GET_TOPIC_MESSAGES_QUERY_TOOL": GET_TOPIC_MESSAGES_QUERY_TOOL,
}

__all__ = [
    "CoreConsensusQueryPlugin",
    "core_consensus_query_plugin_tool_names",
    "GetTopicMessagesQueryTool",
]

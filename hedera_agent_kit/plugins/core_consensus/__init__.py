"""Core consensus plugin for the Hedera Agent Kit."""

from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .create_topic import CREATE_TOPIC_TOOL, CreateTopicTool
from .delete_topic import DELETE_TOPIC_TOOL, DeleteTopicTool
from .submit_topic_message import SUBMIT_TOPIC_MESSAGE_TOOL, SubmitTopicMessageTool


class CoreConsensusPlugin(BasePlugin):
    def __init__(self):
        super().__init__(
            id="core-consensus-plugin",
            name="Core Consensus Plugin",
            description="A plugin for the Hedera Consensus Service",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        builder = context.config.get("builder")
        return [
            CreateTopicTool(context.context, builder),
            DeleteTopicTool(context.context, builder),
            SubmitTopicMessageTool(context.context, builder),
        ]


core_consensus_plugin_tool_names = {
    "CREATE_TOPIC_TOOL": CREATE_TOPIC_TOOL,
    "DELETE_TOPIC_TOOL": DELETE_TOPIC_TOOL,
    "SUBMIT_TOPIC_MESSAGE_TOOL": SUBMIT_TOPIC_MESSAGE_TOOL,
}

__all__ = [
    "CoreConsensusPlugin",
    "core_consensus_plugin_tool_names",
    "CreateTopicTool",
    "DeleteTopicTool",
    "SubmitTopicMessageTool",
]

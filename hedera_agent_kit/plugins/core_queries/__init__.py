from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .get_account_query import GET_ACCOUNT_QUERY_TOOL, GetAccountQueryTool
from .get_account_token_balances_query import (
    GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
    GetAccountTokenBalancesQueryTool,
)
from .get_hbar_balance_query import GET_HBAR_BALANCE_QUERY_TOOL, GetHbarBalanceQueryTool
from .get_token_info_query import GET_TOKEN_INFO_QUERY_TOOL, GetTokenInfoQueryTool
from .get_topic_info_query import GET_TOPIC_INFO_QUERY_TOOL, GetTopicInfoQueryTool


class CoreQueriesPlugin(BasePlugin):
    """Read-only account, token and topic queries served by the mirror node."""

    def __init__(self):
        super().__init__(
            id="core-queries-plugin",
            name="Core Queries Plugin",
            description="A plugin for querying accounts, tokens and topics",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        mirrornode = context.config.get("mirrornode")
        return [
            GetHbarBalanceQueryTool(context.context, mirrornode),
            GetAccountQueryTool(context.context, mirrornode),
            GetAccountTokenBalancesQueryTool(context.context, mirrornode),
            GetTokenInfoQueryTool(context.context, mirrornode),
            GetTopicInfoQueryTool(context.context, mirrornode),
        ]


core_queries_plugin_tool_names = {
    "GET_HBAR_BALANCE_QUERY_TOOL": GET_HBAR_BALANCE_QUERY_TOOL,
    "GET_ACCOUNT_QUERY_TOOL": GET_ACCOUNT_QUERY_TOOL,
    "GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL": GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
    "GET_TOKEN_INFO_QUERY_TOOL": GET_TOKEN_INFO_QUERY_TOOL,
    "GET_TOPIC_INFO_QUERY_TOOL": GET_TOPIC_INFO_QUERY_TOOL,
}

__all__ = [
    "CoreQueriesPlugin",
    "core_queries_plugin_tool_names",
    "GetHbarBalanceQueryTool",
    "GetAccountQueryTool",
    "GetAccountTokenBalancesQueryTool",
    "GetTokenInfoQueryTool",
    "GetTopicInfoQueryTool",
]

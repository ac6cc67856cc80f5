from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .create_account import CREATE_ACCOUNT_TOOL, CreateAccountTool
from .delete_account import DELETE_ACCOUNT_TOOL, DeleteAccountTool
from .sign_schedule_transaction import (
    SIGN_SCHEDULE_TRANSACTION_TOOL,
    SignScheduleTransactionTool,
)
from .transfer_hbar import TRANSFER_HBAR_TOOL, TransferHbarTool


class CoreAccountPlugin(BasePlugin):
    """Tools for the Hedera Account Service."""

    def __init__(self):
        super().__init__(
            id="core-account-plugin",
            name="Core Account Plugin",
            description="A plugin for the Hedera Account Service",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        builder = context.config.get("builder")
        return [
            TransferHbarTool(context.context, builder),
            CreateAccountTool(context.context, builder),
            DeleteAccountTool(context.context, builder),
            SignScheduleTransactionTool(context.context, builder),
        ]


core_account_plugin_tool_names = {
    "TRANSFER_HBAR_TOOL": TRANSFER_HBAR_TOOL,
    "CREATE_ACCOUNT_TOOL": CREATE_ACCOUNT_TOOL,
    "DELETE_ACCOUNT_TOOL": DELETE_ACCOUNT_TOOL,
    "SIGN_SCHEDULE_TRANSACTION_TOOL": SIGN_SCHEDULE_TRANSACTION_TOOL,
}

__all__ = [
    "CoreAccountPlugin",
    "core_account_plugin_tool_names",
    "TransferHbarTool",
    "CreateAccountTool",
    "DeleteAccountTool",
    "SignScheduleTransactionTool",
]

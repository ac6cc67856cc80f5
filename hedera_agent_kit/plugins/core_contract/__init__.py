from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .deploy_contract import DEPLOY_CONTRACT_TOOL, DeployContractTool


class CoreContractPlugin(BasePlugin):
    def __init__(self):
        super().__init__(
            id="core-contract-plugin",
            name="Core Contract Plugin",
            description="A plugin for the Hedera Smart Contract Service",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        return [DeployContractTool(context.context, context.config.get("builder"))]


core_contract_plugin_tool_names = {
    "DEPLOY_CONTRACT_TOOL": DEPLOY_CONTRACT_TOOL,
}

__all__ = [
    "CoreContractPlugin",
    "core_contract_plugin_tool_names",
    "DeployContractTool",
]

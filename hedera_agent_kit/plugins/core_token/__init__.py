from typing import List

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.base import BasePlugin
from .associate_token import ASSOCIATE_TOKEN_TOOL, AssociateTokenTool
from .create_fungible_token import CREATE_FUNGIBLE_TOKEN_TOOL, CreateFungibleTokenTool
from .create_non_fungible_token import (
    CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    CreateNonFungibleTokenTool,
)
from .delete_token import DELETE_TOKEN_TOOL, DeleteTokenTool
from .mint_fungible_token import MINT_FUNGIBLE_TOKEN_TOOL, MintFungibleTokenTool
from .transfer_fungible_token import (
    TRANSFER_FUNGIBLE_TOKEN_TOOL,
    TransferFungibleTokenTool,
)
from .transfer_nft import TRANSFER_NFT_TOOL, TransferNftTool


class CoreTokenPlugin(BasePlugin):
    """Tools for the Hedera Token Service."""

    def __init__(self):
        super().__init__(
            id="core-token-plugin",
            name="Core Token Plugin",
            description="A plugin for the Hedera Token Service",
            version="1.0.0",
            author="Hedera Agent Kit",
        )

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        builder = context.config.get("builder")
        return [
            CreateFungibleTokenTool(context.context, builder),
            CreateNonFungibleTokenTool(context.context, builder),
            MintFungibleTokenTool(context.context, builder),
            AssociateTokenTool(context.context, builder),
            TransferFungibleTokenTool(context.context, builder),
            TransferNftTool(context.context, builder),
            DeleteTokenTool(context.context, builder),
        ]


core_token_plugin_tool_names = {
    "CREATE_FUNGIBLE_TOKEN_TOOL": CREATE_FUNGIBLE_TOKEN_TOOL,
    "CREATE_NON_FUNGIBLE_TOKEN_TOOL": CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    "MINT_FUNGIBLE_TOKEN_TOOL": MINT_FUNGIBLE_TOKEN_TOOL,
    "ASSOCIATE_TOKEN_TOOL": ASSOCIATE_TOKEN_TOOL,
    "TRANSFER_FUNGIBLE_TOKEN_TOOL": TRANSFER_FUNGIBLE_TOKEN_TOOL,
    "TRANSFER_NFT_TOOL": TRANSFER_NFT_TOOL,
    "DELETE_TOKEN_TOOL": DELETE_TOKEN_TOOL,
}

__all__ = [
    "CoreTokenPlugin",
    "core_token_plugin_tool_names",
    "CreateFungibleTokenTool",
    "CreateNonFungibleTokenTool",
    "MintFungibleTokenTool",
    "AssociateTokenTool",
    "TransferFungibleTokenTool",
    "TransferNftTool",
    "DeleteTokenTool",
]

"""
Hedera Agent Kit - ledger operations exposed as pluggable tools.

This package provides a plugin registry, a dual-mode transaction execution
strategy and core plugins for the account, token, consensus and smart
contract services.
"""

# Client interface (main entry point)
from hedera_agent_kit.client.hedera_agent_kit import HederaAgentKit

# Factory for creating toolkits
from hedera_agent_kit.factories.toolkit_factory import HederaAgentKitFactory

# Plugins, tools and strategies
from hedera_agent_kit.plugins.registry import PluginRegistry
from hedera_agent_kit.plugins.base import BasePlugin
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.interfaces.plugins.plugins import Plugin, Tool
from hedera_agent_kit.interfaces.ledger.ledger import (
    LedgerClient,
    MirrorNode,
    TransactionBuilder,
)
from hedera_agent_kit.strategies.tx_mode import (
    ExecuteStrategy,
    ReturnBytesStrategy,
    get_strategy,
    handle_transaction,
)
from hedera_agent_kit.domains.context import Context, PluginContext
from hedera_agent_kit.domains.enums import ExecutionMode, TransactionStatus
from hedera_agent_kit.domains.results import RawTransactionResponse, ToolResult
from hedera_agent_kit.domains.exceptions import (
    DuplicatePluginError,
    HederaAgentKitError,
    ParameterValidationError,
    TransactionFailedError,
)

# Package metadata
__all__ = [
    # Main client interfaces
    "HederaAgentKit",
    # Factories
    "HederaAgentKitFactory",
    # Plugins and tools
    "PluginRegistry",
    "BasePlugin",
    "LedgerTool",
    "MirrorNodeQueryTool",
    "Plugin",
    "Tool",
    # Ledger collaborators
    "LedgerClient",
    "MirrorNode",
    "TransactionBuilder",
    # Strategies
    "ExecuteStrategy",
    "ReturnBytesStrategy",
    "get_strategy",
    "handle_transaction",
    # Domain
    "Context",
    "PluginContext",
    "ExecutionMode",
    "TransactionStatus",
    "RawTransactionResponse",
    "ToolResult",
    "DuplicatePluginError",
    "HederaAgentKitError",
    "ParameterValidationError",
    "TransactionFailedError",
]

"""
Simplified client interface for the Hedera Agent Kit.

This module provides a clean API for end users to discover and run
ledger tools without dealing with plugin wiring.
"""
import importlib.util
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.results import ToolResult
from hedera_agent_kit.factories.toolkit_factory import HederaAgentKitFactory
from hedera_agent_kit.interfaces.client.client import (
    HederaAgentKit as HederaAgentKitInterface,
)
from hedera_agent_kit.interfaces.plugins.plugins import Plugin, Tool
from hedera_agent_kit.plugins.registry import maybe_await
from hedera_agent_kit.plugins.tools.ledger_tool import failure_result

logger = logging.getLogger(__name__)


class HederaAgentKit(HederaAgentKitInterface):
    """Entry point bundling a plugin registry with a ledger client."""

    def __init__(self, config_path: str = None, config: Dict[str, Any] = None):
        """Initialize the toolkit from config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary
        """
        if not config and not config_path:
            raise ValueError("Either config or config_path must be provided")

        if config_path:
            with open(config_path, "r") as f:
                if config_path.endswith(".json"):
                    config = json.load(f)
                else:
                    # Assume it's a Python file
                    spec = importlib.util.spec_from_file_location("config", config_path)
                    config_module = importlib.util.module_from_spec(spec)
                    spec.loader.exec_module(config_module)
                    config = config_module.config

        self.registry, self.client, self._pending_plugins = (
            HederaAgentKitFactory.create_from_config(config)
        )
        self.allowed_tools: Optional[List[str]] = config.get("tools")

    @property
    def context(self) -> Context:
        return self.registry.context.context

    async def start(self) -> None:
        """Register every configured plugin that is not yet registered.

        If a registration fails, every registered plugin is unregistered
        and the configured plugins stay pending before the error propagates.
        """
        started: List[Plugin] = []
        try:
            while self._pending_plugins:
                await self.registry.register_plugin(self._pending_plugins[0])
                started.append(self._pending_plugins.pop(0))
        except BaseException:
            await self.registry.unregister_all_plugins()
            self._pending_plugins[:0] = started
            raise

    async def register_plugin(self, plugin: Plugin) -> None:
        await self.registry.register_plugin(plugin)

    async def get_tools_by_plugin(self) -> List[Tuple[str, Tool]]:
        """Pair every exposed tool with the id of the plugin providing it.

        Tools outside the allow-list are dropped, and tools whose method
        repeats an earlier tool's method are skipped.
        """
        entries: List[Tuple[str, Tool]] = []
        seen = set()
        for plugin in self.registry.get_all_plugins():
            for tool in await maybe_await(plugin.get_tools(self.registry.context)):
                if self.allowed_tools is not None and tool.method not in self.allowed_tools:
                    continue
                if tool.method in seen:
                    logger.warning(f"Skipping duplicate tool method: {tool.method}")
                    continue
                seen.add(tool.method)
                entries.append((plugin.id, tool))
        return entries

    async def get_tools(self) -> List[Tool]:
        """Get the tools of all registered plugins, filtered by the allow-list."""
        return [tool for _, tool in await self.get_tools_by_plugin()]

    async def run(
        self, method: str, params: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        """Execute a tool by method name.

        Args:
            method: Method name of the tool
            params: Raw tool parameters

        Returns:
            ToolResult; an unknown method yields a failed result
        """
        for tool in await self.get_tools():
            if tool.method == method:
                return await tool.execute(self.client, self.context, params or {})
        return failure_result(f"Tool {method} not found")

    async def shutdown(self) -> None:
        await self.registry.unregister_all_plugins()

    async def __aenter__(self) -> "HederaAgentKit":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()

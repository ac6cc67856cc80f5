"""
Plugin registry for the Hedera Agent Kit.

This module implements the concrete PluginRegistry that manages the
initialize/cleanup lifecycle of plugins and aggregates their tools.
"""
import inspect
from typing import Any, Dict, List, Optional

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.domains.exceptions import DuplicatePluginError
from hedera_agent_kit.interfaces.plugins.plugins import (
    PluginRegistry as PluginRegistryInterface,
)
from hedera_agent_kit.interfaces.plugins.plugins import Plugin, Tool


async def maybe_await(result: Any) -> Any:
    # plugin hooks may be implemented synchronously
    if inspect.isawaitable(result):
        return await result
    return result


class PluginRegistry(PluginRegistryInterface):
    """Session-scoped registry of plugins keyed by plugin id."""

    def __init__(self, context: Optional[PluginContext] = None):
        """Initialize an empty registry sharing one plugin context."""
        self.context = context or PluginContext()
        self._plugins: Dict[str, Plugin] = {}

    @property
    def logger(self):
        return self.context.logger

    async def register_plugin(self, plugin: Plugin) -> None:
        """Initialize a plugin and register it under its id.

        Args:
            plugin: The plugin to register

        Raises:
            DuplicatePluginError: if a plugin with the same id is registered
        """
        if plugin.id in self._plugins:
            raise DuplicatePluginError(plugin.id)

        await maybe_await(plugin.initialize(self.context))

        # a registration for the same id may have completed while initialize was suspended
        if plugin.id in self._plugins:
            if self._plugins[plugin.id] is not plugin:
                await self._cleanup(plugin)
            raise DuplicatePluginError(plugin.id)

        self._plugins[plugin.id] = plugin
        self.logger.info(f"Plugin registered: {plugin.name} ({plugin.id})")

    def get_plugin(self, plugin_id: str) -> Optional[Plugin]:
        """Get a plugin by id.

        Returns:
            Plugin instance or None if not found
        """
        return self._plugins.get(plugin_id)

    def get_all_plugins(self) -> List[Plugin]:
        """Get all registered plugins in registration order."""
        return list(self._plugins.values())

    async def get_all_tools(self) -> List[Tool]:
        """Collect the tools of every plugin in registration order.

        Errors raised by a plugin's get_tools propagate to the caller.
        """
        tools: List[Tool] = []
        for plugin in list(self._plugins.values()):
            tools.extend(await maybe_await(plugin.get_tools(self.context)))
        return tools

    async def unregister_plugin(self, plugin_id: str) -> bool:
        """Clean up and remove a plugin.

        Cleanup failures are logged and never prevent removal.

        Returns:
            True if the plugin was registered, False otherwise
        """
        plugin = self._plugins.get(plugin_id)
        if plugin is None:
            return False

        await self._cleanup(plugin)
        self._plugins.pop(plugin_id, None)
        self.logger.info(f"Plugin unregistered: {plugin.name} ({plugin_id})")
        return True

    async def unregister_all_plugins(self) -> None:
        """Unregister every plugin, continuing past cleanup failures."""
        for plugin_id in list(self._plugins.keys()):
            await self.unregister_plugin(plugin_id)

    async def _cleanup(self, plugin: Plugin) -> None:
        try:
            await maybe_await(plugin.cleanup())
        except Exception as e:
            self.logger.error(f"Error during plugin cleanup for {plugin.id}: {e}")

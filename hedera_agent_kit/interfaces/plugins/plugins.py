"""
Plugin system interfaces.

These interfaces define the contracts for the plugin system,
enabling extensibility through tools and plugins.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from hedera_agent_kit.domains.context import Context, PluginContext
from hedera_agent_kit.domains.results import ToolResult


class Tool(ABC):
    """Interface for a single invocable unit of ledger work."""

    @property
    @abstractmethod
    def method(self) -> str:
        """Get the unique method name of the tool."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the display name of the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description of the tool."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> Type[BaseModel]:
        """Get the pydantic model describing the tool parameters."""
        pass

    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema for the tool parameters."""
        return self.parameters.model_json_schema()

    @abstractmethod
    async def execute(
        self, client: Any, context: Context, params: Dict[str, Any]
    ) -> ToolResult:
        """Execute the tool with the given parameters."""
        pass


class Plugin(ABC):
    """Interface for plugins that bundle tools."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Get the unique id of the plugin."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the plugin."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description of the plugin."""
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        """Get the version of the plugin."""
        pass

    @property
    @abstractmethod
    def author(self) -> str:
        """Get the author of the plugin."""
        pass

    @abstractmethod
    async def initialize(self, context: PluginContext) -> None:
        """Prepare the plugin; called once per registration."""
        pass

    @abstractmethod
    async def get_tools(self, context: PluginContext) -> List[Tool]:
        """Create the tools this plugin provides."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Release resources held by the plugin."""
        pass


class PluginRegistry(ABC):
    """Interface for the plugin registry."""

    @abstractmethod
    async def register_plugin(self, plugin: Plugin) -> None:
        """Initialize and register a plugin."""
        pass

    @abstractmethod
    def get_plugin(self, plugin_id: str) -> Optional[Plugin]:
        """Get a plugin by id."""
        pass

    @abstractmethod
    def get_all_plugins(self) -> List[Plugin]:
        """Get all registered plugins in registration order."""
        pass

    @abstractmethod
    async def get_all_tools(self) -> List[Tool]:
        """Get the tools of every registered plugin."""
        pass

    @abstractmethod
    async def unregister_plugin(self, plugin_id: str) -> bool:
        """Clean up and remove a plugin."""
        pass

    @abstractmethod
    async def unregister_all_plugins(self) -> None:
        """Clean up and remove every plugin."""
        pass

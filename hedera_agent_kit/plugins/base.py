"""
Base plugin implementation.

Concrete plugins subclass BasePlugin and only implement get_tools;
initialize and cleanup default to keeping and dropping the context.
"""
from typing import List, Optional

from hedera_agent_kit.domains.context import PluginContext, PluginDescriptor
from hedera_agent_kit.interfaces.plugins.plugins import Plugin, Tool


class BasePlugin(Plugin):
    """Base class for plugins with an immutable descriptor."""

    def __init__(
        self,
        id: str,
        name: str,
        description: str = "",
        version: str = "1.0.0",
        author: str = "",
    ):
        self._descriptor = PluginDescriptor(
            id=id, name=name, description=description, version=version, author=author
        )
        self._context: Optional[PluginContext] = None

    @property
    def descriptor(self) -> PluginDescriptor:
        return self._descriptor

    @property
    def id(self) -> str:
        return self._descriptor.id

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def description(self) -> str:
        return self._descriptor.description

    @property
    def version(self) -> str:
        return self._descriptor.version

    @property
    def author(self) -> str:
        return self._descriptor.author

    @property
    def context(self) -> Optional[PluginContext]:
        return self._context

    async def initialize(self, context: PluginContext) -> None:
        self._context = context

    async def get_tools(self, context: PluginContext) -> List[Tool]:
        raise NotImplementedError("Plugin must implement get_tools method")

    async def cleanup(self) -> None:
        self._context = None

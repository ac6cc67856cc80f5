from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from hedera_agent_kit.domains.results import ToolResult
from hedera_agent_kit.interfaces.plugins.plugins import Tool


class HederaAgentKit(ABC):
    """Interface for the Hedera Agent Kit client."""

    @abstractmethod
    async def start(self) -> None:
        """Register the configured plugins."""
        pass

    @abstractmethod
    async def get_tools(self) -> List[Tool]:
        """Get the tools exposed by the toolkit."""
        pass

    @abstractmethod
    async def run(
        self, method: str, params: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        """Execute a tool by method name."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Unregister every plugin."""
        pass

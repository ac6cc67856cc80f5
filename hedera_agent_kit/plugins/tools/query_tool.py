"""
MirrorNodeQueryTool implementation for the Hedera Agent Kit.

Query tools read ledger state through the mirror node. No transaction is
built, so no execution strategy is involved and the client is unused.
"""
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.results import ToolResult
from hedera_agent_kit.interfaces.ledger.ledger import MirrorNode
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.plugins.tools.ledger_tool import failure_result
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser

logger = logging.getLogger(__name__)


class MirrorNodeQueryTool(Tool):
    """Base class for read-only tools backed by the mirror node.

    Subclasses set the class attributes and implement ``fetch`` and
    ``format_result``. ``to_raw`` shapes the raw result and must keep the
    ``status`` key.
    """

    method_name: str = ""
    display_name: str = ""
    failure_label: str = "Failed to query the mirror node"
    parameters_model: Type[BaseModel] = BaseModel

    def __init__(self, context: Optional[Context] = None, mirrornode: MirrorNode = None):
        self._context = context or Context()
        self._mirrornode = mirrornode
        self._description = self.build_description(self._context)

    @property
    def method(self) -> str:
        return self.method_name

    @property
    def name(self) -> str:
        return self.display_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> Type[BaseModel]:
        return self.parameters_model

    @property
    def mirrornode(self) -> MirrorNode:
        return self._mirrornode

    def build_description(self, context: Context) -> str:
        return self.display_name

    def normalise(self, params: Dict[str, Any], context: Context) -> BaseModel:
        return ParameterNormaliser.parse(self.parameters_model, params)

    async def fetch(self, params: BaseModel) -> Any:
        raise NotImplementedError("Tool must implement fetch method")

    def to_raw(self, params: BaseModel, data: Any) -> Dict[str, Any]:
        return {"status": TransactionStatus.SUCCESS.value, "data": data}

    def format_result(self, params: BaseModel, data: Any) -> str:
        raise NotImplementedError("Tool must implement format_result method")

    async def execute(
        self, client: Any, context: Context, params: Dict[str, Any]
    ) -> ToolResult:
        """Normalise parameters, query the mirror node and describe the data."""
        context = context or self._context
        try:
            if self._mirrornode is None:
                raise ValueError("No mirror node configured")
            normalised = self.normalise(params, context)
            data = await self.fetch(normalised)
            return ToolResult(
                raw=self.to_raw(normalised, data),
                human_message=self.format_result(normalised, data),
            )
        except Exception as e:
            logger.error(f"{self.failure_label}: {e}")
            return failure_result(self.failure_label, e)

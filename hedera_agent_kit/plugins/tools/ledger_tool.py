"""
LedgerTool implementation for the Hedera Agent Kit.

This module provides the base class for tools that construct a ledger
transaction and complete it through the execution strategy selected by
the call context.
"""
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.results import RawTransactionResponse, ToolResult
from hedera_agent_kit.interfaces.ledger.ledger import TransactionBuilder
from hedera_agent_kit.interfaces.plugins.plugins import Tool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.strategies.tx_mode import handle_transaction, unsigned_message

logger = logging.getLogger(__name__)


def failure_result(label: str, error: Optional[Exception] = None) -> ToolResult:
    """Build a failed ToolResult for an error raised before or during execution."""
    detail = str(error) if error is not None else ""
    return ToolResult(
        raw=RawTransactionResponse(
            status=TransactionStatus.INVALID_TRANSACTION.value, error=detail or None
        ),
        human_message=f"{label}: {detail}" if detail else label,
    )


class LedgerTool(Tool):
    """Base class for tools that submit a ledger transaction.

    Subclasses set the class attributes and implement ``build`` and
    ``format_result``; parameter normalisation defaults to validating
    against ``parameters_model``.
    """

    method_name: str = ""
    display_name: str = ""
    failure_label: str = "Failed to execute transaction"
    parameters_model: Type[BaseModel] = BaseModel

    def __init__(self, context: Optional[Context] = None, builder: TransactionBuilder = None):
        self._context = context or Context()
        self._builder = builder
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
    def builder(self) -> TransactionBuilder:
        if self._builder is None:
            raise ValueError(f"No transaction builder configured for {self.method}")
        return self._builder

    def build_description(self, context: Context) -> str:
        return self.display_name

    def normalise(self, params: Dict[str, Any], context: Context) -> BaseModel:
        return ParameterNormaliser.parse(self.parameters_model, params)

    def build(self, params: BaseModel) -> Any:
        raise NotImplementedError("Tool must implement build method")

    def format_result(self, raw: RawTransactionResponse) -> str:
        raise NotImplementedError("Tool must implement format_result method")

    def post_process(self, raw: RawTransactionResponse) -> str:
        if raw.bytes is not None:
            return unsigned_message(raw)
        return self.format_result(raw)

    async def execute(
        self, client: Any, context: Context, params: Dict[str, Any]
    ) -> ToolResult:
        """Normalise parameters, build the transaction and complete it."""
        context = context or self._context
        try:
            normalised = self.normalise(params, context)
            transaction = self.build(normalised)
            return await handle_transaction(
                transaction,
                client,
                context,
                self.post_process,
                failure_label=self.failure_label,
            )
        except Exception as e:
            logger.error(f"{self.failure_label}: {e}")
            return failure_result(self.failure_label, e)

from abc import ABC, abstractmethod
from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.results import RawTransactionResponse


class TxModeStrategy(ABC):
    """Interface for completing a constructed transaction."""

    @abstractmethod
    async def handle(
        self, transaction: Any, client: Any, context: Context
    ) -> RawTransactionResponse:
        """Complete the transaction and describe the outcome."""
        pass

"""
Dual-mode transaction completion.

Tools build a transaction and hand it to ``handle_transaction``; the
strategy selected by ``Context.mode`` decides how it is completed.
"""
import base64
import logging
from typing import Any, Callable, Dict, Optional

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import ExecutionMode, TransactionStatus
from hedera_agent_kit.domains.exceptions import TransactionFailedError
from hedera_agent_kit.domains.results import RawTransactionResponse, ToolResult
from hedera_agent_kit.interfaces.strategies.strategies import TxModeStrategy

logger = logging.getLogger(__name__)

PostProcess = Callable[[RawTransactionResponse], str]


class ExecuteStrategy(TxModeStrategy):
    """Submit the transaction and wait for its receipt."""

    async def handle(
        self, transaction: Any, client: Any, context: Context
    ) -> RawTransactionResponse:
        try:
            receipt = await client.submit(transaction)
            if receipt is None:
                raise ValueError("Ledger client returned no receipt")
            status = str(getattr(receipt.status, "value", receipt.status))
            raw = RawTransactionResponse(
                status=status,
                transaction_id=receipt.transaction_id,
                account_id=receipt.account_id,
                token_id=receipt.token_id,
                topic_id=receipt.topic_id,
                schedule_id=receipt.schedule_id,
                contract_id=receipt.contract_id,
            )
        except TransactionFailedError as e:
            logger.error(f"Transaction rejected with status {e.status}: {e}")
            return RawTransactionResponse(status=str(e.status), error=str(e))
        except Exception as e:
            logger.error(f"Error submitting transaction: {e}")
            return RawTransactionResponse(
                status=TransactionStatus.INVALID_TRANSACTION.value, error=str(e)
            )

        if status != TransactionStatus.SUCCESS.value:
            raw.error = f"Transaction failed with status {status}"
        return raw


class ReturnBytesStrategy(TxModeStrategy):
    """Serialize the unsigned transaction for an external signer."""

    async def handle(
        self, transaction: Any, client: Any, context: Context
    ) -> RawTransactionResponse:
        payload = client.to_bytes(transaction, payer_account_id=context.account_id)
        return RawTransactionResponse(
            status=TransactionStatus.PENDING_SIGNATURE.value,
            bytes=base64.b64encode(payload).decode("ascii"),
        )


_STRATEGIES: Dict[ExecutionMode, TxModeStrategy] = {
    ExecutionMode.EXECUTE: ExecuteStrategy(),
    ExecutionMode.RETURN_BYTES: ReturnBytesStrategy(),
}


def get_strategy(context: Optional[Context]) -> TxModeStrategy:
    """Map the context's execution mode to its strategy."""
    mode = context.mode if context is not None else ExecutionMode.EXECUTE
    try:
        return _STRATEGIES[ExecutionMode(mode)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported execution mode: {mode}")


def unsigned_message(raw: RawTransactionResponse) -> str:
    return f"Transaction prepared for external signing. Transaction bytes: {raw.bytes}"


async def handle_transaction(
    transaction: Any,
    client: Any,
    context: Context,
    post_process: PostProcess,
    failure_label: str = "Transaction failed",
) -> ToolResult:
    """Complete a transaction and describe the result.

    Args:
        transaction: Unsigned SDK transaction
        client: Ledger client used by the strategy
        context: Execution context selecting the strategy
        post_process: Maps a successful raw response to a message
        failure_label: Prefix for the message of a failed transaction

    Returns:
        ToolResult pairing the raw response with a human readable message
    """
    raw = await get_strategy(context).handle(transaction, client, context)
    if not raw.succeeded:
        return ToolResult(raw=raw, human_message=f"{failure_label}: {raw.error}")
    return ToolResult(raw=raw, human_message=post_process(raw))

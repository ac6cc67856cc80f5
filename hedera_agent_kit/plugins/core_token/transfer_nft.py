from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.token import (
    TransferNftParameters,
    TransferNftParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

TRANSFER_NFT_TOOL = "transfer_nft_tool"


class TransferNftTool(LedgerTool):
    method_name = TRANSFER_NFT_TOOL
    display_name = "Transfer NFT"
    failure_label = "Failed to transfer NFT"
    parameters_model = TransferNftParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool transfers a single non-fungible token serial to another account.

Parameters:
- token_id (string, required): The NFT collection token ID
- serial_number (number, required): Serial number of the NFT to transfer
- to_account_id (string, required): The recipient account
- {PromptGenerator.get_account_parameter_description("from_account_id", context)}
- transaction_memo (string, optional): Memo for the transfer
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> TransferNftParametersNormalised:
        return ParameterNormaliser.transfer_nft(params, context)

    def build(self, params: TransferNftParametersNormalised) -> Any:
        return self.builder.transfer_nft(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return f"NFT successfully transferred.\nTransaction ID: {raw.transaction_id}"

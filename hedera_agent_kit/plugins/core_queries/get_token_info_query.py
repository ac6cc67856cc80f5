from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.parameters.queries import TokenInfoQueryParameters
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

GET_TOKEN_INFO_QUERY_TOOL = "get_token_info_query_tool"


def post_process(token_id: str, token: Dict[str, Any]) -> str:
    lines = [
        f"Details for token {token_id}:",
        f"- Name: {token.get('name')} ({token.get('symbol')})",
        f"- Type: {token.get('type')}",
        f"- Decimals: {token.get('decimals')}",
        f"- Total supply: {token.get('total_supply')}",
        f"- Max supply: {token.get('max_supply') or 'unlimited'}",
        f"- Treasury: {token.get('treasury_account_id')}",
    ]
    return "\n".join(lines)


class GetTokenInfoQueryTool(MirrorNodeQueryTool):
    method_name = GET_TOKEN_INFO_QUERY_TOOL
    display_name = "Get Token Info"
    failure_label = "Failed to get token info"
    parameters_model = TokenInfoQueryParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the details of a Hedera token.

Parameters:
- token_id (string, required): The token ID to query
{PromptGenerator.get_parameter_usage_instructions()}
"""

    async def fetch(self, params: TokenInfoQueryParameters) -> Dict[str, Any]:
        return await self.mirrornode.get_token_info(params.token_id)

    def to_raw(
        self, params: TokenInfoQueryParameters, token: Dict[str, Any]
    ) -> Dict[str, Any]:
        return {
            "status": TransactionStatus.SUCCESS.value,
            "token_id": params.token_id,
            "token": token,
        }

    def format_result(self, params: TokenInfoQueryParameters, token: Dict[str, Any]) -> str:
        return post_process(params.token_id, token)

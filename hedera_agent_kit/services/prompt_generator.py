"""
Description text shared by tool prompts.
"""
from typing import Optional

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import ExecutionMode


class PromptGenerator:
    """Builds the context-aware parts of tool descriptions."""

    @staticmethod
    def get_context_snippet(context: Optional[Context] = None) -> str:
        context = context or Context()
        lines = ["Context:"]
        if context.mode == ExecutionMode.RETURN_BYTES:
            lines.append(
                "- Transactions are not submitted; unsigned transaction bytes "
                "are returned for the user to sign."
            )
        else:
            lines.append("- Transactions are signed and submitted by the operator.")
        if context.account_id:
            lines.append(
                f"- The default account is {context.account_id}; use it when "
                "an account parameter is omitted."
            )
        else:
            lines.append("- No default account is configured; pass account IDs explicitly.")
        return "\n".join(lines)

    @staticmethod
    def get_account_parameter_description(
        param_name: str, context: Optional[Context] = None
    ) -> str:
        context = context or Context()
        if context.account_id:
            return (
                f"{param_name} (string, optional): Account ID, defaults to "
                f"{context.account_id}"
            )
        return f"{param_name} (string, required): Account ID"

    @staticmethod
    def get_parameter_usage_instructions() -> str:
        return (
            "Important:\n"
            "- Only include optional parameters if explicitly requested by the user\n"
            "- Do not generate placeholder values for optional fields\n"
            "- Leave optional parameters undefined if not specified by the user"
        )

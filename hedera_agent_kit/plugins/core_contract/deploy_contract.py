from typing import Any

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.contract import DeployContractParameters
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.prompt_generator import PromptGenerator

DEPLOY_CONTRACT_TOOL = "deploy_contract_tool"


class DeployContractTool(LedgerTool):
    method_name = DEPLOY_CONTRACT_TOOL
    display_name = "Deploy Contract"
    failure_label = "Failed to deploy contract"
    parameters_model = DeployContractParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool deploys a smart contract to the Hedera network.

Parameters:
- bytecode (string, required): Hex encoded contract bytecode
- gas (number, optional): Gas limit, defaults to 3000000
- constructor_parameters (string, optional): Hex encoded constructor arguments
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def build(self, params: DeployContractParameters) -> Any:
        return self.builder.deploy_contract(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return (
            f"Contract deployed successfully.\n"
            f"Transaction ID: {raw.transaction_id}\n"
            f"Contract ID: {raw.contract_id}"
        )

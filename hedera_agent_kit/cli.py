import asyncio
import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from hedera_agent_kit.client.hedera_agent_kit import HederaAgentKit
from hedera_agent_kit.domains.results import ToolResult

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()


def load_kit(config: str) -> HederaAgentKit:
    try:
        return HederaAgentKit(config_path=config)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


async def build_tool_table(kit: HederaAgentKit) -> Table:
    table = Table(title="Hedera Agent Kit Tools")
    table.add_column("Method", style="cyan")
    table.add_column("Name")
    table.add_column("Plugin", style="magenta")

    async with kit:
        for plugin_id, tool in await kit.get_tools_by_plugin():
            table.add_row(tool.method, tool.name, plugin_id)
    return table


async def run_tool(kit: HederaAgentKit, method: str, params: dict) -> ToolResult:
    async with kit:
        return await kit.run(method, params)


@app.command()
def tools(
    config: Annotated[
        str, typer.Option(help="Path to the configuration JSON file.")
    ] = "config.json",
):
    """List the tools provided by the configured plugins."""
    kit = load_kit(config)
    console.print(asyncio.run(build_tool_table(kit)))


@app.command()
def run(
    method: Annotated[str, typer.Argument(help="Method name of the tool to run.")],
    params: Annotated[
        Optional[str], typer.Option(help="Tool parameters as a JSON object.")
    ] = None,
    config: Annotated[
        str, typer.Option(help="Path to the configuration JSON file.")
    ] = "config.json",
):
    """Run a single tool and print its outcome."""
    try:
        parsed = json.loads(params) if params else {}
    except json.JSONDecodeError as e:
        console.print(f"[bold red]Invalid --params JSON:[/bold red] {e}")
        raise typer.Exit(code=1)

    kit = load_kit(config)
    with console.status(f"[bold green]Running {method}...", spinner="dots"):
        result = asyncio.run(run_tool(kit, method, parsed))

    if result.succeeded:
        console.print(f"[green]{result.human_message}[/green]")
    else:
        console.print(f"[bold red]{result.human_message}[/bold red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

"""
Context models shared by plugins, tools and execution strategies.

A ``PluginContext`` belongs to one registry and is handed by reference to
every plugin registered in it. A ``Context`` travels with each tool
invocation and selects how transactions are completed.
"""
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hedera_agent_kit.domains.enums import ExecutionMode


class Context(BaseModel):
    """Per-call execution context."""

    model_config = ConfigDict(frozen=True)

    mode: ExecutionMode = Field(
        ExecutionMode.EXECUTE, description="Transaction completion mode"
    )
    account_id: Optional[str] = Field(
        None, description="Operator account that pays for and signs transactions"
    )
    account_public_key: Optional[str] = Field(
        None, description="Public key of the operator account"
    )


class PluginContext(BaseModel):
    """Registry-wide context handed to every plugin."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    logger: Any = Field(
        default_factory=lambda: logging.getLogger("hedera_agent_kit"),
        description="Logger exposing info/warning/error/debug",
    )
    config: Dict[str, Any] = Field(
        default_factory=dict, description="Shared configuration values"
    )
    context: Context = Field(
        default_factory=Context, description="Execution context for tools"
    )


class PluginDescriptor(BaseModel):
    """Identity of a plugin, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique plugin identifier")
    name: str = Field(..., description="Human readable plugin name")
    description: str = Field("", description="What the plugin provides")
    version: str = Field("1.0.0", description="Plugin version")
    author: str = Field("", description="Plugin author")

    @field_validator("id", "name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        """Validate that identity fields are not empty."""
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v

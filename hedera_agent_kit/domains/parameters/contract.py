from typing import Optional

from pydantic import BaseModel, Field, field_validator


class DeployContractParameters(BaseModel):
    bytecode: str = Field(..., description="Hex encoded contract bytecode")
    gas: int = Field(3_000_000, gt=0, description="Gas limit for deployment")
    constructor_parameters: Optional[str] = Field(
        None, description="Hex encoded ABI constructor arguments"
    )

    @field_validator("bytecode")
    @classmethod
    def bytecode_hex(cls, v: str) -> str:
        value = v[2:] if v.startswith("0x") else v
        try:
            bytes.fromhex(value)
        except ValueError:
            raise ValueError("Bytecode must be a hex string")
        return value

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FractalProposal(BaseModel):
    """
    A fractal airdrop distribution to be put to a governance vote.

    `allocation` is the human-readable token amount; the on-chain amount is
    obtained with `allocation_base_units()` once the token decimals are known.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    allocation: Decimal = Field(gt=0)
    duration: int = Field(gt=0, description="Distribution duration in seconds")
    branches: int = Field(gt=0, description="Number of sub-distributions")
    description: str = Field(min_length=1)

    def allocation_base_units(self, decimals: int) -> int:
        """Scale the allocation by 10**decimals, refusing any fractional remainder."""
        if decimals < 0:
            raise ValueError(f"Token decimals must be greater than or equal to 0, got {decimals}")

        scaled = self.allocation.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(
                f"Allocation {self.allocation} of '{self.name}' is not representable with {decimals} decimals"
            )
        return int(scaled)


class ProposeArguments(BaseModel):
    """Arguments of Governor.propose(address[], uint256[], bytes[], string)."""

    model_config = ConfigDict(frozen=True)

    targets: List[str]
    values: List[int]
    calldatas: List[bytes]
    description: str

    @field_validator("values")
    @classmethod
    def _values_are_uint256(cls, values: List[int]) -> List[int]:
        for value in values:
            if value < 0:
                raise ValueError(f"Call value must be greater than or equal to 0, got {value}")
        return values

    @model_validator(mode="after")
    def _lengths_match(self) -> "ProposeArguments":
        if not (len(self.targets) == len(self.values) == len(self.calldatas)):
            raise ValueError(
                f"Proposal length mismatch: {len(self.targets)} targets, "
                f"{len(self.values)} values, {len(self.calldatas)} calldatas"
            )
        if not self.targets:
            raise ValueError("Proposal must contain at least one call")
        return self

    def as_contract_args(self) -> tuple:
        return self.targets, self.values, self.calldatas, self.description

    def to_dict(self) -> dict:
        return {
            "targets": list(self.targets),
            "values": list(self.values),
            "calldatas": ["0x" + calldata.hex() for calldata in self.calldatas],
            "description": self.description,
        }


class ProposalSubmission(BaseModel):
    transaction_hash: str
    block_number: int
    gas_used: int
    proposal_id: Optional[int] = None

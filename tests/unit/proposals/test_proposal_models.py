from decimal import Decimal

import pytest
from pydantic import ValidationError

from proposals import FRACTALS, GENESIS_FRACTAL, get_proposal
from proposals.models import FractalProposal, ProposeArguments

TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def test_genesis_fractal_definition():
    assert GENESIS_FRACTAL.name == "Genesis Fractal"
    assert GENESIS_FRACTAL.allocation == Decimal("1000000")
    assert GENESIS_FRACTAL.duration == 30 * 24 * 60 * 60
    assert GENESIS_FRACTAL.branches == 8
    assert "Phase 1: Genesis Distribution" in GENESIS_FRACTAL.description
    assert FRACTALS == [GENESIS_FRACTAL]


def test_allocation_scaled_by_token_decimals():
    assert GENESIS_FRACTAL.allocation_base_units(18) == 1_000_000 * 10**18
    assert GENESIS_FRACTAL.allocation_base_units(6) == 1_000_000 * 10**6
    assert GENESIS_FRACTAL.allocation_base_units(0) == 1_000_000


def test_allocation_rejects_fractional_base_units():
    proposal = FractalProposal(name="Half", allocation=Decimal("0.5"), duration=1, branches=1, description="x")
    assert proposal.allocation_base_units(1) == 5
    with pytest.raises(ValueError, match="not representable"):
        proposal.allocation_base_units(0)


def test_allocation_rejects_negative_decimals():
    with pytest.raises(ValueError):
        GENESIS_FRACTAL.allocation_base_units(-1)


@pytest.mark.parametrize(
    "overrides",
    [{"allocation": Decimal("0")}, {"duration": 0}, {"branches": 0}, {"name": ""}],
)
def test_fractal_proposal_validation(overrides):
    fields = {"name": "Test", "allocation": Decimal("1"), "duration": 1, "branches": 1, "description": "x"}
    fields.update(overrides)
    with pytest.raises(ValidationError):
        FractalProposal(**fields)


def test_propose_arguments_length_mismatch():
    with pytest.raises(ValidationError, match="length mismatch"):
        ProposeArguments(targets=[TOKEN_ADDRESS], values=[0, 0], calldatas=[b"\x00"], description="x")


def test_propose_arguments_rejects_empty_proposal():
    with pytest.raises(ValidationError, match="at least one call"):
        ProposeArguments(targets=[], values=[], calldatas=[], description="x")


def test_get_proposal_unknown_name():
    assert get_proposal("Genesis Fractal") is GENESIS_FRACTAL
    with pytest.raises(ValueError, match="Unknown proposal"):
        get_proposal("Second Fractal")


def test_genesis_description_kept_verbatim():
    description = GENESIS_FRACTAL.description
    indent = " " * 16

    assert description.startswith("\n" + indent + "In the realm of infinite scale\n")
    assert description.endswith(indent + "The fractal nature of value flows\n" + " " * 12)
    assert "constellation\n\n" + indent + "Phase 1: Genesis Distribution\n" in description
    assert "\n" + indent + "8. Cross-chain ambassadors\n\n" in description
    assert len(description.splitlines()) == 26

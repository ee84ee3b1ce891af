import pytest
from web3 import Web3

from governance.exceptions import ProposalEncodingError
from governance.proposal_builder import (
    MINT_SELECTOR,
    build_propose_arguments,
    compute_proposal_id,
    decode_mint_call,
    encode_mint_call,
)
from proposals import GENESIS_FRACTAL

GOVERNANCE_ADDRESS = Web3.to_checksum_address("0xe7f1725e7734ce288f8367e1bb143e90bb3f0512")
TOKEN_ADDRESS = Web3.to_checksum_address("0x5fbdb2315678afecb367f032d93f642f64180aa3")
ALLOCATION = 1_000_000 * 10**18


def test_mint_selector():
    assert MINT_SELECTOR == bytes.fromhex("40c10f19")


def test_encode_mint_call_decodes_back_to_inputs():
    calldata = encode_mint_call(GOVERNANCE_ADDRESS, ALLOCATION)

    # selector + two 32-byte words
    assert len(calldata) == 4 + 64
    assert calldata[:4] == MINT_SELECTOR
    assert decode_mint_call(calldata) == (GOVERNANCE_ADDRESS, ALLOCATION)


def test_encode_mint_call_accepts_lowercase_address():
    calldata = encode_mint_call(GOVERNANCE_ADDRESS.lower(), 1)
    recipient, amount = decode_mint_call(calldata)
    assert recipient == GOVERNANCE_ADDRESS
    assert amount == 1


@pytest.mark.parametrize("recipient", ["0x1234", "not-an-address", ""])
def test_encode_mint_call_rejects_bad_recipient(recipient):
    with pytest.raises(ProposalEncodingError):
        encode_mint_call(recipient, ALLOCATION)


@pytest.mark.parametrize("amount", [-1, 2**256])
def test_encode_mint_call_rejects_out_of_range_amount(amount):
    with pytest.raises(ProposalEncodingError):
        encode_mint_call(GOVERNANCE_ADDRESS, amount)


def test_decode_mint_call_rejects_other_selector():
    calldata = bytes.fromhex("a9059cbb") + encode_mint_call(GOVERNANCE_ADDRESS, 1)[4:]
    with pytest.raises(ProposalEncodingError, match="not mint"):
        decode_mint_call(calldata)


def test_build_propose_arguments_single_mint_call():
    arguments = build_propose_arguments(TOKEN_ADDRESS, GOVERNANCE_ADDRESS, ALLOCATION, GENESIS_FRACTAL.description)

    assert len(arguments.targets) == len(arguments.values) == len(arguments.calldatas) == 1
    assert arguments.targets == [TOKEN_ADDRESS]
    assert arguments.values == [0]
    assert decode_mint_call(arguments.calldatas[0]) == (GOVERNANCE_ADDRESS, ALLOCATION)
    assert arguments.description == GENESIS_FRACTAL.description


def test_build_propose_arguments_rejects_bad_token_address():
    with pytest.raises(ProposalEncodingError, match="token address"):
        build_propose_arguments("0xdeadbeef", GOVERNANCE_ADDRESS, ALLOCATION, "description")


def test_to_dict_hex_encodes_calldata():
    arguments = build_propose_arguments(TOKEN_ADDRESS, GOVERNANCE_ADDRESS, ALLOCATION, "description")
    data = arguments.to_dict()

    assert data["targets"] == [TOKEN_ADDRESS]
    assert data["values"] == [0]
    assert data["calldatas"][0].startswith("0x40c10f19")
    assert data["description"] == "description"


def test_compute_proposal_id_depends_on_description():
    first = build_propose_arguments(TOKEN_ADDRESS, GOVERNANCE_ADDRESS, ALLOCATION, "first")
    same = build_propose_arguments(TOKEN_ADDRESS, GOVERNANCE_ADDRESS, ALLOCATION, "first")
    second = build_propose_arguments(TOKEN_ADDRESS, GOVERNANCE_ADDRESS, ALLOCATION, "second")

    assert compute_proposal_id(first) == compute_proposal_id(same)
    assert compute_proposal_id(first) != compute_proposal_id(second)
    assert 0 <= compute_proposal_id(first) < 2**256

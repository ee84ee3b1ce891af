from typing import Tuple

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError
from pydantic import ValidationError
from web3 import Web3

from constants.constants import MINT_ARGUMENT_TYPES, MINT_FUNCTION_SIGNATURE, PROPOSAL_ID_ARGUMENT_TYPES
from governance.exceptions import ProposalEncodingError
from proposals.models import ProposeArguments
from utils.logger_utils import get_logger
from utils.validation_utils import validate_address, validate_uint256

logger = get_logger("Proposal Builder")

# mint(address,uint256) -> 0x40c10f19
MINT_SELECTOR = bytes(Web3.keccak(text=MINT_FUNCTION_SIGNATURE)[:4])


def encode_mint_call(recipient: str, amount: int) -> bytes:
    """
    ABI-encodes token.mint(recipient, amount) without touching the network.

    Raises:
        ProposalEncodingError: If the recipient or amount cannot be encoded.
    """
    try:
        recipient = validate_address(recipient, label="mint recipient")
        validate_uint256(amount, label="mint amount")
        return MINT_SELECTOR + encode(MINT_ARGUMENT_TYPES, [recipient, amount])
    except (ValueError, EncodingError) as e:
        raise ProposalEncodingError(f"Cannot encode mint call: {e}") from e


def decode_mint_call(calldata: bytes) -> Tuple[str, int]:
    """Inverse of encode_mint_call, returns (checksummed recipient, amount)."""
    calldata = bytes(calldata)
    if calldata[:4] != MINT_SELECTOR:
        raise ProposalEncodingError(f"Calldata selector 0x{calldata[:4].hex()} is not {MINT_FUNCTION_SIGNATURE}")

    try:
        recipient, amount = decode(MINT_ARGUMENT_TYPES, calldata[4:])
    except DecodingError as e:
        raise ProposalEncodingError(f"Cannot decode mint call: {e}") from e
    return Web3.to_checksum_address(recipient), amount


def build_propose_arguments(
    token_address: str,
    governance_address: str,
    allocation_base_units: int,
    description: str,
) -> ProposeArguments:
    """
    Builds propose(targets, values, calldatas, description) for a single call
    minting `allocation_base_units` tokens to the governance contract itself.
    """
    try:
        token_address = validate_address(token_address, label="token address")
    except ValueError as e:
        raise ProposalEncodingError(str(e)) from e

    calldata = encode_mint_call(governance_address, allocation_base_units)

    try:
        arguments = ProposeArguments(
            targets=[token_address],
            values=[0],
            calldatas=[calldata],
            description=description,
        )
    except ValidationError as e:
        raise ProposalEncodingError(f"Invalid proposal arguments: {e}") from e

    logger.info(
        f"Built proposal: mint {allocation_base_units} base units of {token_address} to {governance_address}"
    )
    return arguments


def compute_proposal_id(arguments: ProposeArguments) -> int:
    """
    OpenZeppelin Governor proposal id:
    uint256(keccak256(abi.encode(targets, values, calldatas, keccak256(bytes(description)))))
    """
    description_hash = bytes(Web3.keccak(text=arguments.description))
    encoded = encode(
        PROPOSAL_ID_ARGUMENT_TYPES,
        [arguments.targets, arguments.values, arguments.calldatas, description_hash],
    )
    return int.from_bytes(Web3.keccak(encoded), byteorder="big")

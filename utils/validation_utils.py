from eth_utils import is_address, to_checksum_address

from constants.constants import MAX_UINT256


def validate_address(address: str, label: str = "address") -> str:
    """
    Validate an Ethereum address.

    Args:
        address: Hex address, with or without checksum casing.
        label: Name used in the error message.

    Returns:
        The checksummed address.

    Raises:
        ValueError: If the address is malformed.
    """
    if not isinstance(address, str) or not is_address(address):
        raise ValueError(f"Invalid {label}: {address!r}")
    return to_checksum_address(address)


def validate_uint256(value: int, label: str = "value") -> None:
    """
    Validate that a value fits an ABI uint256.

    Raises:
        ValueError: If the value is negative or too large.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT256:
        raise ValueError(f"{label} must be within uint256 range, got {value}")


def validate_decimals(decimals: int) -> None:
    if decimals < 0 or decimals > 255:
        raise ValueError(f"Token decimals must be between 0 and 255, got {decimals}")

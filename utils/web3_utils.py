from urllib.parse import urlparse

from web3 import HTTPProvider, IPCProvider, Web3
from web3.providers.base import BaseProvider

from utils.logger_utils import get_logger

logger = get_logger("Web3 Utils")

DEFAULT_TIMEOUT = 60


def get_provider_from_uri(uri_string: str, timeout: int = DEFAULT_TIMEOUT) -> BaseProvider:
    """
    Creates a synchronous Web3 provider based on the URI scheme.
    Supports HTTP/HTTPS and IPC.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        request_kwargs = {"timeout": timeout}
        return HTTPProvider(uri_string, request_kwargs=request_kwargs)
    elif uri.scheme == "file" or uri_string.endswith(".ipc"):
        return IPCProvider(uri.path if uri.scheme == "file" else uri_string, timeout=timeout)
    else:
        raise ValueError(f"Unknown uri scheme {uri_string}. Supported: http, https, file (ipc)")


def get_web3(provider_uri: str, timeout: int = DEFAULT_TIMEOUT) -> Web3:
    web3 = Web3(get_provider_from_uri(provider_uri, timeout=timeout))
    logger.debug(f"Web3 provider created for {provider_uri}")
    return web3


def get_token_decimals(token_contract) -> int:
    """Reads decimals() from an ERC20-like token."""
    decimals = token_contract.functions.decimals().call()
    logger.info(f"Token {token_contract.address} reports {decimals} decimals")
    return int(decimals)


def to_hex(value) -> str:
    """0x-prefixed hex for HexBytes/bytes/str transaction hashes."""
    if isinstance(value, str):
        return value if value.startswith("0x") else "0x" + value
    return Web3.to_hex(value)

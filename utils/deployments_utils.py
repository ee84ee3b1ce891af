import json
import pathlib
from typing import Any, Dict, List, NamedTuple, Optional, Union

from governance.exceptions import DeploymentNotFoundError
from utils.logger_utils import get_logger
from utils.validation_utils import validate_address

logger = get_logger("Deployments Utils")


class Deployment(NamedTuple):
    name: str
    address: str
    abi: List[Dict[str, Any]]


def get_deployment_path(deployments_dir: Union[str, pathlib.Path], network: str, name: str) -> pathlib.Path:
    return pathlib.Path(deployments_dir) / network / f"{name}.json"


def load_deployment(deployments_dir: Union[str, pathlib.Path], network: str, name: str) -> Deployment:
    """
    Loads a hardhat-deploy artifact (<deployments_dir>/<network>/<name>.json).

    Raises:
        DeploymentNotFoundError: If the artifact is missing or has no address.
    """
    path = get_deployment_path(deployments_dir, network, name)
    if not path.is_file():
        raise DeploymentNotFoundError(f"No deployment of '{name}' found for network '{network}' at {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            artifact = json.load(fh)
        except json.JSONDecodeError as e:
            raise DeploymentNotFoundError(f"Deployment artifact {path} is not valid JSON: {e}") from e

    address = artifact.get("address")
    if not address:
        raise DeploymentNotFoundError(f"Deployment artifact {path} has no address")

    try:
        address = validate_address(address, label=f"{name} address")
    except ValueError as e:
        raise DeploymentNotFoundError(str(e)) from e

    return Deployment(name=name, address=address, abi=artifact.get("abi") or [])


def resolve_deployment(
    name: str,
    default_abi: List[Dict[str, Any]],
    deployments_dir: Union[str, pathlib.Path],
    network: str,
    address_override: Optional[str] = None,
) -> Deployment:
    """
    Resolves a contract the way ethers.getContract(name) does in a hardhat-deploy project.
    An explicit address wins over the artifact and is paired with the bundled ABI.
    """
    if address_override:
        address = validate_address(address_override, label=f"{name} address")
        logger.info(f"Using configured address {address} for {name}")
        return Deployment(name=name, address=address, abi=default_abi)

    deployment = load_deployment(deployments_dir, network, name)
    logger.info(f"Resolved {name} at {deployment.address} from {network} deployments")
    if not deployment.abi:
        return deployment._replace(abi=default_abi)
    return deployment


def get_contract(web3, deployment: Deployment):
    return web3.eth.contract(address=deployment.address, abi=deployment.abi)

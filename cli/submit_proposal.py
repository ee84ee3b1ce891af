from typing import Optional

import click

from abi.dao_governance_abi import GOVERNOR_ABI
from abi.mintable_token_abi import MINTABLE_TOKEN_ABI
from config.settings import settings
from constants.constants import DEFAULT_TOKEN_DECIMALS
from governance.proposal_builder import build_propose_arguments, compute_proposal_id
from governance.proposal_submitter import ProposalSubmitter, resolve_sender
from proposals import GENESIS_FRACTAL, PROPOSALS, get_proposal
from utils.deployments_utils import get_contract, resolve_deployment
from utils.logger_utils import configure_logging, get_logger
from utils.validation_utils import validate_decimals
from utils.web3_utils import get_token_decimals, get_web3

logger = get_logger("Submit Proposal CLI")


def resolve_decimals(decimals: Optional[int], token_contract=None) -> int:
    """--decimals, then TOKEN_DECIMALS, then token.decimals() on chain."""
    if decimals is None:
        decimals = settings.governance.token_decimals
    if decimals is None and token_contract is not None:
        decimals = get_token_decimals(token_contract)
    if decimals is None:
        decimals = DEFAULT_TOKEN_DECIMALS
    validate_decimals(decimals)
    return decimals


@click.command()
@click.option(
    "-p",
    "--proposal",
    "proposal_name",
    default=GENESIS_FRACTAL.name,
    show_default=True,
    type=click.Choice(list(PROPOSALS.keys())),
    help="Name of the fractal proposal to submit.",
)
@click.option(
    "--decimals",
    default=None,
    type=click.IntRange(0, 255),
    help="Token decimals. If not provided, TOKEN_DECIMALS or the token's decimals() is used.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Simulate propose() with eth_call and send nothing.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def submit_proposal(proposal_name: str, decimals: Optional[int], dry_run: bool, log_file: Optional[str]):
    """
    Submits a fractal airdrop proposal: Governor.propose() with a single
    token.mint(governance, allocation) call.
    """
    configure_logging(log_file, settings.app.log_level)

    proposal = get_proposal(proposal_name)
    logger.info(f"Preparing proposal '{proposal.name}' on network '{settings.ethereum.network}'")

    try:
        web3 = get_web3(settings.ethereum.provider_uri, timeout=settings.ethereum.rpc_timeout)

        gov_conf = settings.governance
        governance = get_contract(
            web3,
            resolve_deployment(
                gov_conf.governance_contract_name,
                GOVERNOR_ABI,
                settings.ethereum.deployments_dir,
                settings.ethereum.network,
                address_override=gov_conf.governance_address,
            ),
        )
        token = get_contract(
            web3,
            resolve_deployment(
                gov_conf.token_contract_name,
                MINTABLE_TOKEN_ABI,
                settings.ethereum.deployments_dir,
                settings.ethereum.network,
                address_override=gov_conf.token_address,
            ),
        )

        allocation = proposal.allocation_base_units(resolve_decimals(decimals, token))
        arguments = build_propose_arguments(token.address, governance.address, allocation, proposal.description)
        logger.info(f"Expected proposal id: {compute_proposal_id(arguments)}")

        private_key = settings.signer.private_key.get_secret_value() if settings.signer.private_key else None
        submitter = ProposalSubmitter(
            web3,
            governance,
            sender=resolve_sender(web3, private_key, settings.signer.sender_address),
            private_key=private_key,
            chain_id=settings.ethereum.chain_id,
            receipt_timeout=gov_conf.receipt_timeout_seconds,
            poll_latency=gov_conf.receipt_poll_latency,
        )

        if dry_run:
            proposal_id = submitter.simulate(arguments)
            click.echo(f"Proposal simulation succeeded with proposal id: {proposal_id}")
            return

        submission = submitter.submit(arguments)
        click.echo(f"Proposal created with tx hash: {submission.transaction_hash}")

    except Exception as e:
        logger.exception(f"Failed to submit proposal '{proposal.name}': {e}")
        raise e

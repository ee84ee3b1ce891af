import json

import click

from governance.proposal_builder import build_propose_arguments, compute_proposal_id
from proposals import GENESIS_FRACTAL, PROPOSALS, get_proposal
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Encode Proposal CLI")


@click.command()
@click.option(
    "-p",
    "--proposal",
    "proposal_name",
    default=GENESIS_FRACTAL.name,
    show_default=True,
    type=click.Choice(list(PROPOSALS.keys())),
    help="Name of the fractal proposal to encode.",
)
@click.option("--governance", "governance_address", required=True, type=str, help="Governor contract address.")
@click.option("--token", "token_address", required=True, type=str, help="Mintable token contract address.")
@click.option("--decimals", default=18, show_default=True, type=click.IntRange(0, 255), help="Token decimals.")
def encode_proposal(proposal_name: str, governance_address: str, token_address: str, decimals: int):
    """
    Prints the propose() arguments as JSON without connecting to a node.
    """
    configure_logging()

    proposal = get_proposal(proposal_name)
    try:
        arguments = build_propose_arguments(
            token_address,
            governance_address,
            proposal.allocation_base_units(decimals),
            proposal.description,
        )
    except Exception as e:
        logger.exception(f"Failed to encode proposal '{proposal.name}': {e}")
        raise e

    output = arguments.to_dict()
    output["proposalId"] = str(compute_proposal_id(arguments))
    click.echo(json.dumps(output, indent=2))

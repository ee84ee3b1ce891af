import click

from constants.constants import SECONDS_PER_DAY
from proposals import FRACTALS


@click.command()
def list_proposals():
    """
    Lists the fractal proposals available for submission.
    """
    for proposal in FRACTALS:
        days = proposal.duration / SECONDS_PER_DAY
        click.echo(
            f"{proposal.name}: {proposal.allocation:,} tokens, {days:g} days, {proposal.branches} branches"
        )

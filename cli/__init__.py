import click


from cli import encode_proposal, list_proposals, submit_proposal


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# Governor.propose() submission
cli.add_command(submit_proposal.submit_proposal, "submit_proposal")

# Offline calldata encoding
cli.add_command(encode_proposal.encode_proposal, "encode_proposal")

# Available proposal definitions
cli.add_command(list_proposals.list_proposals, "list_proposals")

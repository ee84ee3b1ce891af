from proposals.fractal_airdrop import FRACTALS, GENESIS_FRACTAL
from proposals.models import FractalProposal

PROPOSALS = {proposal.name: proposal for proposal in FRACTALS}


def get_proposal(name: str) -> FractalProposal:
    try:
        return PROPOSALS[name]
    except KeyError:
        raise ValueError(f"Unknown proposal '{name}'. Available: {', '.join(PROPOSALS)}") from None


__all__ = ["FRACTALS", "GENESIS_FRACTAL", "PROPOSALS", "FractalProposal", "get_proposal"]

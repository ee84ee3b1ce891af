"""
Fractal airdrop distribution proposals.

Each recipient becomes a node in an expanding network: the more they engage,
the more branches they create.
"""
from decimal import Decimal

from constants.constants import SECONDS_PER_DAY
from proposals.models import FractalProposal

# Submitted byte for byte, indentation included: the proposal id hashes this text
GENESIS_DESCRIPTION = """
                In the realm of infinite scale
                Where blockchain meets poetic tale
                We propose a fractal distribution
                Each holder a star in our constellation

                Phase 1: Genesis Distribution
                - 1,000,000 SBX tokens
                - 30 days duration
                - 8 fractal branches

                Criteria:
                1. Early community members
                2. Content creators
                3. Technical contributors
                4. Ecosystem builders
                5. Liquidity providers
                6. Governance participants
                7. Social engagement leaders
                8. Cross-chain ambassadors

                Each branch will create its own micro-economy
                Growing the network in a self-similar pattern
                As above, so below
                The fractal nature of value flows
            """

GENESIS_FRACTAL = FractalProposal(
    name="Genesis Fractal",
    allocation=Decimal("1000000"),  # 1M tokens
    duration=30 * SECONDS_PER_DAY,
    branches=8,
    description=GENESIS_DESCRIPTION,
)

FRACTALS = [GENESIS_FRACTAL]

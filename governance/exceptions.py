from typing import Optional


class ProposalError(Exception):
    """Base class for everything that can go wrong while proposing."""


class ProposalEncodingError(ProposalError):
    pass


class ProposalSubmissionError(ProposalError):
    pass


class ProposalRevertedError(ProposalSubmissionError):
    def __init__(self, message: str, transaction_hash: Optional[str] = None):
        super().__init__(message)
        self.transaction_hash = transaction_hash


class DeploymentNotFoundError(ProposalError):
    pass

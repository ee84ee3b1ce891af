from typing import Optional

from eth_account import Account
from eth_utils import is_address, to_checksum_address
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception
from web3.logs import DISCARD

from governance.exceptions import ProposalRevertedError, ProposalSubmissionError
from governance.proposal_builder import compute_proposal_id
from proposals.models import ProposalSubmission, ProposeArguments
from utils.logger_utils import get_logger
from utils.web3_utils import to_hex

logger = get_logger("Proposal Submitter")

# Failures raised by web3 providers: RPC errors, connection errors (OSError), legacy ValueError payloads
RPC_ERRORS = (Web3Exception, OSError, ValueError)


def resolve_sender(web3, private_key: Optional[str] = None, sender_address: Optional[str] = None) -> str:
    """
    Picks the proposer account: the private key's address, then the configured
    sender, then the node's default or first unlocked account.
    """
    if private_key:
        return Account.from_key(private_key).address
    if sender_address:
        return to_checksum_address(sender_address)
    if is_address(web3.eth.default_account):
        return to_checksum_address(web3.eth.default_account)

    try:
        accounts = web3.eth.accounts
    except RPC_ERRORS as e:
        raise ProposalSubmissionError(f"Cannot list node accounts: {e}") from e
    if not accounts:
        raise ProposalSubmissionError("No sender available: set PRIVATE_KEY or SENDER_ADDRESS, or unlock a node account")
    return to_checksum_address(accounts[0])


class ProposalSubmitter(object):
    """Sends a single Governor.propose transaction and waits for its receipt."""

    def __init__(
        self,
        web3,
        governance_contract,
        sender: str,
        private_key: Optional[str] = None,
        chain_id: Optional[int] = None,
        receipt_timeout: float = 120,
        poll_latency: float = 0.5,
    ):
        self._web3 = web3
        self._governance = governance_contract
        self._sender = sender
        self._private_key = private_key
        self._chain_id = chain_id
        self._receipt_timeout = receipt_timeout
        self._poll_latency = poll_latency

    @property
    def sender(self) -> str:
        return self._sender

    def simulate(self, arguments: ProposeArguments) -> int:
        """Runs propose() through eth_call and returns the proposal id the governor would assign."""
        propose_call = self._governance.functions.propose(*arguments.as_contract_args())
        try:
            proposal_id = propose_call.call({"from": self._sender})
        except ContractLogicError as e:
            raise ProposalRevertedError(f"propose() would revert: {e}") from e
        except RPC_ERRORS as e:
            raise ProposalSubmissionError(f"propose() simulation failed: {e}") from e

        logger.info(f"Simulated propose() from {self._sender}: proposal id {proposal_id}")
        return proposal_id

    def submit(self, arguments: ProposeArguments) -> ProposalSubmission:
        tx_hash = self._send(arguments)
        logger.info(f"Proposal transaction sent: {tx_hash}. Waiting for confirmation...")

        try:
            receipt = self._web3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._receipt_timeout, poll_latency=self._poll_latency
            )
        except TimeExhausted as e:
            raise ProposalSubmissionError(
                f"Transaction {tx_hash} not confirmed within {self._receipt_timeout} seconds"
            ) from e
        except RPC_ERRORS as e:
            raise ProposalSubmissionError(f"Failed to fetch receipt of {tx_hash}: {e}") from e

        transaction_hash = to_hex(receipt["transactionHash"])
        if receipt["status"] == 0:
            raise ProposalRevertedError(f"Proposal transaction {transaction_hash} reverted", transaction_hash)

        submission = ProposalSubmission(
            transaction_hash=transaction_hash,
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
            proposal_id=self._extract_proposal_id(receipt, arguments),
        )
        logger.info(
            f"Proposal {submission.proposal_id} confirmed in block {submission.block_number} "
            f"(gas used: {submission.gas_used})"
        )
        return submission

    def _send(self, arguments: ProposeArguments) -> str:
        propose_call = self._governance.functions.propose(*arguments.as_contract_args())
        try:
            if self._private_key:
                tx_hash = self._send_signed(propose_call)
            else:
                # Unlocked account on the node (hardhat/anvil local network)
                tx_hash = propose_call.transact({"from": self._sender})
        except ContractLogicError as e:
            raise ProposalRevertedError(f"propose() reverted: {e}") from e
        except RPC_ERRORS as e:
            raise ProposalSubmissionError(f"Failed to send propose() transaction: {e}") from e
        return to_hex(tx_hash)

    def _send_signed(self, propose_call):
        chain_id = self._chain_id or self._web3.eth.chain_id
        transaction = propose_call.build_transaction(
            {
                "from": self._sender,
                "nonce": self._web3.eth.get_transaction_count(self._sender, "pending"),
                "chainId": chain_id,
            }
        )
        signed = Account.sign_transaction(transaction, self._private_key)
        return self._web3.eth.send_raw_transaction(signed.raw_transaction)

    def _extract_proposal_id(self, receipt, arguments: ProposeArguments) -> int:
        events = self._governance.events.ProposalCreated().process_receipt(receipt, errors=DISCARD)
        for event in events:
            return event["args"]["proposalId"]

        logger.warning("No ProposalCreated event in receipt, deriving proposal id from arguments")
        return compute_proposal_id(arguments)

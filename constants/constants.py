# --- TIME ---
SECONDS_PER_DAY = 24 * 60 * 60

# --- TOKEN ---
# parseEther() scale, used when neither the config nor the token says otherwise
DEFAULT_TOKEN_DECIMALS = 18
MAX_UINT256 = 2**256 - 1

# --- FUNCTION SIGNATURES ---
MINT_FUNCTION_SIGNATURE = "mint(address,uint256)"
MINT_ARGUMENT_TYPES = ["address", "uint256"]
PROPOSAL_ID_ARGUMENT_TYPES = ["address[]", "uint256[]", "bytes[]", "bytes32"]

# --- DEPLOYMENTS (hardhat-deploy artifact names) ---
GOVERNANCE_CONTRACT_NAME = "FractalGovernance"
TOKEN_CONTRACT_NAME = "SBXToken"

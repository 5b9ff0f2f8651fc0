# --- ETHERSCAN ---
ETHERSCAN_DEFAULT_BASE_URL = "https://api.etherscan.io/v2/api"
ETHERSCAN_MAINNET_CHAIN_ID = 1

# Envelope values returned by module=contract&action=getabi
ETHERSCAN_STATUS_OK = "1"
ETHERSCAN_UNVERIFIED_SOURCE_RESULT = "Contract source code not verified"

# Tether USD (USDT) on mainnet
DEFAULT_CONTRACT_ADDRESS = "0xdAC17F958D2ee523a2206206994597C13D831ec7"

# --- TOKEN STANDARDS ---
# Classification priority. A contract that satisfies several standards is
# reported as the FIRST one in this tuple.
ERC20 = "ERC-20"
ERC721 = "ERC-721"
ERC1155 = "ERC-1155"
STANDARD_ORDER = (ERC20, ERC721, ERC1155)

# Definition file names inside STANDARD_ABI_DIR
STANDARD_ABI_FILES = {
    ERC20: "erc20.abi.json",
    ERC721: "erc721.abi.json",
    ERC1155: "erc1155.abi.json",
}

# ABI entry types that make up a contract's member surface
SURFACE_ENTRY_TYPES = ("function", "event")

# --- RESULT MESSAGES ---
MSG_MATCHED_STANDARD = "Contract ABI complies with the {standard} standard"
MSG_NO_STANDARD_MATCHED = "Contract ABI does not comply with any of the {standards} standards"
MSG_EMPTY_OR_UNVERIFIED = "Address is either a wallet or the contract source code is not verified"
MSG_FAILURE = "Failed to parse contract ABI: {reason}"

class ContractStandardError(Exception):
    """Base class for every error raised while checking a contract's token standard."""


class ConfigurationError(ContractStandardError):
    """Standard catalog is missing, empty, or holds a definition without required members. Fatal."""


class InvalidInputError(ContractStandardError):
    """Caller-side problem. Never reaches the classifier."""


class InvalidAddressError(InvalidInputError):
    """Address is malformed or was rejected by the explorer."""


class AbiParseError(InvalidInputError):
    """ABI payload is not a JSON array of ABI entries."""


class EtherscanRequestError(InvalidInputError):
    """Etherscan could not be reached or answered with something unreadable."""

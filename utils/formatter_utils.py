from typing import Optional, Sequence

from eth_utils import to_checksum_address

from constants.constants import (
    MSG_EMPTY_OR_UNVERIFIED,
    MSG_MATCHED_STANDARD,
    MSG_NO_STANDARD_MATCHED,
)
from standards.models.classification_result import (
    ClassificationResult,
    EmptyOrUnverifiedSurface,
    MatchedStandard,
    NoStandardMatched,
)
from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Convert address to its EIP-55 checksum form.
    Safe-guards against None or invalid types; malformed input is returned lowercased.
    """
    if address is None or not isinstance(address, str):
        return None

    try:
        return to_checksum_address(address)
    except ValueError:
        logger.debug(f"Cannot checksum address: {address}")
        return address.lower()


def format_classification_result(result: ClassificationResult, standard_names: Sequence[str]) -> str:
    """
    Renders a classification result as the one-line report printed by the CLI.

    Args:
        result: Outcome of StandardClassifierService.classify.
        standard_names: Catalog standard names in catalog order, listed when nothing matched.
    """
    if isinstance(result, MatchedStandard):
        return MSG_MATCHED_STANDARD.format(standard=result.standard)
    if isinstance(result, NoStandardMatched):
        return MSG_NO_STANDARD_MATCHED.format(standards=", ".join(standard_names))
    if isinstance(result, EmptyOrUnverifiedSurface):
        return MSG_EMPTY_OR_UNVERIFIED
    raise TypeError(f"Unknown classification result: {result!r}")

import pytest

from standards.models.classification_result import (
    EmptyOrUnverifiedSurface,
    MatchedStandard,
    NoStandardMatched,
)
from utils.formatter_utils import format_classification_result, to_normalized_address

STANDARD_NAMES = ("ERC-20", "ERC-721", "ERC-1155")


def test_format_matched_standard():
    assert (
        format_classification_result(MatchedStandard(standard="ERC-20"), STANDARD_NAMES)
        == "Contract ABI complies with the ERC-20 standard"
    )


def test_format_no_standard_matched():
    assert (
        format_classification_result(NoStandardMatched(), STANDARD_NAMES)
        == "Contract ABI does not comply with any of the ERC-20, ERC-721, ERC-1155 standards"
    )


def test_format_empty_or_unverified():
    assert (
        format_classification_result(EmptyOrUnverifiedSurface(), STANDARD_NAMES)
        == "Address is either a wallet or the contract source code is not verified"
    )


def test_format_unknown_result_raises():
    with pytest.raises(TypeError):
        format_classification_result("ERC-20", STANDARD_NAMES)


def test_to_normalized_address():
    assert to_normalized_address("0xdac17f958d2ee523a2206206994597c13d831ec7") == (
        "0xdAC17F958D2ee523a2206206994597C13D831ec7"
    )
    assert to_normalized_address(None) is None
    assert to_normalized_address("0xNOTHEX") == "0xnothex"

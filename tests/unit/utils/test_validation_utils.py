import pytest

from standards.exceptions import InvalidAddressError, InvalidInputError
from utils.validation_utils import validate_address


@pytest.mark.parametrize(
    "address",
    [
        "0xdac17f958d2ee523a2206206994597c13d831ec7",
        "0xdAC17F958D2ee523a2206206994597C13D831ec7",
        "0xDAC17F958D2EE523A2206206994597C13D831EC7",
    ],
)
def test_valid_address(address):
    validate_address(address)


@pytest.mark.parametrize(
    "address",
    [
        "",
        "0x1234",
        "dac17f958d2ee523a2206206994597c13d831ec7zz",
        # Mixed case with a broken checksum
        "0xDAC17F958D2ee523a2206206994597C13D831ec7",
        None,
    ],
)
def test_invalid_address(address):
    with pytest.raises(InvalidAddressError):
        validate_address(address)


def test_invalid_address_is_input_error():
    assert issubclass(InvalidAddressError, InvalidInputError)


def test_broken_checksum_is_not_silently_corrected():
    with pytest.raises(InvalidAddressError, match="checksum"):
        validate_address("0xDAC17F958D2ee523a2206206994597C13D831ec7")

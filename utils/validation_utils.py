from eth_utils import is_address, is_checksum_address, remove_0x_prefix

from standards.exceptions import InvalidAddressError


def validate_address(address: str) -> None:
    """
    Validate an EVM account address.

    Args:
        address: 0x-prefixed, 20-byte hex address. Mixed-case input must carry a valid EIP-55 checksum.

    Raises:
        InvalidAddressError: If the address is malformed.
    """
    if not isinstance(address, str) or not address:
        raise InvalidAddressError("Address must be a non-empty string")

    if not is_address(address):
        raise InvalidAddressError(f"not real EVM address: {address}")

    # Newer eth_utils releases no longer verify the checksum inside is_address
    hex_body = remove_0x_prefix(address)
    if hex_body != hex_body.lower() and hex_body != hex_body.upper() and not is_checksum_address(address):
        raise InvalidAddressError(f"not real EVM address: {address} (bad EIP-55 checksum)")

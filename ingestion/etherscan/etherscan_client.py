import asyncio
from typing import Any, Dict, List, Optional

import aiohttp
import orjson

from config.settings import EtherscanSettings
from constants.constants import (
    ETHERSCAN_STATUS_OK,
    ETHERSCAN_UNVERIFIED_SOURCE_RESULT,
)
from standards.exceptions import EtherscanRequestError, InvalidAddressError
from standards.mappers.abi_surface_mapper import AbiSurfaceMapper
from standards.models.contract_abi import AbiEntry
from utils.logger_utils import get_logger

logger = get_logger("Etherscan Client")


class EtherscanClient(object):
    """
    Fetches verified contract ABIs from the Etherscan contract API.

    Settings are passed in explicitly; the client never reads the environment.
    """

    def __init__(self, etherscan_settings: EtherscanSettings, app_name: str = "Contract Standard Checker"):
        self.base_url = etherscan_settings.base_url
        self.api_key = etherscan_settings.api_key
        self.chain_id = etherscan_settings.chain_id
        self.request_timeout = etherscan_settings.request_timeout
        self.app_name = app_name
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Context manager entry"""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.request_timeout),
            headers={"User-Agent": f"{self.app_name}/1.0"},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        if self.session:
            await self.session.close()
            self.session = None

    async def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sends one GET request and returns the decoded {status, message, result} envelope.
        """
        if self.session is None:
            raise RuntimeError("EtherscanClient must be used as an async context manager")

        query = {"chainid": self.chain_id, **params}
        if self.api_key:
            query["apikey"] = self.api_key

        try:
            async with self.session.get(self.base_url, params=query) as response:
                if response.status != 200:
                    raise EtherscanRequestError(
                        f"Etherscan answered {response.status} {response.reason} for {params.get('action')}"
                    )
                body = await response.read()
        except aiohttp.ClientError as e:
            raise EtherscanRequestError(f"Failed to make HTTP request: {e}") from e
        except asyncio.TimeoutError as e:
            raise EtherscanRequestError(f"Etherscan request timed out after {self.request_timeout}s") from e

        try:
            envelope = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise EtherscanRequestError(f"Failed to unmarshal JSON: {e}") from e

        if not isinstance(envelope, dict) or "status" not in envelope:
            raise EtherscanRequestError("Etherscan response has no status field")
        return envelope

    async def get_contract_abi(self, address: str) -> List[AbiEntry]:
        """
        Returns the parsed ABI of a verified contract.

        An unverified contract yields an empty list rather than an error, so the
        caller can tell it apart from an invalid address.

        Raises:
            InvalidAddressError: Etherscan rejected the address.
            EtherscanRequestError: transport failure or unreadable response.
            AbiParseError: the returned ABI is not valid JSON.
        """
        logger.info(f"Fetching ABI for {address} from Etherscan (chain {self.chain_id})...")
        envelope = await self._request({"module": "contract", "action": "getabi", "address": address})

        status = str(envelope.get("status"))
        message = envelope.get("message", "")
        result = envelope.get("result")

        if status != ETHERSCAN_STATUS_OK:
            if result == ETHERSCAN_UNVERIFIED_SOURCE_RESULT:
                logger.info(f"Contract source code for {address} is not verified")
                return []
            raise InvalidAddressError(f"not real EVM address: {message} ({result})")

        if not isinstance(result, str):
            raise EtherscanRequestError("Etherscan getabi result is not an ABI string")

        entries = AbiSurfaceMapper.json_to_abi_entries(result)
        logger.info(f"Retrieved {len(entries)} ABI entries for {address}")
        return entries

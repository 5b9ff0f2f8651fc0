from typing import Iterable, Optional

from ingestion.etherscan.etherscan_client import EtherscanClient
from standards.mappers.abi_surface_mapper import AbiSurfaceMapper
from standards.models.classification_result import ClassificationResult
from standards.models.contract_abi import AbiEntry
from standards.models.token_standard import StandardCatalog
from standards.service.standard_classifier_service import StandardClassifierService
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_address

logger = get_logger("Contract Standard Service")


class ContractStandardService:
    def __init__(
        self,
        catalog: StandardCatalog,
        etherscan_client: Optional[EtherscanClient] = None,
        classifier: Optional[StandardClassifierService] = None,
    ):
        # Fail at startup, not on the first check
        catalog.ensure_valid()
        self._catalog = catalog
        self._etherscan_client = etherscan_client
        self._classifier = classifier or StandardClassifierService()

    @property
    def catalog(self) -> StandardCatalog:
        return self._catalog

    async def check_address(self, address: str) -> ClassificationResult:
        """
        Fetch address ABI -> reduce to member names -> classify.
        Invalid addresses and request failures propagate to the caller.
        """
        if self._etherscan_client is None:
            raise RuntimeError("ContractStandardService was built without an Etherscan client")

        validate_address(address)
        normalized_address = to_normalized_address(address)

        entries = await self._etherscan_client.get_contract_abi(normalized_address)
        result = self.check_abi(entries)
        logger.info(f"{normalized_address}: {result.kind.value}")
        return result

    def check_abi(self, entries: Iterable[AbiEntry]) -> ClassificationResult:
        surface = AbiSurfaceMapper.abi_entries_to_surface(entries)
        logger.debug(f"Contract surface has {len(surface)} members")
        return self._classifier.classify(surface, self._catalog)

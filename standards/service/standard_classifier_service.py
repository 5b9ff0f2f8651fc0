from typing import Optional

from standards.exceptions import ConfigurationError
from standards.models.classification_result import (
    ClassificationResult,
    EmptyOrUnverifiedSurface,
    MatchedStandard,
    NoStandardMatched,
)
from standards.models.contract_abi import ContractSurface
from standards.models.token_standard import StandardCatalog, StandardDefinition
from utils.logger_utils import get_logger

logger = get_logger("Standard Classifier Service")


class StandardClassifierService:
    """
    Matches a contract surface against an ordered catalog of token standards.

    Stateless: one instance can serve any number of concurrent callers sharing
    the same catalog.
    """

    @staticmethod
    def classify(surface: ContractSurface, catalog: Optional[StandardCatalog]) -> ClassificationResult:
        """
        Returns the first standard in catalog order whose required members are all
        exposed by the surface.

        Matching is by exact, case-sensitive member name. Argument and return types
        are not compared, so two members with the same name but different
        signatures count as the same member.

        Raises:
            TypeError: surface is None.
            ConfigurationError: catalog is missing, empty, or has an empty definition.
        """
        if surface is None:
            raise TypeError("surface must not be None")
        if catalog is None:
            raise ConfigurationError("Standard catalog is missing")
        catalog.ensure_valid()

        # Wallets and unverified contracts never reach the standard checks
        if surface.is_empty():
            return EmptyOrUnverifiedSurface()

        for definition in catalog.definitions:
            logger.debug(f"Checking {definition.name}...")
            if StandardClassifierService.implements(surface, definition):
                logger.debug(f"Surface satisfies {definition.name}")
                return MatchedStandard(standard=definition.name)

        return NoStandardMatched()

    @staticmethod
    def implements(surface: ContractSurface, definition: StandardDefinition) -> bool:
        # surface.members is a frozenset, so each lookup is O(1)
        return all(member in surface.members for member in definition.required_members)

import pathlib
from typing import Any, Dict, List, Optional, Union

import orjson

from abi.erc20_abi import ERC20_ABI
from abi.erc721_abi import ERC721_ABI
from abi.erc1155_abi import ERC1155_ABI
from constants.constants import ERC20, ERC721, ERC1155, STANDARD_ABI_FILES, STANDARD_ORDER
from standards.exceptions import ConfigurationError
from standards.models.token_standard import StandardCatalog, StandardDefinition
from utils.logger_utils import get_logger

logger = get_logger("Standard Catalog Service")

BUILTIN_STANDARD_ABIS = {
    ERC20: ERC20_ABI,
    ERC721: ERC721_ABI,
    ERC1155: ERC1155_ABI,
}


class StandardCatalogService:
    """
    Builds the StandardCatalog once at startup. Order always follows STANDARD_ORDER;
    the mappings above are only looked up, never iterated.
    """

    @staticmethod
    def load_catalog(abi_dir: Optional[Union[str, pathlib.Path]] = None) -> StandardCatalog:
        if abi_dir:
            return StandardCatalogService.load_catalog_from_dir(abi_dir)
        return StandardCatalogService.load_builtin_catalog()

    @staticmethod
    def load_builtin_catalog() -> StandardCatalog:
        catalog = StandardCatalog.of(
            StandardCatalogService.definition_from_abi(name, BUILTIN_STANDARD_ABIS[name])
            for name in STANDARD_ORDER
        )
        logger.debug(f"Loaded built-in standard catalog: {', '.join(catalog.names)}")
        return catalog

    @staticmethod
    def load_catalog_from_dir(abi_dir: Union[str, pathlib.Path]) -> StandardCatalog:
        directory = pathlib.Path(abi_dir)
        if not directory.is_dir():
            raise ConfigurationError(f"Standard ABI directory not found: {directory}")

        definitions = []
        for name in STANDARD_ORDER:
            path = directory / STANDARD_ABI_FILES[name]
            definitions.append(
                StandardCatalogService.definition_from_abi(name, StandardCatalogService._read_abi_file(name, path))
            )

        catalog = StandardCatalog.of(definitions)
        logger.info(f"Loaded standard catalog from {directory}: {', '.join(catalog.names)}")
        return catalog

    @staticmethod
    def definition_from_abi(name: str, abi: List[Dict[str, Any]]) -> StandardDefinition:
        """Required members are the names of every named ABI entry, whatever its type."""
        members = {
            item["name"]
            for item in abi
            if isinstance(item, dict) and isinstance(item.get("name"), str) and item["name"]
        }
        if not members:
            raise ConfigurationError(f"Standard {name} definition has no named members")
        return StandardDefinition.of(name, members)

    @staticmethod
    def _read_abi_file(name: str, path: pathlib.Path) -> List[Dict[str, Any]]:
        try:
            raw = orjson.loads(path.read_bytes())
        except OSError as e:
            raise ConfigurationError(f"Failed to read {path}: {e}") from e
        except orjson.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse {name} ABI JSON in {path}: {e}") from e

        if not isinstance(raw, list):
            raise ConfigurationError(f"{name} ABI in {path} must be a JSON array")
        return raw

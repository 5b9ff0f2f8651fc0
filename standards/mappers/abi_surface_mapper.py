from typing import Any, Iterable, List, Union

import orjson
from pydantic import ValidationError

from constants.constants import SURFACE_ENTRY_TYPES
from standards.exceptions import AbiParseError
from standards.models.contract_abi import AbiEntry, ContractSurface


class AbiSurfaceMapper(object):
    @staticmethod
    def json_to_abi_entries(abi_json: Union[str, bytes]) -> List[AbiEntry]:
        try:
            raw = orjson.loads(abi_json)
        except orjson.JSONDecodeError as e:
            raise AbiParseError(f"ABI is not valid JSON: {e}") from e

        return AbiSurfaceMapper.json_list_to_abi_entries(raw)

    @staticmethod
    def json_list_to_abi_entries(raw: Any) -> List[AbiEntry]:
        if not isinstance(raw, list):
            raise AbiParseError(f"ABI must be a JSON array, got {type(raw).__name__}")

        entries = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise AbiParseError(f"ABI entry #{index} is not an object")
            try:
                entries.append(AbiEntry.model_validate(item))
            except ValidationError as e:
                raise AbiParseError(f"ABI entry #{index} is malformed: {e}") from e
        return entries

    @staticmethod
    def abi_entries_to_surface(entries: Iterable[AbiEntry]) -> ContractSurface:
        """
        Only functions and events count as members. Constructor, fallback, receive
        and custom errors are skipped, as are nameless entries.
        """
        return ContractSurface.of(
            entry.name
            for entry in entries
            if entry.type in SURFACE_ENTRY_TYPES and entry.name
        )

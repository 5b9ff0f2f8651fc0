from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AbiEntry(BaseModel):
    """One element of a contract ABI (function, event, constructor, ...)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Per the Solidity ABI JSON format, "type" can be omitted and defaults to "function"
    type: str = "function"
    name: Optional[str] = None
    inputs: List[Dict[str, Any]] = Field(default_factory=list)
    outputs: List[Dict[str, Any]] = Field(default_factory=list)
    anonymous: bool = False
    state_mutability: Optional[str] = Field(default=None, alias="stateMutability")


class ContractSurface(BaseModel):
    """
    Flat set of function and event names a contract exposes.
    An empty surface means a wallet or a contract whose source is not verified.
    """

    model_config = ConfigDict(frozen=True)

    members: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def of(cls, names: Iterable[str]) -> "ContractSurface":
        return cls(members=frozenset(names))

    def is_empty(self) -> bool:
        return not self.members

    def __contains__(self, name: str) -> bool:
        return name in self.members

    def __len__(self) -> int:
        return len(self.members)

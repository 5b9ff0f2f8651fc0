from typing import FrozenSet, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field

from standards.exceptions import ConfigurationError


class StandardDefinition(BaseModel):
    """A token standard and the member names a contract must expose to comply with it."""

    model_config = ConfigDict(frozen=True)

    name: str
    required_members: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def of(cls, name: str, required_members: Iterable[str]) -> "StandardDefinition":
        return cls(name=name, required_members=frozenset(required_members))


class StandardCatalog(BaseModel):
    """
    Ordered standard definitions. Position is priority: when a contract satisfies
    more than one standard, the earliest definition wins. Kept as a tuple so the
    order never depends on mapping iteration.
    """

    model_config = ConfigDict(frozen=True)

    definitions: Tuple[StandardDefinition, ...] = ()

    @classmethod
    def of(cls, definitions: Iterable[StandardDefinition]) -> "StandardCatalog":
        catalog = cls(definitions=tuple(definitions))
        catalog.ensure_valid()
        return catalog

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.definitions)

    def ensure_valid(self) -> None:
        """Raises ConfigurationError unless the catalog can drive a classification."""
        if not self.definitions:
            raise ConfigurationError("Standard catalog is empty")

        seen = set()
        for definition in self.definitions:
            if not definition.required_members:
                raise ConfigurationError(f"Standard {definition.name} has no required members")
            if definition.name in seen:
                raise ConfigurationError(f"Standard {definition.name} is defined more than once")
            seen.add(definition.name)

    def __len__(self) -> int:
        return len(self.definitions)

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ResultKind(str, Enum):
    MATCHED_STANDARD = "MATCHED_STANDARD"
    NO_STANDARD_MATCHED = "NO_STANDARD_MATCHED"
    EMPTY_OR_UNVERIFIED_SURFACE = "EMPTY_OR_UNVERIFIED_SURFACE"     # wallet or unverified source


class MatchedStandard(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResultKind.MATCHED_STANDARD] = ResultKind.MATCHED_STANDARD
    standard: str


class NoStandardMatched(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResultKind.NO_STANDARD_MATCHED] = ResultKind.NO_STANDARD_MATCHED


class EmptyOrUnverifiedSurface(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ResultKind.EMPTY_OR_UNVERIFIED_SURFACE] = ResultKind.EMPTY_OR_UNVERIFIED_SURFACE


ClassificationResult = Annotated[
    Union[MatchedStandard, NoStandardMatched, EmptyOrUnverifiedSurface],
    Field(discriminator="kind"),
]

# Rebuilds a result from its model_dump() form
classification_result_adapter = TypeAdapter(ClassificationResult)

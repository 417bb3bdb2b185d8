# newsanalyzer/models.py
from __future__ import annotations

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator


class Band(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"

    @property
    def color(self) -> str:
        return BAND_COLORS[self]


BAND_COLORS = {
    Band.GOOD: "#4CAF50",
    Band.WARNING: "#FFC107",
    Band.BAD: "#F44336",
}


class AnalysisResult(BaseModel):
    """
    The model's judgment on a piece of text.

    Accepts the wire names used in the completion JSON (``credibilityScore``,
    ``redFlags``) as well as the attribute names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    credibility_score: Union[StrictInt, StrictFloat] = Field(alias="credibilityScore")
    analysis: StrictStr
    red_flags: List[StrictStr] = Field(alias="redFlags")
    recommendations: List[StrictStr]

    @field_validator("credibility_score")
    @classmethod
    def _score_in_range(cls, v):
        if not 0 <= v <= 100:
            raise ValueError("credibilityScore must be between 0 and 100")
        return v

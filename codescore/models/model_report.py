"""Report models produced by a scoring run."""

from datetime import datetime

from pydantic import BaseModel, Field

from codescore.models.common import _utc_now
from codescore.models.model_config import BlendMode


class WeightAnalysis(BaseModel):
    """Summary of a weight table's scale."""

    total: float = Field(ge=0.0, description="Sum of all weights")
    sums_to_100: bool = Field(description="Whether the composite is on a 0-100 scale")


class ScoreReport(BaseModel):
    """Everything a scoring run computed.

    Stored in score_report.json. `score` is a weighted sum and is only
    bounded to 0-100 when the weights sum to 100.
    """

    version: str = Field(default="1.0", description="Schema version for migrations")
    score: float
    norms: dict[str, int | float]
    weights: dict[str, int | float]
    breakdown: dict[str, int | float] = Field(default_factory=dict)
    blend_mode: BlendMode = BlendMode.AVERAGE
    sources: list[str] = Field(default_factory=list, description="Artifacts present this run")
    timestamp: datetime = Field(default_factory=_utc_now)

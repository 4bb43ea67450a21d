"""Performance index data models.

Data structures only, no business logic.
"""

from pydantic import BaseModel, ConfigDict, Field


class PerformanceMetrics(BaseModel):
    """Six normalized sub-metrics (0-100 scale)."""

    model_config = ConfigDict(frozen=True)

    aggression: int = Field(0, ge=0, le=100)  # KDA
    farming: int = Field(0, ge=0, le=100)  # CS/min
    vision: int = Field(0, ge=0, le=100)  # Vision/min
    consistency: int = Field(0, ge=0, le=100)  # Win rate
    teamfighting: int = Field(0, ge=0, le=100)  # Kill participation
    survivability: int = Field(0, ge=0, le=100)  # Inverse deaths


class PerformanceIndex(BaseModel):
    """Weighted composite of the six metrics."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(0, ge=0, le=100)
    metrics: PerformanceMetrics = Field(default_factory=PerformanceMetrics)

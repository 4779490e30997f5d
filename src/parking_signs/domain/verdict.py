"""Models for parking sign analysis requests and results."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisRequest(BaseModel):
    """Ordered set of embeddable images submitted for analysis."""

    images: list[str]


class AnalysisVerdict(BaseModel):
    """Structured outcome of a parking sign analysis."""

    model_config = ConfigDict(populate_by_name=True)

    can_park: bool = Field(alias="canPark")
    explanation: str = ""
    restrictions: list[str] = Field(default_factory=list)
    time_limit: int | None = Field(default=None, alias="timeLimit")

    @field_validator("restrictions", mode="before")
    @classmethod
    def _null_restrictions(cls, value: object) -> object:
        """Treat a null restriction list as empty."""
        return [] if value is None else value


class AnalysisFailure(BaseModel):
    """Error body returned when an analysis cannot be produced."""

    error: str
    details: str

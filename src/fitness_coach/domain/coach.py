"""Models for coach queries, classification and prompts."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitness_coach.domain.metrics import MetricsResult


class FitnessTopic(StrEnum):
    """Sub-topic of an in-domain question."""

    WORKOUT = "workout"
    NUTRITION = "nutrition"
    GENERAL = "general"


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of keyword classification for a free-text query."""

    in_domain: bool
    topic: FitnessTopic


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters sent to the text generation service."""

    temperature: float = 0.7
    max_output_tokens: int = 300


@dataclass(frozen=True)
class PromptRequest:
    """Assembled prompt plus generation parameters."""

    text: str
    generation_config: GenerationConfig

    def to_payload(self) -> dict[str, object]:
        """Return the generateContent request body."""
        return {
            "contents": [{"parts": [{"text": self.text}]}],
            "generationConfig": {
                "temperature": self.generation_config.temperature,
                "maxOutputTokens": self.generation_config.max_output_tokens,
            },
        }


class RangeData(BaseModel):
    """Min/max pair as sent by the UI."""

    min: float
    max: float


class ResultsData(BaseModel):
    """Calculated targets echoed back by the UI with a coach query."""

    model_config = ConfigDict(populate_by_name=True)

    maintenance_calories: float | None = Field(
        default=None, alias="maintenanceCalories"
    )
    goal_calories: RangeData | None = Field(default=None, alias="goalCalories")
    protein: RangeData | None = None
    fats: RangeData | None = None
    carbs: RangeData | None = None

    @classmethod
    def from_metrics(cls, metrics: MetricsResult) -> "ResultsData":
        return cls.model_validate(metrics.to_dict())


class UserDetails(BaseModel):
    """Loosely-typed profile details attached to a coach query."""

    model_config = ConfigDict(populate_by_name=True)

    age: float | None = None
    weight: float | None = None
    weight_unit: str | None = Field(default=None, alias="weightUnit")
    height_unit: str | None = Field(default=None, alias="heightUnit")
    height_cm: float | None = Field(default=None, alias="heightCm")
    height_feet: float | None = Field(default=None, alias="heightFeet")
    height_inches: float | None = Field(default=None, alias="heightInches")
    sex: str | None = None
    activity_level: str | None = Field(default=None, alias="activityLevel")
    goal: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CoachQuery(BaseModel):
    """Inbound coach request."""

    model_config = ConfigDict(populate_by_name=True)

    workout_type: str | None = Field(default=None, alias="workoutType")
    location: str | None = None
    user_details: UserDetails = Field(
        default_factory=UserDetails, alias="userDetails"
    )
    results: ResultsData | None = None
    difficulty: str | None = None
    user_input: str | None = Field(default=None, alias="userInput")

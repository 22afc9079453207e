"""User profile models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Sex(StrEnum):
    """Biological sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Activity levels offered by the profile form."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"
    EXTRA_ACTIVE = "Extra Active"


class Goal(StrEnum):
    """Body composition goal."""

    BULK = "bulk"
    CUT = "cut"
    MAINTAIN = "maintain"


@dataclass(frozen=True)
class UserProfile:
    """Body metrics in metric units, ready for calculation."""

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: str | None
    goal: str


class ProfileForm(BaseModel):
    """Profile as captured by the input form, in the user's chosen units."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    weight: float = Field(gt=0)
    weight_unit: Literal["kg", "lbs"] = Field(default="kg", alias="weightUnit")
    height_unit: Literal["cm", "ft"] = Field(default="cm", alias="heightUnit")
    height_cm: float | None = Field(default=None, gt=0, le=300, alias="heightCm")
    height_feet: int | None = Field(default=None, ge=0, alias="heightFeet")
    height_inches: float | None = Field(
        default=None, ge=0, lt=12, alias="heightInches"
    )
    age: int = Field(ge=1, le=120)
    sex: Sex
    activity_level: ActivityLevel | None = Field(
        default=ActivityLevel.SEDENTARY, alias="activityLevel"
    )
    goal: Goal

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        """Treat empty form inputs as missing."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def check_height(self) -> "ProfileForm":
        if self.height_unit == "cm" and self.height_cm is None:
            raise ValueError("heightCm is required when heightUnit is cm")
        if self.height_unit == "ft" and (
            self.height_feet is None or self.height_inches is None
        ):
            raise ValueError(
                "heightFeet and heightInches are required when heightUnit is ft"
            )
        return self

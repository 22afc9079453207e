"""Calorie and macro target calculations.

BMR uses the Mifflin-St Jeor equation. Fats are 20-30% of calories and
carbs take the remaining calories after protein and fats. Values are
rounded half-up, so ``2008.5`` becomes ``2009``.
"""

import logging
import math

from fitness_coach.domain.metrics import MacroRange, MetricsResult
from fitness_coach.domain.profile import ProfileForm, Sex, UserProfile

_ACTIVITY_MULTIPLIERS = {
    "Sedentary": 1.2,
    "LightlyActive": 1.375,
    "ModeratelyActive": 1.55,
    "VeryActive": 1.725,
    "ExtraActive": 1.9,
}
_DEFAULT_MULTIPLIER = _ACTIVITY_MULTIPLIERS["Sedentary"]

_GOAL_FACTORS = {
    "bulk": (1.10, 1.20),
    "cut": (0.80, 0.90),
    "maintain": (1.0, 1.0),
}

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

_KG_PER_POUND = 0.453592
_CM_PER_INCH = 2.54

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def bmr(weight_kg: float, height_cm: float, age: float, sex: str) -> float:
    """Basal metabolic rate in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == Sex.MALE:
        return base + 5
    return base - 161


def activity_multiplier(level: str | None) -> float:
    """Return the TDEE multiplier for an activity level, Sedentary if unknown."""
    if not level:
        return _DEFAULT_MULTIPLIER
    return _ACTIVITY_MULTIPLIERS.get(level.replace(" ", ""), _DEFAULT_MULTIPLIER)


def tdee(bmr_kcal: float, multiplier: float) -> float:
    """Total daily energy expenditure."""
    return bmr_kcal * multiplier


def goal_calories(tdee_kcal: float, goal: str | None) -> MacroRange:
    """Daily calorie range for a goal; unknown goals maintain."""
    low, high = _GOAL_FACTORS.get(goal or "", _GOAL_FACTORS["maintain"])
    return MacroRange(
        min=round_half_up(tdee_kcal * low),
        max=round_half_up(tdee_kcal * high),
    )


def protein_range(weight_kg: float) -> MacroRange:
    """Protein target of 1.6-2.2 g per kg of body weight."""
    return MacroRange(
        min=round_half_up(weight_kg * 1.6),
        max=round_half_up(weight_kg * 2.2),
    )


def fats_range(calories: float) -> MacroRange:
    """Fat grams covering 20-30% of the given calories."""
    return MacroRange(
        min=round_half_up(calories * 0.20 / KCAL_PER_G_FAT),
        max=round_half_up(calories * 0.30 / KCAL_PER_G_FAT),
    )


def carbs_range(
    total_calories: float, protein_grams: float, fats_grams: float
) -> MacroRange:
    """Carb grams from the calories left after protein and fats.

    Not clamped: very low calories relative to the protein and fat floors
    produce negative values.
    """
    remaining = (
        total_calories
        - protein_grams * KCAL_PER_G_PROTEIN
        - fats_grams * KCAL_PER_G_FAT
    )
    return MacroRange(
        min=round_half_up(remaining * 0.8 / KCAL_PER_G_CARBS),
        max=round_half_up(remaining * 1.2 / KCAL_PER_G_CARBS),
    )


def pounds_to_kg(pounds: float) -> float:
    return pounds * _KG_PER_POUND


def kg_to_pounds(kg: float) -> float:
    return kg / _KG_PER_POUND


def feet_inches_to_cm(feet: float, inches: float) -> float:
    return (feet * 12 + inches) * _CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    return cm / _CM_PER_INCH


def profile_from_form(form: ProfileForm) -> UserProfile:
    """Convert a form profile to metric units."""
    if form.weight_unit == "kg":
        weight_kg = form.weight
    else:
        weight_kg = pounds_to_kg(form.weight)
    if form.height_unit == "cm":
        height_cm = float(form.height_cm or 0)
    else:
        height_cm = feet_inches_to_cm(form.height_feet or 0, form.height_inches or 0)
    return UserProfile(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age=form.age,
        sex=form.sex,
        activity_level=form.activity_level,
        goal=form.goal,
    )


def calculate_metrics(profile: UserProfile) -> MetricsResult:
    """Compute maintenance calories, goal calories and macro ranges.

    Fats and carbs are derived per bound: the minimum from the goal's
    minimum calories and the maximum from its maximum calories.
    """
    expenditure = tdee(
        bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex),
        activity_multiplier(profile.activity_level),
    )
    calories = goal_calories(expenditure, profile.goal)
    protein = protein_range(profile.weight_kg)
    fats = MacroRange(
        min=fats_range(calories.min).min,
        max=fats_range(calories.max).max,
    )
    carbs, warnings = _clamp_carbs(
        MacroRange(
            min=carbs_range(calories.min, protein.min, fats.min).min,
            max=carbs_range(calories.max, protein.max, fats.max).max,
        )
    )
    if warnings:
        _logger.warning(
            "Carb targets adjusted: %s",
            "; ".join(warnings),
            extra={"goal_calories": calories.to_dict()},
        )
    return MetricsResult(
        maintenance_calories=round_half_up(expenditure),
        goal_calories=calories,
        protein=protein,
        fats=fats,
        carbs=carbs,
        warnings=tuple(warnings),
    )


def _clamp_carbs(carbs: MacroRange) -> tuple[MacroRange, list[str]]:
    """Clamp negative carb bounds to zero and keep min <= max."""
    warnings: list[str] = []
    low, high = carbs.min, carbs.max
    if low < 0 or high < 0:
        warnings.append(
            "Calories are too low to cover protein and fat targets; "
            "carbs clamped to 0 g."
        )
        low, high = max(low, 0), max(high, 0)
    if high < low:
        warnings.append("Carb range collapsed to its minimum.")
        high = low
    return MacroRange(min=low, max=high), warnings

"""Calorie and macro target models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroRange:
    """Inclusive integer range for calories or grams."""

    min: int
    max: int

    def to_dict(self) -> dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class MetricsResult:
    """Daily energy and macro targets derived from a profile."""

    maintenance_calories: int
    goal_calories: MacroRange
    protein: MacroRange
    fats: MacroRange
    carbs: MacroRange
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return the camelCase payload consumed by the UI and the coach API."""
        return {
            "maintenanceCalories": self.maintenance_calories,
            "goalCalories": self.goal_calories.to_dict(),
            "protein": self.protein.to_dict(),
            "fats": self.fats.to_dict(),
            "carbs": self.carbs.to_dict(),
            "warnings": list(self.warnings),
        }

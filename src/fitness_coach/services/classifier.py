"""Keyword classification of free-text coach queries.

Matching is plain case-insensitive substring containment: no tokenizing
and no stemming, so "program" also matches inside longer words.
"""

from dataclasses import dataclass, replace

from fitness_coach.domain.coach import ClassificationResult, FitnessTopic

FITNESS_KEYWORDS: tuple[str, ...] = (
    # training
    "workout", "exercise", "training", "gym", "fitness", "muscle", "strength",
    "cardio", "weight", "lifting", "reps", "sets", "routine", "program", "plan",
    # nutrition
    "diet", "nutrition", "calories", "protein", "carbs", "fats", "macros",
    "meal", "supplement", "vitamin", "mineral", "bmr", "tdee", "metabolism",
    "body fat", "lean mass", "bulking", "cutting", "maintenance", "gain",
    "lose", "weight loss", "muscle gain",
    # recovery
    "recovery", "rest", "sleep", "hydration", "water", "stretching",
    "flexibility", "mobility", "injury", "pain", "soreness", "cramps",
    "fatigue", "energy", "endurance", "performance",
    # sports
    "athlete", "sports", "running", "cycling", "swimming",
    # body parts and splits
    "push", "pull", "legs", "upper body", "lower body", "core", "abs", "chest",
    "back", "shoulders", "arms", "glutes", "quads", "hamstrings", "calves",
    "biceps", "triceps",
)  # fmt: skip

WORKOUT_KEYWORDS: tuple[str, ...] = (
    "workout", "routine", "training", "program", "plan", "exercise", "push",
    "pull", "legs", "4-day", "5-day", "split",
)  # fmt: skip

NUTRITION_KEYWORDS: tuple[str, ...] = (
    "diet", "nutrition", "calories", "protein", "carbs", "fats", "macros",
    "meal", "bmr", "tdee", "bulking", "cutting", "maintenance",
)  # fmt: skip

_TOPIC_RULES: tuple[tuple[FitnessTopic, tuple[str, ...]], ...] = (
    (FitnessTopic.WORKOUT, WORKOUT_KEYWORDS),
    (FitnessTopic.NUTRITION, NUTRITION_KEYWORDS),
)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def is_fitness_related(text: str | None) -> bool:
    """Return True when the text mentions any fitness keyword."""
    if not text:
        return False
    return _contains_any(text.lower(), FITNESS_KEYWORDS)


def classify_fitness_type(text: str | None) -> FitnessTopic:
    """Return the first topic whose keywords appear; workout wins over nutrition."""
    if not text:
        return FitnessTopic.GENERAL
    lowered = text.lower()
    for topic, keywords in _TOPIC_RULES:
        if _contains_any(lowered, keywords):
            return topic
    return FitnessTopic.GENERAL


def classify(text: str | None) -> ClassificationResult:
    """Decide whether a query is in domain and which template it needs."""
    return ClassificationResult(
        in_domain=is_fitness_related(text),
        topic=classify_fitness_type(text),
    )


@dataclass(frozen=True)
class WorkoutPreferences:
    """Workout slots collected from chat messages."""

    workout_type: str | None = None
    location: str | None = None
    difficulty: str | None = None


def detect_preferences(
    text: str, current: WorkoutPreferences | None = None
) -> WorkoutPreferences:
    """Fill empty preference slots from keywords in a chat message."""
    prefs = current or WorkoutPreferences()
    lowered = text.lower()

    if prefs.workout_type is None:
        if "full" in lowered or "body" in lowered:
            prefs = replace(prefs, workout_type="full-body")
        elif "split" in lowered:
            prefs = replace(prefs, workout_type="split")
        elif _contains_any(lowered, ("push", "pull", "leg")):
            prefs = replace(prefs, workout_type="push-pull-legs")

    if prefs.location is None:
        if "gym" in lowered or "fitness" in lowered:
            prefs = replace(prefs, location="gym")
        elif "home" in lowered or "house" in lowered:
            prefs = replace(prefs, location="home")

    if prefs.difficulty is None:
        for level in ("Beginner", "Intermediate", "Advanced"):
            if level.lower() in lowered:
                prefs = replace(prefs, difficulty=level)
                break

    return prefs

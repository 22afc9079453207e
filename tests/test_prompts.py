"""Tests for prompt assembly."""

from fitness_coach.domain.coach import (
    ClassificationResult,
    FitnessTopic,
    RangeData,
    ResultsData,
    UserDetails,
)
from fitness_coach.domain.profile import Sex, UserProfile
from fitness_coach.services.metrics import calculate_metrics
from fitness_coach.services.prompts import SYSTEM_INSTRUCTION, build_prompt


def _results() -> ResultsData:
    return ResultsData(
        maintenance_calories=2009,
        goal_calories=RangeData(min=1607, max=1808),
        protein=RangeData(min=112, max=154),
        fats=RangeData(min=36, max=60),
        carbs=RangeData(min=167, max=196),
    )


def _details() -> UserDetails:
    return UserDetails(
        age=25,
        weight=70,
        weight_unit="kg",
        height_unit="cm",
        height_cm=175,
        sex="male",
        activity_level="Sedentary",
        goal="cut",
    )


def _classification(topic: FitnessTopic) -> ClassificationResult:
    return ClassificationResult(in_domain=True, topic=topic)


def test_workout_template_requires_type_and_location() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.WORKOUT),
        _details(),
        _results(),
        "Give me a push workout",
        workout_type="push-pull-legs",
        location="gym",
    )

    assert prompt.text.startswith(SYSTEM_INSTRUCTION)
    assert "Generate a push-pull-legs workout plan for gym workouts" in prompt.text
    assert "- Difficulty Level: Beginner" in prompt.text
    assert "### Main Workout" in prompt.text
    assert "- Goal Calories: 1607-1808" in prompt.text
    assert "- Protein: 112-154g" in prompt.text


def test_workout_without_location_falls_back_to_general() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.WORKOUT),
        _details(),
        _results(),
        "Give me a push workout",
        workout_type="push-pull-legs",
    )

    assert "Answer the following fitness-related question" in prompt.text
    assert "Question: Give me a push workout" in prompt.text


def test_nutrition_template_embeds_question_and_metrics() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.NUTRITION),
        _details(),
        _results(),
        "How much protein per meal?",
    )

    assert "nutrition-related question with specific numbers" in prompt.text
    assert "Question: How much protein per meal?" in prompt.text
    assert "- Weight: 70 kg" in prompt.text
    assert "- Height: 175 cm" in prompt.text
    assert "- Maintenance Calories: 2009" in prompt.text
    assert "No disclaimers." in prompt.text


def test_nutrition_without_metrics_uses_general_template() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.NUTRITION),
        _details(),
        None,
        "How much protein per meal?",
    )

    assert "Answer the following fitness-related question" in prompt.text
    assert "- Maintenance Calories: Not provided" in prompt.text
    assert "- Carbs: Not provided" in prompt.text


def test_missing_profile_fields_render_not_provided() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.GENERAL), None, None, "Best cardio?"
    )

    for label in ("Age", "Weight", "Height", "Sex", "Activity Level", "Goal"):
        assert f"- {label}: Not provided" in prompt.text


def test_imperial_height_rendering() -> None:
    details = UserDetails(height_unit="ft", height_feet=5, height_inches=11)

    prompt = build_prompt(
        _classification(FitnessTopic.GENERAL), details, None, "Best cardio?"
    )

    assert "- Height: 5'11\"" in prompt.text


def test_generation_config_is_fixed() -> None:
    prompt = build_prompt(
        _classification(FitnessTopic.GENERAL), None, None, "Best cardio?"
    )

    payload = prompt.to_payload()

    assert payload["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 300}
    assert payload["contents"] == [{"parts": [{"text": prompt.text}]}]


def test_results_from_metrics_feed_the_nutrition_template() -> None:
    metrics = calculate_metrics(
        UserProfile(
            weight_kg=70,
            height_cm=175,
            age=25,
            sex=Sex.MALE,
            activity_level="Sedentary",
            goal="cut",
        )
    )

    prompt = build_prompt(
        _classification(FitnessTopic.NUTRITION),
        _details(),
        ResultsData.from_metrics(metrics),
        "How many carbs?",
    )

    assert "- Maintenance Calories: 2009" in prompt.text
    assert "- Fats: 36-60g" in prompt.text
    assert "- Carbs: 167-196g" in prompt.text

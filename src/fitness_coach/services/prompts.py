"""Prompt templates for the coach."""

from fitness_coach.domain.coach import (
    ClassificationResult,
    FitnessTopic,
    GenerationConfig,
    PromptRequest,
    RangeData,
    ResultsData,
    UserDetails,
)

SYSTEM_INSTRUCTION = (
    "You are a professional fitness coach. Provide structured, actionable "
    "fitness advice. Always format workout plans with clear sections. "
    "Keep responses concise and professional."
)
NOT_PROVIDED = "Not provided"
DEFAULT_DIFFICULTY = "Beginner"
GENERATION_CONFIG = GenerationConfig(temperature=0.7, max_output_tokens=300)

_WORKOUT_FORMAT = """Please provide a workout plan that includes:
1. Warm-up (3-5 min)
2. Main Workout (5-8 exercises with sets x reps and rest time)
3. Cool-down (1-2 stretches)
4. Notes (1 short tip)

Format the response in this exact structure:
## Title (Goal + Gym/Home + Level)

### Warm-up
- [Exercise] - [Duration]

### Main Workout
1. [Exercise Name]
   - Sets x Reps: [sets] x [reps]
   - Rest: [time]

(Repeat for 5-8 exercises)

### Cool-down
- [Stretch] - [Duration]

### Notes
- [1 short actionable tip]

Keep response between 80-140 words. No disclaimers or long paragraphs."""


def build_prompt(  # noqa: PLR0913
    classification: ClassificationResult,
    user_details: UserDetails | None,
    results: ResultsData | None,
    question: str,
    *,
    workout_type: str | None = None,
    location: str | None = None,
    difficulty: str | None = None,
) -> PromptRequest:
    """Select a template and assemble the full prompt for the generator."""
    details = user_details or UserDetails()
    if classification.topic == FitnessTopic.WORKOUT and workout_type and location:
        body = _workout_prompt(details, results, workout_type, location, difficulty)
    elif classification.topic == FitnessTopic.NUTRITION and results is not None:
        body = _nutrition_prompt(details, results, question)
    else:
        body = _general_prompt(details, results, question)
    return PromptRequest(
        text=f"{SYSTEM_INSTRUCTION}\n\n{body}",
        generation_config=GENERATION_CONFIG,
    )


def _workout_prompt(
    details: UserDetails,
    results: ResultsData | None,
    workout_type: str,
    location: str,
    difficulty: str | None,
) -> str:
    return (
        f"Generate a {workout_type} workout plan for {location} workouts "
        "based on the following user details:\n\n"
        f"{_profile_block(details, difficulty=difficulty or DEFAULT_DIFFICULTY)}\n\n"
        f"{_results_block(results)}\n\n"
        f"{_WORKOUT_FORMAT}"
    )


def _nutrition_prompt(
    details: UserDetails, results: ResultsData, question: str
) -> str:
    return (
        "Answer the following nutrition-related question with specific "
        "numbers based on the user's results:\n\n"
        f"Question: {question}\n\n"
        f"{_profile_block(details)}\n\n"
        f"{_results_block(results)}\n\n"
        "Provide specific, actionable advice with numbers. "
        "Keep response between 80-140 words. No disclaimers."
    )


def _general_prompt(
    details: UserDetails, results: ResultsData | None, question: str
) -> str:
    return (
        "Answer the following fitness-related question concisely and "
        "professionally:\n\n"
        f"Question: {question}\n\n"
        f"{_profile_block(details)}\n\n"
        f"{_results_block(results)}\n\n"
        "Provide specific, actionable advice. "
        "Keep response between 80-140 words. No disclaimers."
    )


def _profile_block(details: UserDetails, difficulty: str | None = None) -> str:
    lines = [
        "User Profile:",
        f"- Age: {_value(details.age)}",
        f"- Weight: {_weight(details)}",
        f"- Height: {_height(details)}",
        f"- Sex: {_value(details.sex)}",
        f"- Activity Level: {_value(details.activity_level)}",
        f"- Goal: {_value(details.goal)}",
    ]
    if difficulty is not None:
        lines.append(f"- Difficulty Level: {difficulty}")
    return "\n".join(lines)


def _results_block(results: ResultsData | None) -> str:
    data = results or ResultsData()
    return "\n".join(
        [
            "Results Data:",
            f"- Maintenance Calories: {_value(data.maintenance_calories)}",
            f"- Goal Calories: {_range(data.goal_calories)}",
            f"- Protein: {_range(data.protein, 'g')}",
            f"- Fats: {_range(data.fats, 'g')}",
            f"- Carbs: {_range(data.carbs, 'g')}",
        ]
    )


def _value(value: object) -> str:
    if value is None or value == "":
        return NOT_PROVIDED
    return _format_number(value)


def _format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _weight(details: UserDetails) -> str:
    if details.weight is None:
        return NOT_PROVIDED
    if details.weight_unit:
        return f"{_format_number(details.weight)} {details.weight_unit}"
    return _format_number(details.weight)


def _height(details: UserDetails) -> str:
    if details.height_unit == "ft":
        if details.height_feet is None:
            return NOT_PROVIDED
        feet = _format_number(details.height_feet)
        inches = _format_number(details.height_inches or 0.0)
        return f"{feet}'{inches}\""
    if details.height_cm is None:
        return NOT_PROVIDED
    return f"{_format_number(details.height_cm)} cm"


def _range(value: RangeData | None, unit: str = "") -> str:
    if value is None:
        return NOT_PROVIDED
    return f"{_format_number(value.min)}-{_format_number(value.max)}{unit}"

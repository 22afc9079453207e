"""Offline responder used when the generator is unavailable."""

from dataclasses import dataclass

CANNED_WORKOUT_PLAN = """## Home Full-Body Workout Plan

### Warm-up
- Jumping Jacks - 3 minutes
- Arm Circles - 1 minute
- Leg Swings - 1 minute

### Main Workout
1. Push-ups
   - Sets x Reps: 3 x 10-15
   - Rest: 60 seconds

2. Squats
   - Sets x Reps: 3 x 15-20
   - Rest: 60 seconds

3. Plank
   - Sets x Reps: 3 x 30-60 seconds
   - Rest: 60 seconds

4. Lunges
   - Sets x Reps: 3 x 10 each leg
   - Rest: 60 seconds

### Cool-down
- Hamstring Stretch - 30 seconds each leg
- Chest Stretch - 30 seconds

### Notes
- Focus on form over speed for best results"""

CANNED_HINT = (
    "I can help with fitness-related questions. Try asking about workouts, "
    "nutrition, or specific exercises!"
)


@dataclass
class CannedCoachResponder:
    """Deterministic responder with a fixed workout plan."""

    workout_plan: str = CANNED_WORKOUT_PLAN
    hint: str = CANNED_HINT

    def answer(self, text: str | None) -> str:
        """Return the workout plan for workout questions, else a hint."""
        if text and "workout" in text.lower():
            return self.workout_plan
        return self.hint

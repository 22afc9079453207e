"""Chat session orchestration for the coach widget."""

import logging
from dataclasses import dataclass, field

from fitness_coach.domain.coach import CoachQuery, ResultsData, UserDetails
from fitness_coach.domain.errors import CoachError
from fitness_coach.services.canned import CannedCoachResponder
from fitness_coach.services.classifier import WorkoutPreferences, detect_preferences
from fitness_coach.services.coach import CoachService

GENERIC_ERROR_MESSAGE = (
    "Sorry, I couldn't process your request at the moment. "
    "Please try again later."
)
BUSY_MESSAGE = "The AI service is currently busy. Please wait a moment and try again."
TOO_MANY_REQUESTS_MESSAGE = (
    "Too many requests. Please wait a few minutes before trying again."
)
UNAVAILABLE_MESSAGE = (
    "The AI service is temporarily unavailable. Please try again in a few minutes."
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatReply:
    """Message shown to the user after a chat turn."""

    text: str
    is_error: bool = False


@dataclass
class ChatSession:
    """Single-user chat state: collected preferences and fallback mode."""

    coach_service: CoachService
    fallback: CannedCoachResponder = field(default_factory=CannedCoachResponder)
    user_details: UserDetails | None = None
    results: ResultsData | None = None
    preferences: WorkoutPreferences = field(default_factory=WorkoutPreferences)
    use_fallback: bool = False

    async def send(self, text: str) -> ChatReply | None:
        """Answer one user message; blank messages are ignored."""
        if not text.strip():
            return None
        self.preferences = detect_preferences(text, self.preferences)
        try:
            if self.use_fallback:
                return ChatReply(text=self.fallback.answer(text))
            query = CoachQuery(
                workout_type=self.preferences.workout_type,
                location=self.preferences.location,
                difficulty=self.preferences.difficulty,
                user_details=self.user_details or UserDetails(),
                results=self.results,
                user_input=text,
            )
            return ChatReply(text=await self.coach_service.answer(query))
        except CoachError as exc:
            _logger.warning(
                "Coach request failed",
                extra={"status": exc.status_code, "error": exc.message},
            )
            return ChatReply(text=self._error_message(exc), is_error=True)
        except Exception:
            _logger.exception("Chat turn failed")
            return ChatReply(text=GENERIC_ERROR_MESSAGE, is_error=True)
        finally:
            self.preferences = WorkoutPreferences()

    def _error_message(self, exc: CoachError) -> str:
        if exc.details and "rate-limited" in exc.details:
            self.use_fallback = True
            return BUSY_MESSAGE
        if exc.status_code == 429:
            self.use_fallback = True
            return TOO_MANY_REQUESTS_MESSAGE
        if exc.status_code >= 500:
            return UNAVAILABLE_MESSAGE
        return GENERIC_ERROR_MESSAGE

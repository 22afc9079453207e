"""Coach service answering free-text fitness questions."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitness_coach.domain.coach import CoachQuery, PromptRequest
from fitness_coach.services.classifier import classify
from fitness_coach.services.prompts import build_prompt

REFUSAL_MESSAGE = (
    "I can help only with fitness-related questions like workouts, nutrition, "
    "calories, macros, protein goals, and training plans. "
    "Ask me anything in that domain!"
)

_logger = logging.getLogger(__name__)


class GenerativeClient(Protocol):
    """Interface for the external text generation service."""

    async def generate(self, prompt: PromptRequest) -> str:
        """Return generated text for the prompt or raise a CoachError."""


@dataclass
class CoachService:
    """Classifies queries and forwards in-domain ones to the generator."""

    client: GenerativeClient

    async def answer(self, query: CoachQuery) -> str:
        """Answer a query with generated text or the fixed refusal."""
        classification = classify(query.user_input)
        if not classification.in_domain:
            _logger.info("Refusing out-of-domain query")
            return REFUSAL_MESSAGE

        prompt = build_prompt(
            classification,
            query.user_details,
            query.results,
            query.user_input or "",
            workout_type=query.workout_type,
            location=query.location,
            difficulty=query.difficulty,
        )
        _logger.info("Forwarding %s query to generator", classification.topic)
        return await self.client.generate(prompt)

"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitness_coach.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from fitness_coach.config import Settings
from fitness_coach.containers import AppContainer
from fitness_coach.domain.coach import PromptRequest
from fitness_coach.domain.errors import CoachError
from fitness_coach.domain.profile import ProfileForm
from fitness_coach.services.canned import CannedCoachResponder
from fitness_coach.services.coach import CoachService, GenerativeClient
from fitness_coach.services.profiles import ProfileService


@dataclass
class FakeGenerativeClient(GenerativeClient):
    """Fake generator that records prompts and returns a fixed reply."""

    reply: str = "## Push Day\n\n### Warm-up\n- Rowing - 5 min"
    error: Exception | None = None
    prompts: list[PromptRequest] = field(default_factory=list)

    async def generate(self, prompt: PromptRequest) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@dataclass
class ScriptedGenerativeClient(GenerativeClient):
    """Fake generator that plays back replies or errors in order."""

    outcomes: list[str | CoachError] = field(default_factory=list)
    prompts: list[PromptRequest] = field(default_factory=list)

    async def generate(self, prompt: PromptRequest) -> str:
        self.prompts.append(prompt)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, CoachError):
            raise outcome
        return outcome


def sample_form(**overrides: object) -> ProfileForm:
    payload: dict[str, object] = {
        "name": "Sam",
        "email": "sam@example.com",
        "weight": 70,
        "weightUnit": "kg",
        "heightUnit": "cm",
        "heightCm": 175,
        "age": 25,
        "sex": "male",
        "activityLevel": "Sedentary",
        "goal": "cut",
    }
    payload.update(overrides)
    return ProfileForm.model_validate(payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key")


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(
    settings: Settings,
    generative_client: FakeGenerativeClient,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        coach_service=CoachService(generative_client),
        canned_responder=CannedCoachResponder(),
        profile_service=ProfileService(profile_repository, key=settings.profile_key),
        close_resources=close_resources,
    )

"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_coach.adapters.gemini_client import HttpxGeminiClient
from fitness_coach.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from fitness_coach.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_coach.config import Settings
from fitness_coach.services.canned import CannedCoachResponder
from fitness_coach.services.coach import CoachService
from fitness_coach.services.profiles import ProfileRepository, ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    coach_service: CoachService
    canned_responder: CannedCoachResponder
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gemini_client = HttpxGeminiClient.create(
        api_key=resolved_settings.gemini_api_key,
        api_url=resolved_settings.gemini_api_url,
        timeout_seconds=resolved_settings.gemini_timeout_seconds,
    )
    profile_service = ProfileService(
        repository=_build_profile_repository(resolved_settings),
        key=resolved_settings.profile_key,
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        coach_service=CoachService(gemini_client),
        canned_responder=CannedCoachResponder(),
        profile_service=profile_service,
        close_resources=close_resources,
    )


def _build_profile_repository(settings: Settings) -> ProfileRepository:
    """Use Supabase when configured, otherwise keep profiles in memory."""
    if settings.supabase_url and settings.supabase_service_key:
        supabase_client = create_client(
            settings.supabase_url, settings.supabase_service_key
        )
        return SupabaseProfileRepository(supabase_client)
    return InMemoryProfileRepository()

"""Process-local profile repository."""

import copy
from dataclasses import dataclass, field

from fitness_coach.services.profiles import ProfileRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """Profile store used when Supabase is not configured."""

    entries: dict[str, dict[str, object]] = field(default_factory=dict)

    def load(self, key: str) -> dict[str, object] | None:
        payload = self.entries.get(key)
        return copy.deepcopy(payload) if payload is not None else None

    def save(self, key: str, payload: dict[str, object]) -> None:
        self.entries[key] = copy.deepcopy(payload)

    def delete(self, key: str) -> None:
        self.entries.pop(key, None)

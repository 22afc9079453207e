"""Profile persistence service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from fitness_coach.domain.profile import ProfileForm

_logger = logging.getLogger(__name__)

_ALIASES = {
    name: info.alias
    for name, info in ProfileForm.model_fields.items()
    if info.alias is not None
}


class ProfileRepository(Protocol):
    """Key-value persistence for JSON profile payloads."""

    def load(self, key: str) -> dict[str, object] | None:
        """Return the stored payload for a key, if present."""

    def save(self, key: str, payload: dict[str, object]) -> None:
        """Store a payload under a key, replacing any existing one."""

    def delete(self, key: str) -> None:
        """Remove the payload stored under a key."""


@dataclass
class ProfileService:
    """Loads and saves the single user profile."""

    repository: ProfileRepository
    key: str = "myfitnessai-user"

    def load(self) -> ProfileForm | None:
        """Return the saved profile, or None if missing or unreadable."""
        payload = self.repository.load(self.key)
        if payload is None:
            return None
        try:
            return ProfileForm.model_validate(payload)
        except ValidationError:
            _logger.exception("Failed to parse stored profile", extra={"key": self.key})
            return None

    def save(self, profile: ProfileForm) -> ProfileForm:
        """Persist the profile and return it."""
        self.repository.save(self.key, _to_payload(profile))
        return profile

    def update(self, changes: dict[str, object]) -> ProfileForm | None:
        """Merge changes, keyed by field name or alias, into the saved profile.

        No-op returning None when no profile is saved.
        """
        current = self.load()
        if current is None:
            return None
        merged = _to_payload(current)
        for name, value in changes.items():
            merged[_ALIASES.get(name, name)] = value
        updated = ProfileForm.model_validate(merged)
        self.repository.save(self.key, _to_payload(updated))
        return updated

    def clear(self) -> None:
        """Remove the saved profile."""
        self.repository.delete(self.key)


def _to_payload(profile: ProfileForm) -> dict[str, object]:
    return profile.model_dump(mode="json", by_alias=True)

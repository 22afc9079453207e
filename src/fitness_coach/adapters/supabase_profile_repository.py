"""Supabase-backed profile repository."""

from dataclasses import dataclass

from supabase import Client

from fitness_coach.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Stores profile payloads in the `profiles` table keyed by profile_key."""

    client: Client

    def load(self, key: str) -> dict[str, object] | None:
        """Return the stored payload for a key, if present."""
        response = (
            self.client.table("profiles")
            .select("profile_key, payload")
            .eq("profile_key", key)
            .limit(1)
            .execute()
        )
        if response.data:
            payload = response.data[0].get("payload")
            if isinstance(payload, dict):
                return payload
        return None

    def save(self, key: str, payload: dict[str, object]) -> None:
        """Insert or replace the payload for a key."""
        self.client.table("profiles").upsert(
            {"profile_key": key, "payload": payload},
            on_conflict="profile_key",
        ).execute()

    def delete(self, key: str) -> None:
        """Delete the payload for a key."""
        self.client.table("profiles").delete().eq("profile_key", key).execute()

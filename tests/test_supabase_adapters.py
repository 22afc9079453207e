"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

from fitness_coach.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": [], "delete": []}
    )
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_profile_repository_load() -> None:
    client = FakeSupabaseClient()
    profiles_table = client.table("profiles")
    profiles_table.queue(
        "select",
        [{"profile_key": "myfitnessai-user", "payload": {"weight": 70}}],
    )

    repository = SupabaseProfileRepository(client)

    assert repository.load("myfitnessai-user") == {"weight": 70}
    assert ("profile_key", "myfitnessai-user") in profiles_table.last_filters


def test_supabase_profile_repository_load_missing() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseProfileRepository(client)

    assert repository.load("myfitnessai-user") is None


def test_supabase_profile_repository_save_upserts_on_key() -> None:
    client = FakeSupabaseClient()
    profiles_table = client.table("profiles")

    repository = SupabaseProfileRepository(client)
    repository.save("myfitnessai-user", {"goal": "cut"})

    assert profiles_table.last_payload == {
        "profile_key": "myfitnessai-user",
        "payload": {"goal": "cut"},
    }
    assert profiles_table.last_on_conflict == "profile_key"


def test_supabase_profile_repository_delete() -> None:
    client = FakeSupabaseClient()
    profiles_table = client.table("profiles")

    repository = SupabaseProfileRepository(client)
    repository.delete("myfitnessai-user")

    assert profiles_table.actions == ["delete"]
    assert profiles_table.last_filters == [("profile_key", "myfitnessai-user")]

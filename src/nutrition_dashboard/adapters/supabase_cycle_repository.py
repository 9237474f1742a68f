"""Supabase repository for logging cycles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_dashboard.domain.settings import LoggingCycle
from nutrition_dashboard.services.cycles import CycleRepository


@dataclass
class SupabaseCycleRepository(CycleRepository):
    """Supabase implementation for logging cycles."""

    client: Client

    def list_cycles(self, user_id: UUID) -> list[LoggingCycle]:
        """Return cycles for a user, newest first."""
        response = (
            self.client.table("logging_cycles")
            .select("id, user_id, name, created_at")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_cycle(self, user_id: UUID, cycle_id: UUID) -> LoggingCycle | None:
        """Return a cycle owned by the user."""
        response = (
            self.client.table("logging_cycles")
            .select("id, user_id, name, created_at")
            .eq("user_id", str(user_id))
            .eq("id", str(cycle_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_cycle(self, user_id: UUID, name: str) -> LoggingCycle:
        """Insert a cycle row and return it."""
        response = (
            self.client.table("logging_cycles")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create logging cycle")
        return _parse_row(response.data[0])

    def delete_cycle(self, cycle_id: UUID) -> None:
        """Delete a cycle row."""
        self.client.table("logging_cycles").delete().eq("id", str(cycle_id)).execute()


def _parse_row(row: dict[str, object]) -> LoggingCycle:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min
    )
    return LoggingCycle(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        created_at=created_at,
    )

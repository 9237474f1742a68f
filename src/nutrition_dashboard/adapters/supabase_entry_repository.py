"""Supabase repository for daily entries."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_dashboard.domain.entries import DailyEntry, EntryInput
from nutrition_dashboard.services.entries import EntryRepository

_TABLE = "daily_entries"
_NUMERIC_COLUMNS = (
    "calories",
    "calories_burned",
    "carbs",
    "sugar",
    "protein",
    "fiber",
    "fat",
    "sodium",
)


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for daily entries."""

    client: Client

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return a user's entries ordered newest first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        """Return an entry owned by the user."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_entry(self, user_id: UUID, values: EntryInput) -> DailyEntry:
        """Insert an entry row and return it."""
        payload = {"user_id": str(user_id), **_serialize_values(values)}
        response = self.client.table(_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create daily entry")
        return _parse_row(response.data[0])

    def update_entry(self, entry_id: UUID, values: EntryInput) -> DailyEntry:
        """Replace an entry's values and return the stored row."""
        response = (
            self.client.table(_TABLE)
            .update(_serialize_values(values))
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update daily entry")
        return _parse_row(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table(_TABLE).delete().eq("id", str(entry_id)).execute()

    def unassign_cycle(self, user_id: UUID, cycle_id: UUID) -> int:
        """Clear the cycle from the user's entries in it."""
        response = (
            self.client.table(_TABLE)
            .update({"cycle_id": None})
            .eq("user_id", str(user_id))
            .eq("cycle_id", str(cycle_id))
            .execute()
        )
        return len(response.data or [])


def _serialize_values(values: EntryInput) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": values.date,
        "drinks": values.drinks,
        "cycle_id": str(values.cycle_id) if values.cycle_id else None,
    }
    for column in _NUMERIC_COLUMNS:
        payload[column] = getattr(values, column)
    return payload


def _parse_row(row: dict[str, object]) -> DailyEntry:
    cycle_raw = row.get("cycle_id")
    drinks_raw = row.get("drinks")
    numbers = {column: float(row.get(column) or 0.0) for column in _NUMERIC_COLUMNS}
    return DailyEntry(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["user_id"])),
        date=str(row["date"]),
        drinks=float(drinks_raw) if drinks_raw is not None else None,
        cycle_id=UUID(str(cycle_raw)) if cycle_raw else None,
        **numbers,
    )

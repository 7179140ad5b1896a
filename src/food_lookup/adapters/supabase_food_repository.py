"""Supabase implementation for the reference food table."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from food_lookup.domain.foods import FoodRecord
from food_lookup.services.library import FoodRepository

FOODS_TABLE = "tabela_taco"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the food table."""

    client: Client
    table_name: str = FOODS_TABLE

    def list_foods(self, limit: int | None = None) -> list[FoodRecord]:
        """Return foods ordered by name, optionally capped."""
        query = self.client.table(self.table_name).select("*").order("alimento")
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: int | str) -> FoodRecord | None:
        """Return a food by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(self, payload: dict[str, str]) -> FoodRecord:
        """Create a food row and return it."""
        response = self.client.table(self.table_name).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_food(response.data[0])

    def update_food(self, food_id: int | str, payload: dict[str, str]) -> FoodRecord:
        """Update a food row and return it."""
        response = (
            self.client.table(self.table_name)
            .update(payload)
            .eq("id", food_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food entry")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: int | str) -> None:
        """Delete a food row."""
        self.client.table(self.table_name).delete().eq("id", food_id).execute()


def _parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a food table row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return FoodRecord(
        id=row["id"],
        name=str(row.get("alimento") or ""),
        calories=_text(row.get("caloria")),
        protein=_text(row.get("proteina")),
        carbs=_text(row.get("carboidrato")),
        fats=_text(row.get("gordura")),
        fiber=_text(row.get("fibra")),
        created_at=created_at,
    )


def _text(value: object) -> str:
    if value is None or value == "":
        return "0"
    return str(value)

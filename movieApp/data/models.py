# Movie dataclass (the only persisted entity)
from __future__ import annotations
from dataclasses import dataclass

from movieApp.settings import RATING_CHOICES


@dataclass(slots=True)
class Movie:
    title: str
    genre: str
    rating: str
    is_favorite: bool = False
    id: int | None = None           # assigned by the store on insert

    @property
    def rating_valid(self) -> bool:
        return self.rating in RATING_CHOICES

    @classmethod
    def from_row(cls, row) -> "Movie":
        """Build a Movie from a `sqlite3.Row` of the **movie** table."""
        return cls(
            id=row["id"],
            title=row["title"],
            genre=row["genre"],
            rating=row["rating"],
            is_favorite=bool(row["isFavorite"]),
        )

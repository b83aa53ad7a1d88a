"""data.repo
Domain-level repository for the movie list.

All SQL lives here; other layers import this module instead of touching
`sqlite3` directly.

`get_all()` is the live read path: subscribers get the full list
(newest first) right away and again after every write that changed a row.
Writes and their publish happen under the database lock, so emissions
arrive in the same order as the writes that caused them.
"""

from __future__ import annotations
import threading
from typing import Callable, List, Optional

from movieApp.data.models import Movie
from movieApp.data.movie_db import MovieDatabase
from movieApp.settings import RATING_CHOICES
from movieApp.utils import log_debug

MoviesCallback = Callable[[List[Movie]], None]

_SELECT_ALL = "SELECT id, title, genre, rating, isFavorite FROM movie ORDER BY id DESC"


class Subscription:
    """Cancellable handle returned by `MovieRepo.get_all`."""

    def __init__(self, repo: "MovieRepo", callback: MoviesCallback) -> None:
        self._repo = repo
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._repo._unsubscribe(self)


class MovieRepo:
    """High-level CRUD and live query for Movie objects."""

    def __init__(self, db: MovieDatabase) -> None:
        self.db = db
        self._subs: list[Subscription] = []
        self._subs_lock = threading.Lock()

    # ───────────────────────────── live query ────────────────────────
    def get_all(self, callback: MoviesCallback) -> Subscription:
        """Subscribe *callback* to the ordered movie list.

        The current list is delivered before this returns (on the calling
        thread); later lists are delivered on whichever thread performed the
        write.
        """
        sub = Subscription(self, callback)
        with self.db.lock:
            callback(self.all_movies())
            # registered only once the first list went through
            with self._subs_lock:
                self._subs.append(sub)
        return sub

    def _unsubscribe(self, sub: Subscription) -> None:
        with self._subs_lock:
            if sub in self._subs:
                self._subs.remove(sub)

    @property
    def subscriber_count(self) -> int:
        with self._subs_lock:
            return len(self._subs)

    def _publish(self) -> None:
        # caller holds db.lock
        with self._subs_lock:
            subs = list(self._subs)
        if not subs:
            return
        movies = self.all_movies()
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.callback(list(movies))
            except Exception as e:
                # the write is already committed; keep feeding the others
                log_debug(f"movie list subscriber error: {e!r}")

    # ───────────────────────────── look-ups ──────────────────────────
    def all_movies(self) -> List[Movie]:
        """One-shot read of every movie, highest id first."""
        rows = self.db.fetch_all(_SELECT_ALL)
        return [Movie.from_row(r) for r in rows]

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Return the `Movie` for *movie_id* or **None** if not found."""
        row = self.db.fetch_one(
            "SELECT id, title, genre, rating, isFavorite FROM movie WHERE id=? LIMIT 1",
            (movie_id,),
        )
        return Movie.from_row(row) if row else None

    # ───────────────────────────── writers ───────────────────────────
    def insert(self, movie: Movie) -> None:
        """Store *movie*; a new id is assigned when ``movie.id`` is None.

        A supplied id that already exists is overwritten, not rejected.

        Raises
        ------
        ValueError
            If the rating is not one of `RATING_CHOICES`.
        sqlite3.Error
            Propagated from the engine after rollback.
        """
        _check_rating(movie)
        fav = int(bool(movie.is_favorite))
        if movie.id is None:
            sql = "INSERT INTO movie (title, genre, rating, isFavorite) VALUES (?,?,?,?)"
            params: tuple = (movie.title, movie.genre, movie.rating, fav)
        else:
            sql = ("INSERT OR REPLACE INTO movie (id, title, genre, rating, isFavorite)"
                   " VALUES (?,?,?,?,?)")
            params = (movie.id, movie.title, movie.genre, movie.rating, fav)
        self._write(sql, params)

    def update(self, movie: Movie) -> None:
        """Persist every column of an existing row; unknown id is a no-op."""
        _check_id(movie)
        _check_rating(movie)
        self._write(
            "UPDATE movie SET title=?, genre=?, rating=?, isFavorite=? WHERE id=?",
            (movie.title, movie.genre, movie.rating, int(bool(movie.is_favorite)), movie.id),
        )

    def delete(self, movie: Movie) -> None:
        """Remove the row with ``movie.id``; unknown id is a no-op."""
        _check_id(movie)
        self._write("DELETE FROM movie WHERE id=?", (movie.id,))

    def set_favorite(self, movie_id: int, value: bool) -> None:
        """Flip only the favorite column of one row."""
        if movie_id is None:
            raise ValueError("Movie has no id; insert it first.")
        self._write(
            "UPDATE movie SET isFavorite=? WHERE id=?", (int(bool(value)), movie_id)
        )

    def _write(self, sql: str, params: tuple) -> None:
        with self.db.lock:
            cur = self.db.write(sql, params)
            if cur.rowcount > 0:
                self._publish()


def _check_rating(movie: Movie) -> None:
    if not movie.rating_valid:
        raise ValueError(
            f"Rating must be one of {', '.join(RATING_CHOICES)}; got {movie.rating!r}"
        )


def _check_id(movie: Movie) -> None:
    if movie.id is None:
        raise ValueError("Movie has no id; insert it first.")

"""
controller
~~~~~~~~~~
`MovieController` sits between the pages and `MovieRepo`.

* Holds the latest movie list (`movies`) and announces changes through
  ``movies_changed``.
* Keeps at most one live subscription to the repo. Pages call `attach()`
  while visible and `detach()` when they go away; the subscription is kept
  for ``idle_ms`` after the last detach so quick hide/show cycles reuse it.
* Every write runs on the controller's own thread pool and returns a
  `concurrent.futures.Future`. The UI may ignore it; nothing else reports
  a failed write back to the pages.
"""

from __future__ import annotations
import threading
from concurrent.futures import Future
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal

from movieApp import settings
from movieApp.data.models import Movie
from movieApp.data.repo import MovieRepo, Subscription
from movieApp.gui.workers import _StoreTask
from movieApp.utils import log_debug


class MovieController(QObject):
    movies_changed = Signal(object)     # list[Movie], newest first

    def __init__(
        self,
        repo: MovieRepo,
        *,
        idle_ms: int | None = None,
        workers: int | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._repo = repo
        self._movies: List[Movie] = []
        self._lock = threading.Lock()
        self._consumers = 0
        self._live: Optional[Future] = None     # Future[Subscription]
        self._closed = False

        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(workers or settings.WORKER_THREADS)

        self._idle_timer = QTimer(self)
        self._idle_timer.setSingleShot(True)
        self._idle_timer.setInterval(
            settings.SUBSCRIPTION_IDLE_MS if idle_ms is None else idle_ms
        )
        self._idle_timer.timeout.connect(self._teardown)

    # ───────────────────────── snapshot ──────────────────────────────────
    @property
    def movies(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    @property
    def consumers(self) -> int:
        return self._consumers

    @property
    def is_subscribed(self) -> bool:
        return self._live is not None

    def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
        """Look *movie_id* up in the cached list (no store round-trip)."""
        with self._lock:
            return next((m for m in self._movies if m.id == movie_id), None)

    def _on_movies(self, movies: List[Movie]) -> None:
        # runs on whichever thread wrote to the store
        with self._lock:
            self._movies = list(movies)
        self.movies_changed.emit(list(movies))

    # ───────────────────────── subscription lifecycle ────────────────────
    def attach(self) -> Future:
        """
        Register one consumer. Returns a future that resolves once the live
        subscription has delivered its first list.
        """
        self._ensure_open()
        self._consumers += 1
        self._idle_timer.stop()
        if self._live is None or _failed(self._live):
            log_debug("controller: subscribing to movie list")
            self._live = self._submit("subscribe", self._repo.get_all, self._on_movies)
        return self._live

    def detach(self) -> None:
        if self._consumers == 0:
            return
        self._consumers -= 1
        if self._consumers == 0 and self._live is not None:
            self._idle_timer.start()

    def _teardown(self) -> None:
        live, self._live = self._live, None
        if live is None:
            return
        log_debug("controller: dropping movie list subscription")
        live.add_done_callback(_cancel_subscription)

    # ───────────────────────── writes ────────────────────────────────────
    def add_movie(self, movie: Movie) -> Future:
        return self._submit("add", self._repo.insert, movie)

    def update_movie(self, movie: Movie) -> Future:
        return self._submit("update", self._repo.update, movie)

    def delete_movie(self, movie: Movie) -> Future:
        return self._submit("delete", self._repo.delete, movie)

    def toggle_favorite(self, movie: Movie) -> Future:
        """Ask the store to store the opposite of *movie*'s current flag.

        Based on the caller's copy, so two toggles racing on the same
        movie can cancel out: the last one written wins.
        """
        return self._submit(
            "favorite", self._repo.set_favorite, movie.id, not movie.is_favorite
        )

    def _submit(self, label: str, fn: Callable[..., Any], *args: Any) -> Future:
        self._ensure_open()
        task = _StoreTask(label, fn, *args)
        future = task.future
        self._pool.start(task)
        return future

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("MovieController is closed")

    # ───────────────────────── shutdown ──────────────────────────────────
    def close(self) -> None:
        """Cancel the subscription and wait for queued writes to finish."""
        if self._closed:
            return
        self._idle_timer.stop()
        self._consumers = 0
        self._teardown()
        self._pool.waitForDone()
        self._closed = True


def _failed(live: Future) -> bool:
    return live.done() and (live.cancelled() or live.exception() is not None)


def _cancel_subscription(live: Future) -> None:
    if live.cancelled() or live.exception() is not None:
        return
    sub: Subscription = live.result()
    sub.cancel()

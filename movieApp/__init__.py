"""
movieApp
~~~~~~~~

Top-level package for the Movie App: a personal movie list kept in SQLite
and shown in a PySide6 window.

Exports:
  - Movie, MovieDatabase, MovieRepo (storage)
  - MovieController (live list + background writes)
"""

from movieApp.data            import Movie, MovieDatabase, MovieRepo, Subscription
from movieApp.gui.controller  import MovieController

__all__ = [
    "Movie",
    "MovieDatabase",
    "MovieRepo",
    "Subscription",
    "MovieController",
]

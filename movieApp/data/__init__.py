"""
data
~~~~
Storage layer for the movie list:

* models   – `Movie` dataclass
* movie_db – the one SQLite connection (schema, lock, exclusive access)
* repo     – all SQL + the live "all movies" query
"""

from movieApp.data.models   import Movie
from movieApp.data.movie_db import MovieDatabase
from movieApp.data.repo     import MovieRepo, Subscription

__all__ = ["Movie", "MovieDatabase", "MovieRepo", "Subscription"]

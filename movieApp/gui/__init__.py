"""
gui
~~~
All Qt widgets, pages and the controller.

•  No direct SQL here – everything goes through `data.repo` via
   `MovieController`.
"""

from movieApp.gui.controller  import MovieController
from movieApp.gui.main_window import MainWindow
from movieApp.gui.list_page   import MovieListPage
from movieApp.gui.form_page   import MovieFormPage
from movieApp.gui.movie_card  import MovieCard

__all__ = [
    "MovieController",
    "MainWindow", "MovieListPage", "MovieFormPage", "MovieCard",
]

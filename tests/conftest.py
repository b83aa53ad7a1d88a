import os
import time

import pytest

# Widgets need a platform plugin even when nothing is shown on screen
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from movieApp import settings
from movieApp.data import Movie, MovieDatabase, MovieRepo
from movieApp.gui.controller import MovieController


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole run (timers and widgets need it)."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def log_path(tmp_path, monkeypatch):
    """Keep log_debug output out of the package directory."""
    path = tmp_path / "movie_app.log"
    monkeypatch.setattr(settings, "LOG_PATH", path)
    return path


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "movies.sqlite"


@pytest.fixture
def db(db_path):
    """Fresh database file for each test."""
    database = MovieDatabase(db_path, timeout=0.1)
    try:
        yield database
    finally:
        database.close()


@pytest.fixture
def repo(db):
    return MovieRepo(db)


@pytest.fixture
def controller(repo):
    """Controller with a short idle window so teardown is testable."""
    ctl = MovieController(repo, idle_ms=50, workers=2)
    try:
        yield ctl
    finally:
        ctl.close()


@pytest.fixture
def wait_until():
    """Pump the Qt event loop until *predicate* holds or *timeout* passes."""

    def _wait(predicate, timeout: float = 3.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            QCoreApplication.processEvents()
            if predicate():
                return True
            time.sleep(0.01)
        QCoreApplication.processEvents()
        return predicate()

    return _wait


def make_movie(title="Inception", genre="Sci-Fi", rating="9", **kw) -> Movie:
    return Movie(title=title, genre=genre, rating=rating, **kw)


@pytest.fixture
def movie_factory():
    return make_movie

# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import QApplication, QMainWindow, QStackedWidget

from movieApp.data.models     import Movie
from movieApp.gui.controller  import MovieController
from movieApp.gui.form_page   import MovieFormPage
from movieApp.gui.list_page   import MovieListPage
from movieApp.utils           import apply_palette


class MainWindow(QMainWindow):
    """List / add / edit screens behind a tiny route stack."""

    def __init__(self, controller: MovieController, dark: bool = False):
        super().__init__()
        self.setWindowTitle("🎬 MovieApp")
        self.resize(480, 720)
        self.controller = controller
        self._history: list[str] = []
        self._attached = False

        # ── pages ────────────────────────────────────────────────────────
        self.list_page = MovieListPage(self)
        self.form_page = MovieFormPage(self)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.list_page)
        self.pages.addWidget(self.form_page)
        self.setCentralWidget(self.pages)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        self.theme_action = QAction("Dark mode", self)
        self.theme_action.setCheckable(True)
        self.theme_action.setChecked(dark)
        self.theme_action.toggled.connect(self._on_theme)
        tb.addAction(self.theme_action)

        # ── wiring ──────────────────────────────────────────────────────
        controller.movies_changed.connect(self.list_page.display_movies)
        self.list_page.display_movies(controller.movies)

        self.list_page.request_add.connect(lambda: self.navigate("add"))
        self.list_page.request_edit.connect(lambda mid: self.navigate(f"edit/{mid}"))
        self.list_page.request_toggle.connect(controller.toggle_favorite)

        self.form_page.request_save.connect(self._on_save)
        self.form_page.request_delete.connect(self._on_delete)
        self.form_page.request_back.connect(self.go_back)

        self.navigate("list")

    # ─── routing ───────────────────────────────────────────────────────
    @property
    def route(self) -> str:
        return self._history[-1] if self._history else ""

    def navigate(self, route: str) -> bool:
        """Show "list", "add" or "edit/<id>". Returns False if not routable."""
        if route == "list":
            self.pages.setCurrentWidget(self.list_page)
        elif route == "add":
            self.form_page.load(None)
            self.pages.setCurrentWidget(self.form_page)
        elif route.startswith("edit/"):
            try:
                movie_id = int(route.split("/", 1)[1])
            except ValueError:
                return False
            movie = self.controller.get_movie_by_id(movie_id)
            if movie is None:
                self.statusBar().showMessage("That movie no longer exists.", 3000)
                return False
            self.form_page.load(movie)
            self.pages.setCurrentWidget(self.form_page)
        else:
            return False
        self._history.append(route)
        return True

    @Slot()
    def go_back(self) -> None:
        if len(self._history) > 1:
            self._history.pop()
        previous = self._history.pop() if self._history else "list"
        if not self.navigate(previous):
            self.navigate("list")

    # ─── form actions (fire-and-forget) ────────────────────────────────
    @Slot(object)
    def _on_save(self, movie: Movie) -> None:
        if movie.id is None:
            self.controller.add_movie(movie)
        else:
            self.controller.update_movie(movie)
        self.go_back()

    @Slot(object)
    def _on_delete(self, movie: Movie) -> None:
        self.controller.delete_movie(movie)
        self.go_back()

    @Slot(bool)
    def _on_theme(self, dark: bool) -> None:
        apply_palette(QApplication.instance(), dark)

    # ─── consumer lifecycle ────────────────────────────────────────────
    def showEvent(self, event):
        super().showEvent(event)
        if not self._attached:
            self.controller.attach()
            self._attached = True

    def closeEvent(self, event):
        if self._attached:
            self.controller.detach()
            self._attached = False
        super().closeEvent(event)

from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QScrollArea
)

from ..data.models import Movie
from .movie_card   import MovieCard

EMPTY_TEXT = "🎞️ No movies yet.\nPress + to add!"


class MovieListPage(QWidget):
    """Scrollable column of `MovieCard`s plus the "+ Add" button."""
    request_add    = Signal()
    request_edit   = Signal(int)      # movie id
    request_toggle = Signal(object)   # Movie

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._cards: list[MovieCard] = []
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        self.empty_lbl = QLabel(EMPTY_TEXT, alignment=Qt.AlignCenter)
        self.empty_lbl.setStyleSheet("font-size:16px;")
        root.addWidget(self.empty_lbl, 1)

        self._column = QVBoxLayout()
        self._column.setAlignment(Qt.AlignTop)
        holder = QWidget()
        holder.setLayout(self._column)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(holder)
        root.addWidget(self.scroll, 1)

        bar = QHBoxLayout()
        bar.addStretch()
        self.add_btn = QPushButton("＋ Add")
        self.add_btn.setAutoDefault(False)
        self.add_btn.clicked.connect(self.request_add.emit)
        bar.addWidget(self.add_btn)
        root.addLayout(bar)

        self.display_movies([])

    # ----- slots --------------------------------------------------------
    @Slot(object)
    def display_movies(self, movies: list[Movie]) -> None:
        """Rebuild the card column from *movies* (already newest-first)."""
        for card in self._cards:
            self._column.removeWidget(card)
            card.deleteLater()
        self._cards = []

        for movie in movies:
            card = MovieCard(movie)
            card.clicked.connect(self.request_edit.emit)
            card.favorite_clicked.connect(self.request_toggle.emit)
            self._column.addWidget(card)
            self._cards.append(card)

        empty = not movies
        self.empty_lbl.setVisible(empty)
        self.scroll.setVisible(not empty)

    def cards(self) -> list[MovieCard]:
        return list(self._cards)

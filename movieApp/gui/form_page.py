from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QFormLayout, QLineEdit, QComboBox,
    QPushButton, QLabel
)

from ..data.models import Movie
from ..settings    import RATING_CHOICES, DEFAULT_RATING
from ..utils       import share_text, copy_to_clipboard


class MovieFormPage(QWidget):
    """
    Add / edit form. `load(None)` prepares an empty add form,
    `load(movie)` fills it for editing.

    The page never writes anything itself; it emits the finished `Movie`
    and the window hands it to the controller.
    """
    request_save   = Signal(object)   # Movie (id None ⇒ add)
    request_delete = Signal(object)   # Movie
    request_back   = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._movie_id: int | None = None
        self._favorite = False
        self._build_ui()
        self.load(None)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignTop)

        self.heading = QLabel()
        self.heading.setStyleSheet("font-size:18px; font-weight:bold;")
        root.addWidget(self.heading)

        form = QFormLayout()
        self.title_edit = QLineEdit()
        self.genre_edit = QLineEdit()
        self.rating_box = QComboBox()
        self.rating_box.addItems(list(RATING_CHOICES))
        form.addRow("Title",  self.title_edit)
        form.addRow("Genre",  self.genre_edit)
        form.addRow("Rating", self.rating_box)
        root.addLayout(form)

        self.save_btn   = QPushButton()
        self.delete_btn = QPushButton("Delete movie")
        self.share_btn  = QPushButton("Share movie")
        self.cancel_btn = QPushButton("Cancel")
        self.delete_btn.setStyleSheet("background:#B3261E; color:#ffffff;")
        for w in (self.save_btn, self.delete_btn, self.share_btn, self.cancel_btn):
            w.setAutoDefault(False)
            root.addWidget(w)

        self.status_lbl = QLabel("", alignment=Qt.AlignCenter)
        root.addWidget(self.status_lbl)

        self.save_btn.clicked.connect(self._on_save)
        self.delete_btn.clicked.connect(self._on_delete)
        self.share_btn.clicked.connect(self._on_share)
        self.cancel_btn.clicked.connect(self.request_back.emit)

    # ----- state --------------------------------------------------------
    @property
    def editing(self) -> bool:
        return self._movie_id is not None

    def load(self, movie: Movie | None) -> None:
        self._movie_id = movie.id if movie else None
        self._favorite = movie.is_favorite if movie else False
        self.title_edit.setText(movie.title if movie else "")
        self.genre_edit.setText(movie.genre if movie else "")
        self.rating_box.setCurrentText(movie.rating if movie else DEFAULT_RATING)
        self.heading.setText("Edit movie" if self.editing else "Add movie")
        self.save_btn.setText("Update movie" if self.editing else "Save movie")
        self.delete_btn.setVisible(self.editing)
        self.status_lbl.clear()

    def current_movie(self) -> Movie:
        return Movie(
            id=self._movie_id,
            title=self.title_edit.text().strip(),
            genre=self.genre_edit.text().strip(),
            rating=self.rating_box.currentText(),
            is_favorite=self._favorite,
        )

    # ----- button handlers ---------------------------------------------
    @Slot()
    def _on_save(self) -> None:
        self.request_save.emit(self.current_movie())

    @Slot()
    def _on_delete(self) -> None:
        if self.editing:
            self.request_delete.emit(self.current_movie())

    @Slot()
    def _on_share(self) -> None:
        m = self.current_movie()
        copy_to_clipboard(share_text(m.title, m.genre, m.rating))
        self.status_lbl.setText("Copied to clipboard.")

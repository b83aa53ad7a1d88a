from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QToolButton,
    QGraphicsDropShadowEffect
)

from ..data.models import Movie
from ..settings    import ACCENT_COLOR
from ..utils       import stars


class MovieCard(QFrame):
    """Card with title, genre, rating and a favorite star."""
    clicked          = Signal(int)      # movie id
    favorite_clicked = Signal(object)   # Movie

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setCursor(Qt.PointingHandCursor)

        root = QHBoxLayout(self)
        root.setContentsMargins(16, 12, 16, 12)

        # ── text column ─────────────────────────────────────────────────
        info = QVBoxLayout()
        self.title_lbl = QLabel(movie.title)
        self.title_lbl.setStyleSheet("font-size:20px; font-weight:bold;")
        self.title_lbl.setWordWrap(True)
        self.genre_lbl  = QLabel(f"Genre: {movie.genre}")
        self.rating_lbl = QLabel(f"⭐ Rating: {movie.rating}/10")
        for w in (self.title_lbl, self.genre_lbl, self.rating_lbl):
            info.addWidget(w)
        root.addLayout(info, 1)

        # ── favorite star ───────────────────────────────────────────────
        self.star_btn = QToolButton()
        self.star_btn.setText(stars(movie.is_favorite))
        self.star_btn.setToolTip("Favorite")
        self.star_btn.setAutoRaise(True)
        color = ACCENT_COLOR if movie.is_favorite else "#888888"
        self.star_btn.setStyleSheet(f"font-size:22px; color:{color};")
        self.star_btn.clicked.connect(lambda: self.favorite_clicked.emit(self.movie))
        root.addWidget(self.star_btn, 0, Qt.AlignVCenter)

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.movie.id)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

from __future__ import annotations
from datetime import datetime

from PySide6.QtGui     import QColor, QPalette, QGuiApplication # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieApp import settings


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def apply_palette(app: QApplication, dark: bool) -> None:
    """Apply the dark or light Fusion palette to the application."""
    theme = settings.DARK_THEME if dark else settings.LIGHT_THEME
    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor(theme["background"]))
    palette.setColor(QPalette.WindowText,      QColor(theme["on_surface"]))
    palette.setColor(QPalette.Base,            QColor(theme["surface"]))
    palette.setColor(QPalette.AlternateBase,   QColor(theme["background"]))
    palette.setColor(QPalette.Button,          QColor(theme["surface"]))
    palette.setColor(QPalette.ButtonText,      QColor(theme["on_surface"]))
    palette.setColor(QPalette.Text,            QColor(theme["on_surface"]))
    palette.setColor(QPalette.Link,            QColor(theme["secondary"]))
    palette.setColor(QPalette.Highlight,       QColor(theme["primary"]))
    palette.setColor(QPalette.HighlightedText, QColor(theme["on_primary"]))
    app.setStyle("Fusion")
    app.setPalette(palette)


def share_text(title: str, genre: str, rating: str) -> str:
    """Summary line handed to the share action."""
    return f"Recommending this movie: {title} ({genre}) - Rating: {rating}/10"


def copy_to_clipboard(text: str) -> None:
    """Put *text* on the system clipboard (our desktop 'share' target)."""
    QGuiApplication.clipboard().setText(text)


def stars(is_favorite: bool) -> str:
    return "★" if is_favorite else "☆"

import sys
from PySide6.QtWidgets import QApplication

from movieApp.settings        import DATABASE_PATH, START_DARK
from movieApp.utils           import apply_palette, log_debug
from movieApp.data            import MovieDatabase, MovieRepo
from movieApp.gui.controller  import MovieController
from movieApp.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_palette(app, START_DARK)

    # -------- one database / repo / controller for the whole run -----
    db         = MovieDatabase(DATABASE_PATH)
    repo       = MovieRepo(db)
    controller = MovieController(repo)

    window = MainWindow(controller, dark=START_DARK)
    window.show()

    # -------- run the event-loop -------------------------------------
    try:
        code = app.exec()
    finally:
        controller.close()
        db.close()
        log_debug("movie app exited")
    sys.exit(code)


# Python entry-point guard
if __name__ == "__main__":
    main()

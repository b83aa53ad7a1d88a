from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load optional overrides; real environment variables win
load_dotenv(BASE_DIR / ".env")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}")


# File / folder paths
DATABASE_PATH = Path(os.getenv("MOVIEAPP_DB_PATH") or BASE_DIR / "movie_database.sqlite")
LOG_PATH      = Path(os.getenv("MOVIEAPP_LOG_PATH") or BASE_DIR / "movie_app.log")
SCHEMA_PATH   = BASE_DIR / "data" / "movie_schema.sql"

# Storage
SCHEMA_VERSION = 2
DB_TIMEOUT     = _env_float("MOVIEAPP_DB_TIMEOUT", 5.0)

# Live-query / worker tuning
SUBSCRIPTION_IDLE_MS = _env_int("MOVIEAPP_IDLE_MS", 5000)
WORKER_THREADS       = _env_int("MOVIEAPP_WORKERS", 2)

if SUBSCRIPTION_IDLE_MS < 0:
    raise EnvironmentError("MOVIEAPP_IDLE_MS must be >= 0")
if WORKER_THREADS < 1:
    raise EnvironmentError("MOVIEAPP_WORKERS must be >= 1")

# Ratings are stored as text, picked from a fixed list
RATING_CHOICES = tuple(str(n) for n in range(1, 11))
DEFAULT_RATING = "5"

# UI constants
START_DARK   = os.getenv("MOVIEAPP_DARK_MODE", "false").strip().lower() in {"1", "true", "yes"}
ACCENT_COLOR = "#E50914"

DARK_THEME = {
    "primary":    "#E50914",
    "secondary":  "#B81D24",
    "background": "#121212",
    "surface":    "#1E1E1E",
    "on_primary": "#FFFFFF",
    "on_surface": "#FFFFFF",
}
LIGHT_THEME = {
    "primary":    "#D32F2F",
    "secondary":  "#F06292",
    "background": "#FDFDFD",
    "surface":    "#FFFFFF",
    "on_primary": "#FFFFFF",
    "on_surface": "#000000",
}

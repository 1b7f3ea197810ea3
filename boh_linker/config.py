"""
Central configuration for the Book of Hours linker.

Values are read from environment variables (or a .env file) with sensible
defaults.  The CLI can override the scan-related knobs per invocation.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ── Joplin Data API ───────────────────────────────────────────────────
JOPLIN_URL = os.getenv("JOPLIN_URL", "http://localhost:41184")
# Web Clipper authorisation token (Joplin → Options → Web Clipper)
JOPLIN_TOKEN = os.getenv("JOPLIN_TOKEN", "")
# Items per page when listing folders / tags (the API caps this at 100)
JOPLIN_PAGE_SIZE = int(os.getenv("JOPLIN_PAGE_SIZE", "100"))
# Seconds before a single API call is abandoned
JOPLIN_TIMEOUT = float(os.getenv("JOPLIN_TIMEOUT", "30"))

# ── Scanning ──────────────────────────────────────────────────────────
# Time between clipboard checks (ms)
SCAN_DELAY = max(1, int(os.getenv("BOH_SCAN_DELAY", "50")))
# Notebook where influences are generated and linked to
INFLUENCE_FOLDER_NAME = os.getenv("BOH_FOLDER_NAME", "Influences")
# Semicolon separated titles that aren't actually influences and are
# copied into the document directly
UNINFLUENCED = os.getenv(
    "BOH_UNINFLUENCED", "I've Read...;I'm Reading...;Scrutiny"
)

# ── Logging ───────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "boh_linker.log")


def split_titles(raw: str) -> list[str]:
    """Split a semicolon separated title list, dropping empty entries."""
    return [title for title in raw.split(";") if title]

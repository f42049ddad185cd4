# issuedb/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Database: a single SQLite file unless DATABASE_URL points elsewhere
DB_PATH = Path(os.getenv("DB_PATH", PROJECT_ROOT / "data.db"))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# GitHub (only the CLI talks to GitHub)
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
GITHUB_REPOSITORY = os.getenv("GITHUB_REPOSITORY")  # "owner/repo"
GITHUB_EVENT_PATH = os.getenv("GITHUB_EVENT_PATH")
GITHUB_OUTPUT = os.getenv("GITHUB_OUTPUT")

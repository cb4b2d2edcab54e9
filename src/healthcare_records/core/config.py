
from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# project paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR = BASE_DIR / "data"
RAW_DIR  = DATA_DIR / "raw"
LOGS_DIR = DATA_DIR / "logs"

# input files
SYMPTOMS_FILE = RAW_DIR / "symptoms.csv"
AILMENTS_FILE = RAW_DIR / "ailments.csv"
PATIENTS_FILE = RAW_DIR / "patients.csv"

# Database
DEFAULT_DB_PATH = BASE_DIR / "sql" / "data.db"

DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5433")
DB_NAME = os.getenv("DB_NAME")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url.strip()
    if all([DB_USER, DB_PASSWORD, DB_NAME]):
        return f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    return f"sqlite:///{DEFAULT_DB_PATH}"


DATABASE_URL = _database_url()

# Accessor / logging behaviour
RAISE_ROW_SOURCE_ERRORS = os.getenv("RAISE_ROW_SOURCE_ERRORS", "").strip().lower() in {"1", "true", "yes"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

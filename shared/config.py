# shared/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[1]

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./school_details.db")
DB_ECHO = os.getenv("DB_ECHO", "0").lower() in {"1", "true", "yes"}

# "orm" -> session/object queries, "sql" -> parameterized SQL statements
SCHOOL_DATA_ACCESS = os.getenv("SCHOOL_DATA_ACCESS", "orm").strip().lower()

CREATE_TABLES_ON_STARTUP = os.getenv("CREATE_TABLES_ON_STARTUP", "1").lower() in {"1", "true", "yes"}

STATIC_DIR = Path(os.getenv("STATIC_DIR", str(BASE_DIR / "static")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

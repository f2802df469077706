"""
Create the local database and apply any pending day rollover.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

from fitform.core.config import settings
from fitform.core.logging_config import setup_logging
from fitform.db.init_db import init_db
from fitform.main import run_rollover

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    try:
        init_db()
        rolled = run_rollover()
    except Exception as e:
        print(f"ERROR: database initialization failed: {e}")
        sys.exit(1)
    print(f"Database ready at {settings.DATABASE_URL} (rollover applied: {rolled})")

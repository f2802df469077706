"""
Development server launcher.

Loads the .env file and runs the FitForm API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the FitForm API for local development")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print(f"FitForm AI dev server: http://{args.host}:{args.port} (docs at /docs)")
    uvicorn.run("fitform.main:app", host=args.host, port=args.port, reload=True, log_level="info")


if __name__ == "__main__":
    main()

"""
Run the API with uvicorn and auto-reload.

Reads .env before the settings are imported, so HOST, PORT and LOG_LEVEL
can be set there.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings


def main() -> None:
    base_url = f"http://{settings.HOST}:{settings.PORT}"
    print(f"{settings.PROJECT_NAME} {settings.VERSION}")
    print(f"  users: {base_url}{settings.API_PREFIX}/users")
    print(f"  docs:  {base_url}/docs")

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=True,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

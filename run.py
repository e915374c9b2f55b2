"""Entry point for the Tracker Activities API.

Starts the FastAPI application with uvicorn.  Host, port and database
location come from the environment (``HOST``, ``PORT``,
``DATABASE_URL``); see ``tracker_activities_api/app/core/config.py``.

Subjects and students are not created through the API.  For a local
demo, ``--seed`` inserts a few of each before the server starts.

Usage:
    python run.py
    python run.py --seed
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from tracker_activities_api.app.core.config import settings
from tracker_activities_api.app.main import app

DEMO_SUBJECTS = ["Math", "Science", "History"]
DEMO_STUDENTS = [(1, "Ana"), (2, "Bruno"), (3, "Carla"), (4, "Diego"), (5, "Elena")]

logger = logging.getLogger("tracker_activities_api.run")


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the Tracker Activities API.")
    ap.add_argument("--seed", action="store_true", help="Insert demo subjects and students first")
    args = ap.parse_args()

    if args.seed:
        app.state.database.seed(DEMO_SUBJECTS, DEMO_STUDENTS)
        logger.info("Seeded demo subjects and students")

    logger.info(
        "Health check at http://localhost:%s/api/health", settings.port
    )
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass

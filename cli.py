# cli.py
import argparse
from pathlib import Path

import uvicorn

from config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT, DEFAULT_TASKS_FILE, Settings
from logging_setup import setup_logging
from main import create_app


def parse_settings(argv=None) -> Settings:
    parser = argparse.ArgumentParser(description="Serve the Task API over HTTP.")
    parser.add_argument("--tasks-file", type=str, default=DEFAULT_TASKS_FILE, help="Path to the JSON file holding the tasks.")
    parser.add_argument("--host", type=str, default=DEFAULT_HOST, help="Interface to listen on.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on.")
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["debug", "info", "warning", "error"],
        help="Minimum level of log messages.",
    )

    args = parser.parse_args(argv)
    return Settings(
        tasks_file=Path(args.tasks_file),
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


def main(argv=None):
    settings = parse_settings(argv)
    setup_logging(settings.log_level)
    app = create_app(tasks_file=settings.tasks_file)
    # lifespan="on" so a broken tasks file stops the server instead of being skipped.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level, lifespan="on")


if __name__ == "__main__":
    main()

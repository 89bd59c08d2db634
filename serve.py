import argparse
import logging
import os

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from apps.api.main import app  # noqa: E402

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the docshelf site.")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument(
        "--log-level", default=os.getenv("DOCSHELF_LOG_LEVEL", "info").lower()
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO, format=LOG_FORMAT
    )
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    run()

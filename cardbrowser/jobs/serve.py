"""
Run the card browser service.

Serves the browser endpoints with uvicorn. The set catalog is loaded
during startup.
"""

import argparse
import logging

import uvicorn

from cardbrowser.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run the card browser service")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s on %s:%d", settings.app_name, args.host, args.port)
    uvicorn.run("cardbrowser.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()

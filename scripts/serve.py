"""Start the medical guide API server.

Usage:
    python scripts/serve.py
    python scripts/serve.py --port 8080 --reload
"""

import argparse
import logging

import uvicorn

from medguide.config import ensure_api_key, settings


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the medical guide API.")
    parser.add_argument("--host", default=settings.host, help="Bind address.")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )
    ensure_api_key(settings)
    logging.getLogger("uvicorn.error").info("Server running on http://%s:%s", args.host, args.port)
    uvicorn.run(
        "medguide.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

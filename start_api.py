#!/usr/bin/env python3
"""
Startup script for the Clippy events publisher API.

Usage:
    python start_api.py              # Development mode
    python start_api.py --prod       # Production mode
    python start_api.py --port 8080  # Custom port
"""

import argparse
import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the Clippy events publisher API")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8001,
        help="Port to bind to (default: 8001)"
    )
    parser.add_argument(
        "--prod",
        action="store_true",
        help="Run in production mode (no auto-reload)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)"
    )
    return parser


def main(argv=None):
    """Start the FastAPI server with configurable options."""
    args = build_parser().parse_args(argv)

    if args.prod:
        print(f"🚀 Starting Clippy events publisher in PRODUCTION mode")
        print(f"   📍 http://{args.host}:{args.port}")
        print(f"   👷 {args.workers} worker(s)")

        uvicorn.run(
            "api.main:app",
            host=args.host,
            port=args.port,
            workers=args.workers,
            log_level="info",
        )
    else:
        print(f"🔧 Starting Clippy events publisher in DEVELOPMENT mode")
        print(f"   📍 http://{args.host}:{args.port}")
        print(f"   📚 API docs: http://{args.host}:{args.port}/docs")

        uvicorn.run(
            "api.main:app",
            host=args.host,
            port=args.port,
            log_level="debug",
            reload=True,
            reload_dirs=["api", "ingest", "jobs", "publish"],
        )


if __name__ == "__main__":
    main()

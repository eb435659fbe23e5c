"""Development entrypoint for the Tetra Master HTTP API.

Rule overrides are passed to the app through ``TETRA_*`` environment
variables, so they also reach the worker process started by ``--reload``.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import uvicorn


def _apply_overrides(args: argparse.Namespace) -> None:
    overrides = {
        "TETRA_RNG_SEED": args.seed,
        "TETRA_CATALOG_PATH": args.catalog,
        "TETRA_MAX_LEVEL": args.max_level,
    }
    for name, value in overrides.items():
        if value is not None:
            os.environ[name] = str(value)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Tetra Master API server")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    parser.add_argument("--seed", type=int, help="Seed fights for reproducible replays")
    parser.add_argument("--catalog", type=Path, help="JSON card type catalog to serve")
    parser.add_argument("--max-level", type=int, help="Stat scale used when cards fight")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Use 'debug' to log every fight resolution",
    )
    args = parser.parse_args()

    _apply_overrides(args)
    logging.basicConfig(level=args.log_level.upper())

    if args.reload:
        uvicorn.run(
            "tetramaster.api.app:app",
            host=args.host,
            port=args.port,
            reload=True,
            log_level=args.log_level,
        )
    else:
        # Imported late so the app picks up the overrides above.
        from tetramaster.api.app import create_app

        uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()

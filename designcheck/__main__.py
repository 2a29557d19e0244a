"""Run the service with uvicorn: ``python -m designcheck``."""

from __future__ import annotations

import os

import uvicorn

from designcheck.main import create_app


def main() -> None:
    uvicorn.run(
        create_app(),
        host=os.environ.get("DESIGNCHECK_HOST", "127.0.0.1"),
        port=int(os.environ.get("DESIGNCHECK_PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""Run the lookup server: ``python -m collegecost``."""

from __future__ import annotations

import logging

import uvicorn

from collegecost.api.app import create_app
from collegecost.config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(dataset_path=settings.dataset_path)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Main entry point for the API server."""

import logging

import uvicorn

from cryptomania.api.app import app
from cryptomania.config import get_settings


if __name__ == "__main__":
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(app, host=settings.host, port=settings.port)

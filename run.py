#!/usr/bin/env python3
"""Run the FAQ filter HTTP server."""

import os

import uvicorn

from settings.logging import setup_logging
from web.http import create_app

setup_logging(level=os.getenv("LOG_LEVEL", "INFO"), to_file=True)
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))

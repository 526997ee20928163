#!/usr/bin/env python3
"""
Run script for the Attune backend
"""
import uvicorn

from attune.config.settings import settings
from attune.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)

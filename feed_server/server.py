#!/usr/bin/env python3
"""
Event Feed Ranking server — entrypoint for python -m feed_server.server.

For uvicorn use feed_server.app:app.
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)

"""Entry point for running the Pan Eventz API with Uvicorn.

Host and port are read from the environment variables ``HOST`` and
``PORT``; defaults are ``0.0.0.0`` and ``5000``.  All other
configuration (JWT secret, admin credentials, data and uploads
directories, Cloudinary credentials) is read by ``Settings``.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from pan_eventz_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Serving Pan Eventz API on %s:%d", host, port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass

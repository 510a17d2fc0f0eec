"""Command that runs the HTTP server until interrupted."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sqlite3
import threading

from werkzeug.serving import make_server

from zen.app import App

log = logging.getLogger("zen.server")

_SHUTDOWN_TIMEOUT = 10.0


def get_env_with_default(key: str, default_value: str) -> str:
    """Return the environment variable, or the default when unset or empty."""
    return os.environ.get(key, "") or default_value


def _parse_port(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"invalid port {text!r}")
    port = int(text)
    if port > 65535:
        raise ValueError(f"invalid port {text!r}")
    return port


def _serve(zen_app: App, port: int) -> int:
    server = make_server("", port, zen_app.router, threaded=True)
    stop = threading.Event()

    def request_stop(signum, frame):
        stop.set()

    previous = {
        sig: signal.signal(sig, request_stop) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    log.info("Zen server is running on port %s", port)
    worker = threading.Thread(target=server.serve_forever, daemon=True)
    worker.start()
    try:
        while not stop.wait(0.5):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    log.info("Shutting down server...")
    server.shutdown()
    worker.join(_SHUTDOWN_TIMEOUT)
    server.server_close()
    log.info("Server shutdown complete")
    return 0


def main(argv=None) -> int:
    """Run the server; configured by ZEN_DB_PATH and ZEN_PORT."""
    parser = argparse.ArgumentParser(
        prog="zen",
        description="A simple Python script scheduler with zero configuration.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    db_path = get_env_with_default("ZEN_DB_PATH", "zen.db")
    port_text = get_env_with_default("ZEN_PORT", "8080")
    try:
        port = _parse_port(port_text)
    except ValueError as exc:
        log.error("Failed to start server: %s", exc)
        return 1

    try:
        zen_app = App(db_path)
    except sqlite3.Error as exc:
        log.error("Failed to create app: %s", exc)
        return 1

    with zen_app:
        return _serve(zen_app, port)


if __name__ == "__main__":
    raise SystemExit(main())
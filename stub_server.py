"""Run a stub UI app with uvicorn in a background thread."""
import socket
import threading
import time
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


def find_free_port(host: str = "127.0.0.1") -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


class StubServer:
    """uvicorn server on a free local port, running in a daemon thread."""

    def __init__(self, app: FastAPI, host: str = "127.0.0.1", port: Optional[int] = None):
        self.host = host
        self.port = port or find_free_port(host)
        self.server = uvicorn.Server(
            uvicorn.Config(app, host=self.host, port=self.port, log_level="warning")
        )
        self.thread = threading.Thread(target=self.server.run, name=f"stub-ui-{self.port}", daemon=True)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self, timeout: float = 10.0) -> "StubServer":
        self.thread.start()
        deadline = time.monotonic() + timeout
        while not self.server.started:
            if not self.thread.is_alive():
                raise RuntimeError(f"Stub UI on {self.url} exited during start-up")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Stub UI on {self.url} did not start within {timeout}s")
            time.sleep(0.05)
        logger.info(f"Stub UI listening on {self.url}")
        return self

    def stop(self) -> None:
        self.server.should_exit = True
        self.thread.join(timeout=5)
        logger.info(f"Stub UI on {self.url} stopped")

    def __enter__(self) -> "StubServer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

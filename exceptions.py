"""Errors raised by the page objects."""


class E2EError(Exception):
    """Base class for suite errors."""


class PageLoadTimeoutError(E2EError):
    """A page did not reach a terminal state within its wait bound."""

    def __init__(self, description: str, timeout_ms: float):
        self.description = description
        self.timeout_ms = timeout_ms
        super().__init__(f"Timed out after {timeout_ms:g}ms waiting for {description}")


class LoginError(E2EError):
    """Login did not land on the home page."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for errors raised by the chat relay."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(RelayError):
    """The request is missing something the caller must supply."""

    status_code = 400


class UpstreamError(RelayError):
    """The generative-language service failed.

    Only ever carries the client-safe message; the original exception is
    chained as ``__cause__`` and logged server-side.
    """

    status_code = 500


class StartupConfigError(RelayError):
    """Configuration is unusable; the service must not start serving."""


class EmptyUpstreamResponse(Exception):
    """The upstream call returned without any generated text."""

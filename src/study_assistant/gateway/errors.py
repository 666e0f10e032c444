"""Normalized failures raised at the gateway boundary.

Callers only ever see these; transport and parser exceptions are chained
as ``__cause__`` and logged, never surfaced.
"""
from __future__ import annotations


class GatewayError(Exception):
    """Base failure carrying a user-facing message."""
    status_code = 502

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(GatewayError):
    """Required credential or setting missing at startup."""
    status_code = 500


class InvalidRequestError(GatewayError):
    """Caller input rejected before dispatch."""
    status_code = 422


class TransportError(GatewayError):
    """The backend call failed, timed out, or returned nothing."""


class FormatError(GatewayError):
    """A structured response did not parse as JSON."""


class QuizValidationError(GatewayError):
    """A parsed quiz violates the question/options invariants."""


FORMAT_MESSAGE = (
    "Failed to generate the quiz due to an invalid format from the AI. "
    "Please try again with a different text."
)
VALIDATION_MESSAGE = (
    "The AI produced invalid or insufficient answer options. "
    "Please try again with a different text."
)

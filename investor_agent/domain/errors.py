"""Error taxonomy shared by actions, loops and the CLI."""

from typing import Optional, Sequence


class InvestorAgentError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(InvestorAgentError):
    """Raised when an action receives input that does not match its shape."""


class RemoteError(InvestorAgentError):
    """Raised when a market-data API call fails or returns non-2xx."""

    def __init__(self, message: str, status: Optional[int] = None, url: str = ""):
        super().__init__(message)
        self.status = status
        self.url = url


class ConfigurationError(InvestorAgentError):
    """Raised at startup when required environment variables are missing."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            "Required environment variables are not set: " + ", ".join(self.missing)
        )


class LoopFatalError(InvestorAgentError):
    """Raised when a running loop hits an unrecoverable error and stops."""

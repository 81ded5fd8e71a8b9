"""Expose constructed client wrappers."""

from .yahoo_auth import YahooOAuthClient
from .yahoo_errors import UpstreamUnavailableError, YahooAPIError
from .yahoo_fantasy import YahooFantasyClient

__all__ = [
    "UpstreamUnavailableError",
    "YahooAPIError",
    "YahooFantasyClient",
    "YahooOAuthClient",
]

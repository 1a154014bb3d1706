"""
Custom exception hierarchy for the update watcher.
Provides specific exceptions so each pipeline stage can fail with its own kind.
"""


class WatcherException(Exception):
    """Base exception for all watcher-related errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


# =============================================================================
# Scraper Exceptions
# =============================================================================


class ScraperException(WatcherException):
    """Base exception for fetching the watched page."""

    pass


class NetworkException(ScraperException):
    """Exception for network/HTTP errors."""

    pass


class ParsingException(ScraperException):
    """Exception for HTML parsing errors."""

    pass


# =============================================================================
# Notification Exceptions
# =============================================================================


class NotificationException(WatcherException):
    """Base exception for notification delivery errors."""

    pass


class WebhookException(NotificationException):
    """Exception for webhook-related errors."""

    pass


# =============================================================================
# State Exceptions
# =============================================================================


class StateException(WatcherException):
    """Base exception for the persisted last-seen record."""

    pass


class StateReadException(StateException):
    """Exception when the state file cannot be read or decoded."""

    pass


class StateWriteException(StateException):
    """Exception when the state file cannot be written."""

    pass


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(WatcherException):
    """Exception for configuration errors."""

    pass


class MissingConfigException(ConfigurationException):
    """Exception when required configuration is missing."""

    pass

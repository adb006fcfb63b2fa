"""Exceptions raised by cobradocs."""


class CobraDocsError(Exception):
    """Base class for errors that abort a run with a message."""


class ConfigurationError(CobraDocsError):
    """Bad directories or inputs detected before any file is written."""


class NavigationError(CobraDocsError):
    """Raised when a navigation fragment does not have the expected shape."""

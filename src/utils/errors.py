"""Error handling utilities."""


class ListingsSiteError(Exception):
    """Base exception for the listings site backend."""
    pass


class ValidationError(ListingsSiteError):
    """Required request fields are missing."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PersistenceError(ListingsSiteError):
    """Reading or writing a data file failed."""
    pass


class ConfigError(ListingsSiteError):
    """Invalid environment configuration."""
    pass

class TollError(Exception):
    """Base exception for toll fee calculation errors."""
    pass

class InvalidPassageError(TollError):
    """Raised when a passage is not a timestamp."""
    pass

class ConfigurationError(TollError):
    """Raised when the toll configuration is invalid."""
    pass

"""
Base exceptions for browser-auto.
"""


class BrowserAutoError(Exception):
    """
    Base exception for all browser-auto errors.
    
    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.
    
    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(BrowserAutoError):
    """
    Error in configuration.
    
    Raised when a config file cannot be read or does not contain
    a mapping of settings.
    """
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, {"path": path} if path else None)
        self.path = path

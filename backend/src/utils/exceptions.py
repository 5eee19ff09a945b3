"""
Custom exceptions for the relay application
"""

class NihongoRelayException(Exception):
    """Base exception class for all relay errors"""
    status_code = 500

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message

class ValidationError(NihongoRelayException):
    """Raised when request input is missing or invalid"""
    status_code = 400

class ServiceUnavailableError(NihongoRelayException):
    """Raised when a required service is not ready yet"""
    status_code = 503

class ProcessingError(NihongoRelayException):
    """Base class for all processing-related exceptions"""
    pass

class TranslationError(ProcessingError):
    """Raised when translation fails"""
    pass

class ConversionError(ProcessingError):
    """Raised when script conversion fails"""
    pass

class ConfigurationError(NihongoRelayException):
    """Raised when configuration is invalid"""
    pass

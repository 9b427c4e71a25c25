"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingCepException(DomainException):
    """Raised when the request carries no CEP at all"""
    pass


class InvalidCepFormatException(DomainException):
    """Raised when the CEP does not match NNNNN-NNN / NNNNNNNN"""
    pass


class AddressNotFoundException(DomainException):
    """Raised when ViaCEP answers with its own not-found marker"""
    pass


class ProviderException(DomainException):
    """Base para falhas de provedores externos (ViaCEP, WeatherAPI, weather-service)"""
    pass


class ProviderTransportException(ProviderException):
    """Raised when no response could be obtained from the provider"""
    pass


class ProviderDecodeException(ProviderException):
    """Raised when the provider body cannot be decoded into the expected shape"""
    pass


class WeatherProviderErrorException(ProviderException):
    """Raised when WeatherAPI answers with an error envelope"""
    def __init__(self, message: str, code: int = None, details: dict = None):
        super().__init__(message, details=details)
        self.code = code


class UpstreamFailureException(DomainException):
    """Raised by the pipeline when an upstream stage fails (HTTP 500)"""
    pass


class RequestTimeoutException(DomainException):
    """Raised when the whole request exceeds its deadline"""
    pass

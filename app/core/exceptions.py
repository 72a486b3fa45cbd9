from typing import Optional, Any

class ClosiedError(Exception):
    """
    Base exception for the Closied backend.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(ClosiedError):
    """
    Raised when a required field or payload is missing.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class ConflictError(ClosiedError):
    """
    Raised when a unique value (e.g. email) is already taken.
    """
    def __init__(self, message: str = "Resource already exists", details: Optional[Any] = None):
        super().__init__(message, code="CONFLICT", status_code=400, details=details)

class AuthError(ClosiedError):
    """
    Raised when credentials or a bearer token are missing, malformed or unknown.
    """
    def __init__(self, message: str = "Authentication failed", details: Optional[Any] = None):
        super().__init__(message, code="AUTHENTICATION_FAILED", status_code=401, details=details)

class UpstreamError(ClosiedError):
    """
    Raised when the listings API cannot be reached or returns something unusable.
    """
    def __init__(self, message: str = "Upstream listings service error", details: Optional[Any] = None):
        super().__init__(message, code="UPSTREAM_ERROR", status_code=500, details=details)

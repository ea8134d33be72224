"""
Custom exceptions for the DocumentAtom SDK with error tracking details.
"""

import uuid
from typing import Optional, Dict, Any
from datetime import datetime


class DocumentAtomError(Exception):
    """Base exception for the DocumentAtom SDK."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "DOCUMENTATOM_ERROR"
        self.details = details or {}
        self.error_id = str(uuid.uuid4())
        self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "details": self.details
        }


class ConfigurationError(DocumentAtomError):
    """Raised when the client configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, error_code="CONFIG_ERROR", details=details)


class ValidationError(DocumentAtomError):
    """Raised when a required argument is missing."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR", details={"field": field})


class ResponseDeserializationError(DocumentAtomError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        response_body: Optional[str] = None,
        target: Optional[str] = None
    ):
        # Never keep whole documents in the error details
        safe_response = response_body[:500] + "..." if response_body and len(response_body) > 500 else response_body

        details = {
            "url": url,
            "response_body": safe_response,
            "target": target
        }
        super().__init__(message, error_code="DESERIALIZATION_ERROR", details=details)
        self.url = url
        self.response_body = response_body

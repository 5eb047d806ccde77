"""Interfaces (ports) of the application layer."""

from vendor_app.application.interfaces.auth import AuthHeaderProvider, StaticTokenAuth
from vendor_app.application.interfaces.vendor_backend import (
    EndpointResult,
    QuoteRequest,
    VendorBackend,
)

__all__ = [
    "AuthHeaderProvider",
    "StaticTokenAuth",
    "EndpointResult",
    "QuoteRequest",
    "VendorBackend",
]

"""
Infrastructure layer - vendor order console.

Concrete implementations of the application ports.

Structure:
- gateways/: HTTP gateway to the marketplace backend, plus an in-memory stub
- in_memory/: in-memory session storage
"""

from vendor_app.infrastructure.gateways.in_memory import StubVendorBackend
from vendor_app.infrastructure.gateways.vendor_backend_http import VendorBackendHTTP
from vendor_app.infrastructure.in_memory import InMemoryOrderFormSessionRepo

__all__ = [
    # Gateways
    "VendorBackendHTTP",
    "StubVendorBackend",
    # In-Memory
    "InMemoryOrderFormSessionRepo",
]

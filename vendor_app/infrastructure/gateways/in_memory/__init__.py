from vendor_app.infrastructure.gateways.in_memory.vendor_backend import StubVendorBackend

__all__ = ["StubVendorBackend"]

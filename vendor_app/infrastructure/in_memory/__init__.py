"""In-memory implementations for local runs and testing."""

from vendor_app.infrastructure.in_memory.order_form_session_repo import InMemoryOrderFormSessionRepo

__all__ = ["InMemoryOrderFormSessionRepo"]

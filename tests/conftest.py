"""
Pytest configuration and shared fixtures.

Provides:
- An in-memory backend and a mocked backend port
- A FastAPI TestClient wired to a fresh in-memory backend
- Sample form data reused across tests
"""

from typing import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from vendor_app.api.dependencies import get_backend, get_form_sessions
from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.application.use_cases.compose_order import OrderComposer
from vendor_app.infrastructure.gateways.in_memory.vendor_backend import StubVendorBackend
from vendor_app.infrastructure.in_memory.order_form_session_repo import (
    InMemoryOrderFormSessionRepo,
)
from vendor_app.main import app

# ============================================================================
# BACKEND FIXTURES
# ============================================================================


@pytest.fixture
def stub_backend() -> StubVendorBackend:
    return StubVendorBackend()


@pytest.fixture
def mock_backend() -> AsyncMock:
    """Port mock: every backend method is an AsyncMock."""
    return AsyncMock(spec=VendorBackend)


@pytest.fixture
def composer(mock_backend) -> OrderComposer:
    return OrderComposer(backend=mock_backend, vendor_id="vendor-1")


# ============================================================================
# HTTP CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def client(stub_backend) -> Generator[TestClient, None, None]:
    """TestClient with a fresh in-memory backend and session store per test."""
    sessions = InMemoryOrderFormSessionRepo()
    app.dependency_overrides[get_backend] = lambda: stub_backend
    app.dependency_overrides[get_form_sessions] = lambda: sessions

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# SAMPLE DATA
# ============================================================================


@pytest.fixture
def oneway_form_fields():
    """A complete one-way order: Chennai to Bangalore at 12 per km."""
    return {
        "customer_name": "Raj",
        "customer_number": "9999999999",
        "cost_per_km": "12",
    }

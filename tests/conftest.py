"""Shared test fixtures."""

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.tp_ledger.api.router import get_ledger_service
from src.tp_ledger.application.service import LedgerApplicationService


@pytest.fixture
def ledger_service() -> Generator[LedgerApplicationService, None, None]:
    """Fresh in-memory ledger per test, injected into the app."""
    service = LedgerApplicationService()
    app.dependency_overrides[get_ledger_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_ledger_service, None)


@pytest.fixture
async def client(ledger_service: LedgerApplicationService) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

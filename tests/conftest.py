"""Shared pytest fixtures for bizanalytics tests."""

from datetime import date
from decimal import Decimal

import pytest

from bizanalytics.config import Settings
from bizanalytics.domain.dashboard import DashboardService
from bizanalytics.domain.entities import Transaction
from bizanalytics.domain.insights import InsightClient
from bizanalytics.domain.transaction import TransactionService
from bizanalytics.store.memory import InMemoryRecordStore
from bizanalytics.store.sample_data import sample_transactions


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment variables out of tests."""
    for name in ("API_KEY", "BIZANALYTICS_DATA", "BIZANALYTICS_MODEL", "BIZANALYTICS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_transaction():
    """Return a factory building transactions with sensible defaults."""

    def factory(
        id="t1",
        date=date(2024, 1, 15),
        product_name="Widget",
        revenue=0,
        product_cost=0,
        marketing_cost=0,
        other_expenses=0,
    ):
        return Transaction(
            id=id,
            date=date,
            product_name=product_name,
            revenue=Decimal(revenue),
            product_cost=Decimal(product_cost),
            marketing_cost=Decimal(marketing_cost),
            other_expenses=Decimal(other_expenses),
        )

    return factory


@pytest.fixture
def store():
    """Create a record store seeded with the sample transactions."""
    return InMemoryRecordStore(sample_transactions())


@pytest.fixture
def empty_store():
    """Create an empty record store."""
    return InMemoryRecordStore()


@pytest.fixture
def transaction_service(store):
    """Create a TransactionService over the sample store."""
    return TransactionService(store)


@pytest.fixture
def dashboard_service(store):
    """Create a DashboardService over the sample store."""
    return DashboardService(store)


class FakeInsightClient(InsightClient):
    """Insight client recording requests instead of calling the network."""

    def __init__(self, text="**Great** results", error=None):
        self.text = text
        self.error = error
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_client():
    """Create a fake insight client."""
    return FakeInsightClient()


@pytest.fixture
def configured_settings():
    """Settings with an API key present."""
    return Settings(api_key="test-key", model="test-model")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

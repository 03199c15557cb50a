"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from paycheck_insights.api.main import create_app
from paycheck_insights.domain.models import Expense, Subscription, GhostCartItem, UserSettings


# Fixed reference date (a Wednesday) so windows and weekdays are deterministic
TODAY = date(2024, 6, 12)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def default_settings() -> UserSettings:
    """$30/h biweekly, 8% expected return, satisfaction 7"""
    return UserSettings()


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """Thirty days of spending: $20 food every day plus weekly $100 shopping on Saturdays"""
    expenses = []
    for offset in range(30):
        day = TODAY - timedelta(days=offset)
        expenses.append(Expense(amount=20.0, category="food", date=day, expense_id=f"food_{offset}"))
        if day.weekday() == 5:
            expenses.append(Expense(amount=100.0, category="shopping", date=day, expense_id=f"shop_{offset}"))
    return expenses


@pytest.fixture
def sample_subscriptions() -> list[Subscription]:
    return [
        Subscription(amount=11.99, cadence="monthly", created_at=date(2024, 2, 10), name="Spotify Premium", subscription_id="spotify"),
        Subscription(amount=15.49, cadence="monthly", created_at=date(2023, 11, 3), name="Netflix", subscription_id="netflix"),
        Subscription(amount=35.88, cadence="yearly", created_at=date(2023, 6, 12), name="iCloud Storage", subscription_id="icloud"),
    ]


@pytest.fixture
def sample_ghost_cart() -> list[GhostCartItem]:
    return [
        GhostCartItem(price=500.0, ghosted_at=date(2022, 6, 1), item_id="headphones", title="Headphones"),
        GhostCartItem(price=120.0, ghosted_at=date(2024, 6, 1), item_id="sneakers", title="Sneakers"),
    ]

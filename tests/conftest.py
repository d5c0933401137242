"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")

from core.services.models import Role, User  # noqa: E402


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client.

    Query builders chain back to the same mock; only execute() is awaited.
    Tests set ``table.execute.return_value`` to shape the result.
    """
    client = Mock()

    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "eq", "limit", "order"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[], count=0))

    rpc_mock = Mock()
    rpc_mock.execute = AsyncMock(return_value=Mock(data=None))

    client.table.return_value = table_mock
    client.rpc.return_value = rpc_mock

    return client


@pytest.fixture
def sample_user_row():
    """Sample users row"""
    return {
        "id": 1,
        "email": "test@test.com",
        "name": "test",
        "password": "$2b$12$abcdefghijklmnopqrstuv",
        "role": "USER",
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_product_row():
    """Sample products row with embedded children, as PostgREST returns it"""
    return {
        "id": 1,
        "name": "만두 지갑",
        "original_price": 50000,
        "discounted_price": 40000,
        "description": "가죽 지갑입니다.",
        "category": "WALLET",
        "created_at": "2025-01-01T00:00:00Z",
        "keywords": [{"id": 1, "name": "가죽"}, {"id": 2, "name": "지갑"}],
        "images": [
            {"id": 2, "url": "url2", "position": 1},
            {"id": 1, "url": "url1", "position": 0},
        ],
        "options": [
            {"id": 10, "name": "색상", "price": None, "parent_id": None, "position": 0},
            {"id": 11, "name": "검정", "price": 0, "parent_id": 10, "position": 0},
            {"id": 12, "name": "빨강", "price": 1000, "parent_id": 10, "position": 1},
            {"id": 20, "name": "각인", "price": 5000, "parent_id": None, "position": 1},
        ],
    }


@pytest.fixture
def user():
    return User(id=1, email="test@test.com", name="test", password="hashed", role=Role.USER)


@pytest.fixture
def admin_user():
    return User(id=2, email="admin@test.com", name="admin", password="hashed", role=Role.ADMIN)

"""
Shared fixtures: an in-memory Motor client wired into db_config, a TestClient
that skips the lifespan (no real MongoDB), and user/token helpers.
"""
import asyncio
from datetime import datetime, timedelta

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.config.database import db_config, Collections
from app.config.settings import settings
from app.main import app
from app.utils.auth import create_access_token

API = settings.API_PREFIX


def run(coro):
    """Run a coroutine against the mock database from synchronous test code"""
    return asyncio.run(coro)


def make_hotel(name="Grand Hotel", **overrides):
    hotel = {
        "name": name,
        "location": "Lahore",
        "description": "A comfortable stay in the city centre",
        "pricePerNight": 120.0,
        "facilities": ["wifi", "pool"],
        "images": ["https://img.example.com/1.jpg"],
        "roomsAvailable": 10,
        "category": "luxury",
        "owner": None,
        "rating": 4.5,
    }
    hotel.update(overrides)
    return hotel


@pytest.fixture
def mock_db():
    client = AsyncMongoMockClient()
    db_config.client = client
    db_config.database = client["test_hotel_listings"]
    yield db_config.database
    db_config.client = None
    db_config.database = None


@pytest.fixture
def client(mock_db):
    # Not used as a context manager so the lifespan never dials MongoDB
    return TestClient(app)


@pytest.fixture
def insert_hotel(mock_db):
    """Insert a hotel document directly, with an explicit creation time"""
    base_time = datetime(2024, 1, 1)

    def _insert(name="Grand Hotel", minutes=0, **overrides):
        created_at = base_time + timedelta(minutes=minutes)
        doc = make_hotel(name, **overrides)
        doc["createdAt"] = created_at
        doc["updatedAt"] = created_at
        result = run(mock_db[Collections.HOTELS].insert_one(doc))
        return str(result.inserted_id)

    return _insert


def _create_user(mock_db, username, role):
    doc = {
        "username": username,
        "email": f"{username}@hotellistings.com",
        "role": role,
        "password": "not-a-real-hash",
    }
    result = run(mock_db[Collections.USERS].insert_one(doc))
    user_id = str(result.inserted_id)
    return {
        "id": user_id,
        "headers": {
            "Authorization": f"Bearer {create_access_token({'sub': user_id})}",
            "id": user_id,
        },
    }


@pytest.fixture
def admin_user(mock_db):
    return _create_user(mock_db, "admin", "admin")


@pytest.fixture
def regular_user(mock_db):
    return _create_user(mock_db, "traveller", "user")


@pytest.fixture
def legacy_policy(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_ADMIN_WRITES", False)


def count_hotels(mock_db):
    return run(mock_db[Collections.HOTELS].count_documents({}))


def find_hotel(mock_db, hotel_id):
    return run(mock_db[Collections.HOTELS].find_one({"_id": ObjectId(hotel_id)}))

import os
import sys
from datetime import datetime

import mongomock
import pytest

# Path setup before any project imports
ROOT = os.path.dirname(__file__)
PARENT = os.path.abspath(os.path.join(ROOT, ".."))
if PARENT not in sys.path:  # pragma: no cover - environment dependent
    sys.path.insert(0, PARENT)


@pytest.fixture
def app():
    from app import create_app
    from utils.db import mongo

    application = create_app(TESTING=True, MONGO_URI="mongodb://localhost:27017/attendance_test")
    # swap the real client's database for an in-memory one
    mongo.db = mongomock.MongoClient().attendance_test
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    from utils.db import mongo

    return mongo.db


@pytest.fixture
def seed_records(db):
    """Insert records with fixed timestamps directly into the collection."""

    def _seed(*records):
        docs = []
        for rec in records:
            doc = {
                "email": rec.get("email", "someone@example.com"),
                "fullName": rec.get("fullName", "Some One"),
                "contact": rec.get("contact"),
                "isMemberOfMinistry": bool(rec.get("ministries")),
                "ministries": list(rec.get("ministries", [])),
                "timestamp": rec["timestamp"],
                "createdAt": rec["timestamp"],
                "updatedAt": rec["timestamp"],
            }
            doc["_id"] = db.attendances.insert_one(doc).inserted_id
            docs.append(doc)
        return docs

    return _seed


@pytest.fixture
def january_records(seed_records):
    return seed_records(
        {"email": "early@example.com", "timestamp": datetime(2023, 12, 31, 23, 59, 59), "ministries": ["Choir"]},
        {"email": "first@example.com", "timestamp": datetime(2024, 1, 1, 0, 0, 0), "ministries": ["Choir", "Ushering"]},
        {"email": "middle@example.com", "timestamp": datetime(2024, 1, 15, 9, 30, 0)},
        {"email": "last@example.com", "timestamp": datetime(2024, 1, 31, 0, 0, 0), "ministries": ["Media"]},
        {"email": "late@example.com", "timestamp": datetime(2024, 1, 31, 0, 0, 1), "ministries": ["Ushering"]},
    )

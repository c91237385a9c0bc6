"""
Shared test helpers: draft builders and an API test base class wired to an
in-memory SQLite database and a temporary local store.
"""
import os
import shutil
import tempfile
import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from main import app
from api.dependencies import get_local_store
from schemas import PackDraft, QuestionDraft
from storage.local_store import LocalStore


def make_question(prompt="What is 2+2?", options=None, correct_answer=1):
    if options is None:
        options = ["3", "4", "5", "22"]
    return QuestionDraft(question=prompt, options=list(options), correct_answer=correct_answer)


def make_draft(**overrides):
    fields = {
        "name": "Math Basics",
        "description": "Simple arithmetic warm-up",
        "questions": [make_question()],
        "is_public": True,
        "time_limit": 45,
    }
    fields.update(overrides)
    return PackDraft(**fields)


def draft_payload(**overrides):
    """JSON body for pack endpoints, in the frontend's camelCase."""
    payload = {
        "name": "Capitals",
        "description": "European capitals",
        "questions": [
            {
                "question": "Capital of France?",
                "options": ["Berlin", "Paris", "Madrid", "Rome"],
                "correctAnswer": 1,
            }
        ],
        "isPublic": False,
        "timeLimit": 30,
    }
    payload.update(overrides)
    return payload


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


class StoreTestCase(unittest.TestCase):
    """Gives each test its own local store file."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.store_path = os.path.join(self.temp_dir, "local_store.json")
        self.store = LocalStore(self.store_path)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)


class ApiTestCase(StoreTestCase):
    """TestClient against an isolated database and local store."""

    def setUp(self):
        super().setUp()
        self.engine, self.SessionTesting = make_session_factory()
        self.db = self.SessionTesting()

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_local_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.db.close()
        self.engine.dispose()
        super().tearDown()

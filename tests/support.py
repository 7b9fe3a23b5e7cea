"""Shared helpers: test settings, an in-memory SQLite store and an API client over the app factory."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.main import create_app
from app.models import Base

TEST_SECRET = "unit-test-signing-secret"
DEFAULT_PASSWORD = "secret123"


def make_settings(**overrides: Any) -> Settings:
    """Settings for tests; explicit values win over env and .env."""
    values: dict[str, Any] = {"APP_ENV": "dev", "JWT_SECRET": SecretStr(TEST_SECRET)}
    values.update(overrides)
    return Settings(**values)


def make_session_factory() -> sessionmaker:
    """One shared in-memory SQLite connection with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


class ApiTestCase(unittest.TestCase):
    """Base class: fresh database and client per test."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.SessionLocal = make_session_factory()
        app = create_app(self.settings)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()

    def signup(
        self,
        email: str = "user@example.com",
        role: str = "job_seeker",
        password: str = DEFAULT_PASSWORD,
        name: str = "Test User",
        **extra: Any,
    ):
        body = {"name": name, "email": email, "password": password, "role": role, **extra}
        return self.client.post("/api/auth/signup", json=body)

    def signin(self, email: str, password: str = DEFAULT_PASSWORD):
        return self.client.post("/api/auth/signin", json={"email": email, "password": password})

    def account(self, role: str, email: str | None = None, **extra: Any) -> tuple[int, str]:
        """Sign up and sign in; return (user id, token)."""
        email = email or f"{role}@example.com"
        if role == "vendor":
            extra.setdefault("company_name", "Acme Corp")
        resp = self.signup(email=email, role=role, **extra)
        self.assertEqual(resp.status_code, 201, resp.text)
        body = self.signin(email).json()
        return body["user"]["id"], body["token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def count(self, model: type) -> int:
        db = self.SessionLocal()
        try:
            return db.query(model).count()
        finally:
            db.close()

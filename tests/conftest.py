from __future__ import annotations

import os
from collections.abc import Callable
from types import SimpleNamespace

os.environ.setdefault("SOCIAL_LOGIN_ENV", "test")

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import Column, Integer, String, create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from social_login.db.base_class import Base  # noqa: E402
from social_login.models.oauth_identity import OAuthIdentity  # noqa: E402,F401
from social_login.models.schemas import ProviderConfig  # noqa: E402


class User(Base):
    """Stand-in for the host application's user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)


test_engine = create_engine(
    "sqlite:///:memory:",
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=test_engine, expire_on_commit=False)


@pytest.fixture
def db_session():
    """Provide a database session on a fresh schema."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="https://app.example.com/auth/callback",
    )


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], SimpleNamespace]:
    """Build an httpx client whose requests are answered by ``handler``.

    Every request is recorded on ``.requests`` for assertions.
    """

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> SimpleNamespace:
        requests: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_recording))
        return SimpleNamespace(client=client, requests=requests)

    return _build


@pytest.fixture
def user_model() -> type[User]:
    return User


def _response(status: int, body: dict | str) -> httpx.Response:
    if isinstance(body, dict):
        return httpx.Response(status, json=body)
    return httpx.Response(status, text=body)


@pytest.fixture
def provider_endpoints() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler factory answering POSTs with ``token`` and GETs with ``user``.

    Each is a ``(status, body)`` pair; dict bodies are sent as JSON.
    """

    def _build(token: tuple[int, dict | str], user: tuple[int, dict | str] = (200, {})):
        def _handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return _response(*token)
            return _response(*user)

        return _handler

    return _build

"""Fixtures compartilhadas: banco SQLite em memória e cliente da API."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["MIN_ORDER_AMOUNT_DEFAULT"] = "50.00"
os.environ["CURRENCY_CODE"] = "BRL"
os.environ["CURRENCY_LOCALE"] = "pt_BR"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app import create_app
from app.auth.auth import AuthRouter
from app.database.connection import engine
from app.database.populate import hash_password
from app.models.user.user import User


@pytest.fixture
def session():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_user(session: Session, username: str, is_admin: bool) -> User:
    user = User(
        name=username,
        username=username,
        password_hash=hash_password("senha-teste"),
        role="admin" if is_admin else "employee",
        is_admin=is_admin,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def admin_headers(session):
    user = _create_user(session, "admin", is_admin=True)
    return {"Authorization": f"Bearer {AuthRouter()._generate_jwt(user.id)}"}


@pytest.fixture
def employee_headers(session):
    user = _create_user(session, "funcionario", is_admin=False)
    return {"Authorization": f"Bearer {AuthRouter()._generate_jwt(user.id)}"}

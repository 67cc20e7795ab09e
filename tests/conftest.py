import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="bloglist-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FILE"] = ""

import pytest
from fastapi.testclient import TestClient

import models
from database import Base, SessionLocal, engine
from main import app
from security import hash_password


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def root_user(db):
    user = models.User(username="root", name="Superuser", password_hash=hash_password("sekret"))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

"""Shared helpers for the API tests."""
import models
from database import SessionLocal


def users_in_db():
    session = SessionLocal()
    try:
        return [(u.id, u.username) for u in session.query(models.User).all()]
    finally:
        session.close()


def posts_in_db():
    session = SessionLocal()
    try:
        return [
            {"id": p.id, "title": p.title, "likes": p.likes, "user_id": p.user_id}
            for p in session.query(models.Post).order_by(models.Post.id).all()
        ]
    finally:
        session.close()


def register(client, username, password, name=None):
    response = client.post("/api/users", json={"username": username, "password": password, "name": name})
    assert response.status_code == 200, response.text
    return response.json()


def login(client, username, password):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token):
    return {"Authorization": f"bearer {token}"}

"""Registration and login flows."""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import config
import crud
import models
from errors import Conflict, InvalidCredentials, InvalidInput, ValidationFailed
from logger import get_logger
from security import Identity, create_access_token, dummy_verify, hash_password, verify_password

log = get_logger(__name__)


def register_user(db: Session,
                  username: Optional[str],
                  password: Optional[str],
                  name: Optional[str] = None) -> models.User:
    """Create an account after the presence, length and uniqueness checks pass.

    The unique index on ``users.username`` is the final word: a duplicate
    that slips past the lookup (a concurrent registration) surfaces as an
    IntegrityError and is reported as the same Conflict.
    """
    if not username or not password:
        raise InvalidInput("Username and/or password cannot be blank")

    if len(password) < config.MIN_PASSWORD_LENGTH:
        raise ValidationFailed(
            "User validation failed: password is shorter than the minimum "
            f"allowed length ({config.MIN_PASSWORD_LENGTH})"
        )
    if len(username) < config.MIN_USERNAME_LENGTH:
        raise ValidationFailed(
            "User validation failed: username is shorter than the minimum "
            f"allowed length ({config.MIN_USERNAME_LENGTH})"
        )
    if len(username) > config.MAX_USERNAME_LENGTH:
        raise ValidationFailed(
            "User validation failed: username is longer than the maximum "
            f"allowed length ({config.MAX_USERNAME_LENGTH})"
        )
    if name is not None and len(name) > config.MAX_NAME_LENGTH:
        raise ValidationFailed(
            "User validation failed: name is longer than the maximum "
            f"allowed length ({config.MAX_NAME_LENGTH})"
        )

    if crud.get_user_by_username(db, username) is not None:
        log.info("Registration refused, username %r is taken", username)
        raise Conflict(f"{username} is taken")

    password_hash = hash_password(password)
    try:
        user = crud.create_new_user(db, username=username, name=name, password_hash=password_hash)
    except IntegrityError:
        db.rollback()
        log.info("Registration lost a race for username %r", username)
        raise Conflict(f"{username} is taken")

    log.info("Registered user %s (%r)", user.id, user.username)
    return user


def login_user(db: Session, username: str, password: str) -> dict:
    """Check a username/password pair and issue an access token"""
    user = crud.get_user_by_username(db, username)
    if user is None:
        dummy_verify()
        log.info("Failed login for unknown username %r", username)
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        log.info("Failed login for user %s", user.id)
        raise InvalidCredentials()

    token = create_access_token(Identity(user_id=user.id, username=user.username))
    log.info("User %s logged in", user.id)
    return {"token": token, "username": user.username, "name": user.name}

"""Seed a user account from the command line."""
import argparse
import getpass
import sys

import models
from database import Base, SessionLocal, engine
from errors import BlogError
from logger import get_logger, setup_logging
from services import register_user

log = get_logger(__name__)


def create_user(username: str, password: str, name: str | None = None) -> models.User:
    db = SessionLocal()
    try:
        return register_user(db, username=username, password=password, name=name)
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a bloglist user")
    parser.add_argument("username")
    parser.add_argument("--name", default=None, help="display name")
    parser.add_argument("--password", default=None, help="prompted for when omitted")
    args = parser.parse_args(argv)

    setup_logging()
    Base.metadata.create_all(bind=engine)

    password = args.password or getpass.getpass("Password: ")
    try:
        user = create_user(args.username, password, args.name)
    except BlogError as exc:
        log.error("Could not create user %r: %s", args.username, exc.message)
        return 1

    log.info("User created successfully: %s (id %s)", user.username, user.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())

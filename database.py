from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

import config
from logger import get_logger

log = get_logger(__name__)

connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

log.info("Connecting to database (%s)", config.DATABASE_URL.split(":", 1)[0])

engine = create_engine(config.DATABASE_URL, echo=config.SQL_ECHO, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency function that provides a database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

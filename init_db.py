"""Initialize the database by creating all tables defined in the models"""
import models
from database import Base, engine
from logger import get_logger, setup_logging

setup_logging()
log = get_logger(__name__)

log.info("Creating tables on the database...")

Base.metadata.create_all(bind=engine)

log.info("Tables created: %s", ", ".join(sorted(models.Base.metadata.tables)))

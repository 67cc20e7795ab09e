"""Application settings loaded from the environment (and an optional .env file)."""
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in {"1", "true", "yes"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "app.log")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3

# Column widths, shared by the models and the request schemas
MAX_USERNAME_LENGTH = 50
MAX_NAME_LENGTH = 100
MAX_TITLE_LENGTH = 200
MAX_AUTHOR_LENGTH = 100
MAX_URL_LENGTH = 500
MAX_LIKES = 2**31 - 1

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable not set!")

if not SECRET_KEY:
    raise ValueError("SECRET_KEY environment variable not set!")
